from perch.routes.health import HEALTH_PATH, RouteRegistrar, add_health_check, health_check

__all__ = [
    "HEALTH_PATH",
    "RouteRegistrar",
    "add_health_check",
    "health_check",
]
