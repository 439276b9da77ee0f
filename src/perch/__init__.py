"""perch: the thin layer between an ASGI server and request handlers.

A response builder that sends once and logs once, and a template
registry that renders ``*.tmpl`` files with kida.

Basic usage::

    from perch import ResponseBuilder, TemplateRegistry

    registry = TemplateRegistry.load_folder("./templates")

    async def app(scope, receive, send):
        html = registry.render_html("index.tmpl", {"message": "Hello"})
        await (
            ResponseBuilder.from_scope(scope, send)
            .set_headers({"content-type": "text/html"})
            .build(200, html)
            .send()
        )
"""

__version__ = "0.1.0-dev"
__all__ = [
    "AccessLogConfig",
    "ConfigurationError",
    "DirectoryReadError",
    "PerchError",
    "RequestInfo",
    "ResponseAlreadySentError",
    "ResponseBuilder",
    "SerializationError",
    "TemplateConfig",
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateReadError",
    "TemplateRegistry",
    "TemplateRenderError",
    "WriteError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import perch`` fast and defers loading kida until the
    registry is actually used.
    """
    if name == "ResponseBuilder":
        from perch.http.response import ResponseBuilder

        return ResponseBuilder

    if name == "RequestInfo":
        from perch.http.request import RequestInfo

        return RequestInfo

    if name == "TemplateRegistry":
        from perch.templating.registry import TemplateRegistry

        return TemplateRegistry

    if name in ("AccessLogConfig", "TemplateConfig"):
        from perch import config as _config

        return getattr(_config, name)

    if name in (
        "ConfigurationError",
        "DirectoryReadError",
        "PerchError",
        "ResponseAlreadySentError",
        "SerializationError",
        "TemplateError",
        "TemplateNotFoundError",
        "TemplateReadError",
        "TemplateRenderError",
        "WriteError",
    ):
        from perch import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
