"""Perch configuration.

Frozen dataclasses, immutable after creation. Override what you need::

    templates = TemplateConfig(suffix=".html", autoescape=False)
    access_log = AccessLogConfig(format="json")
"""

from dataclasses import dataclass

from perch.errors import ConfigurationError

ACCESS_LOG_FORMATS = frozenset({"text", "json"})


@dataclass(frozen=True, slots=True)
class TemplateConfig:
    """How a TemplateRegistry indexes and renders its folder."""

    # Index
    suffix: str = ".tmpl"
    encoding: str = "utf-8"

    # kida Environment
    autoescape: bool = True
    trim_blocks: bool = False
    lstrip_blocks: bool = False

    def validate(self) -> None:
        if not self.suffix:
            msg = "TemplateConfig.suffix must not be empty"
            raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class AccessLogConfig:
    """Access log emitted by ResponseBuilder.send()."""

    enabled: bool = True
    format: str = "text"  # "text" (fixed-width columns) or "json"
    logger_name: str = "perch.access"

    def validate(self) -> None:
        if self.format not in ACCESS_LOG_FORMATS:
            allowed = ", ".join(sorted(ACCESS_LOG_FORMATS))
            msg = f"Unknown access log format {self.format!r}. Expected one of: {allowed}"
            raise ConfigurationError(msg)
