"""Perch exception hierarchy.

Shared by the response builder and the template registry so callers
catch one family of types.
"""

from dataclasses import dataclass


class PerchError(Exception):
    """Base for all perch-specific errors."""


class ConfigurationError(PerchError):
    """Raised when a config object fails validation."""


class ResponseAlreadySentError(PerchError):
    """A ResponseBuilder was asked to send a second time."""


@dataclass(frozen=True, slots=True)
class DirectoryReadError(PerchError):
    """The template folder could not be listed.

    Fatal to registry construction: there is no fallback registry.
    """

    folder: str
    reason: str = ""

    def __str__(self) -> str:
        if self.reason:
            return f"error reading from folder {self.folder}: {self.reason}"
        return f"error reading from folder {self.folder}"


@dataclass(frozen=True, slots=True)
class TemplateError(PerchError):
    """Base for template lookup and render failures."""

    name: str
    reason: str = ""

    def __str__(self) -> str:
        if self.reason:
            return f"template {self.name}: {self.reason}"
        return f"template {self.name}"


class TemplateNotFoundError(TemplateError):
    """The name is not part of the registry's index."""

    def __str__(self) -> str:
        return f"template {self.name} not found"


class TemplateReadError(TemplateError):
    """An indexed template could not be read from disk."""


class TemplateRenderError(TemplateError):
    """kida failed to parse or evaluate a template."""


@dataclass(frozen=True, slots=True)
class SerializationError(PerchError):
    """A JSON body could not be encoded. Raised before any I/O."""

    reason: str = ""

    def __str__(self) -> str:
        return f"cannot encode JSON body: {self.reason}" if self.reason else "cannot encode JSON body"


@dataclass(frozen=True, slots=True)
class WriteError(PerchError):
    """The response sink failed while writing. Never retried."""

    reason: str = ""

    def __str__(self) -> str:
        return f"response write failed: {self.reason}" if self.reason else "response write failed"
