"""Template registry: a snapshot of a folder's ``*.tmpl`` files.

The folder is listed once, at construction. Files added later stay
invisible until a new registry is built; files edited later are seen,
because every lookup reads from disk again.

Usage::

    registry = TemplateRegistry.load_folder("./templates")
    html = registry.render_html("index.tmpl", {"message": "Hello"})

A registry never mutates after construction, so one instance can be
shared by every request task without locking.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from kida import Environment

from perch.config import TemplateConfig
from perch.errors import (
    DirectoryReadError,
    TemplateError,
    TemplateNotFoundError,
    TemplateReadError,
    TemplateRenderError,
)
from perch.templating.integration import create_environment, render_source

logger = logging.getLogger("perch.templates")


class TemplateRegistry:
    """Resolves template names to file contents and renders them."""

    __slots__ = ("_config", "_env", "_folder", "_names")

    def __init__(
        self,
        folder: Path,
        names: tuple[str, ...],
        *,
        config: TemplateConfig | None = None,
    ) -> None:
        self._folder = folder
        self._names = names
        self._config = config or TemplateConfig()
        self._env: Environment = create_environment(self._config)

    @classmethod
    def load_folder(
        cls,
        folder: str | Path,
        *,
        config: TemplateConfig | None = None,
    ) -> TemplateRegistry:
        """List ``folder`` (non-recursively) and index every name ending in the suffix.

        Raises ``DirectoryReadError`` if the folder is missing, unreadable,
        or not a directory.
        """
        config = config or TemplateConfig()
        config.validate()
        root = Path(folder)
        try:
            entries = [entry.name for entry in root.iterdir()]
        except OSError as exc:
            raise DirectoryReadError(folder=str(folder), reason=str(exc)) from exc

        names = tuple(name for name in sorted(entries) if name.endswith(config.suffix))
        logger.debug("Indexed %d template(s) in %s", len(names), root)
        return cls(root, names, config=config)

    @property
    def folder(self) -> Path:
        return self._folder

    @property
    def names(self) -> tuple[str, ...]:
        """Indexed template names, captured at construction."""
        return self._names

    def __contains__(self, name: object) -> bool:
        return name in self._names

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"TemplateRegistry({str(self._folder)!r}, {len(self._names)} templates)"

    def get_template(self, name: str) -> str:
        """Return the raw source of an indexed template, read fresh from disk.

        Raises ``TemplateNotFoundError`` if ``name`` is not indexed (even
        if such a file exists now) and ``TemplateReadError`` if the file
        can no longer be read.
        """
        for indexed in self._names:
            if indexed == name:
                try:
                    return (self._folder / indexed).read_text(encoding=self._config.encoding)
                except (OSError, UnicodeDecodeError) as exc:
                    raise TemplateReadError(name=name, reason=str(exc)) from exc
        raise TemplateNotFoundError(name=name)

    def render(self, name: str, variables: Mapping[str, Any] | None = None) -> str:
        """Render a template, raising on any failure.

        Raises ``TemplateNotFoundError``, ``TemplateReadError``, or
        ``TemplateRenderError`` for a kida parse or evaluation failure.
        """
        source = self.get_template(name)
        try:
            return render_source(self._env, source, variables or {})
        except Exception as exc:
            raise TemplateRenderError(name=name, reason=str(exc) or type(exc).__name__) from exc

    def render_html(self, name: str, variables: Mapping[str, Any] | None = None) -> str:
        """Render a template, returning ``""`` on any failure.

        WARN: not found, unreadable, malformed and failed-substitution
        templates all come back as an empty string, the same as an
        intentionally empty template. Use ``render`` to tell them apart.
        """
        try:
            return self.render(name, variables)
        except TemplateError as exc:
            logger.debug("Rendering %s failed, returning empty body: %s", name, exc)
            return ""
