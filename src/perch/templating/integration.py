"""Kida environment setup for the template registry.

The environment is created once per registry and never mutated
afterwards. It has no loader: the registry reads template sources
itself and hands them to ``Environment.from_string``.
"""

from collections.abc import Mapping
from typing import Any

from kida import Environment

from perch.config import TemplateConfig


def create_environment(config: TemplateConfig) -> Environment:
    """Create a kida Environment from template configuration."""
    return Environment(
        autoescape=config.autoescape,
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
    )


def render_source(env: Environment, source: str, variables: Mapping[str, Any]) -> str:
    """Parse ``source`` and render it against ``variables``.

    Parsed templates are not cached; each call re-parses.
    """
    template = env.from_string(source)
    return template.render(dict(variables))
