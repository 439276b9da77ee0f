"""``perch render``: strict render of one template to stdout.

Uses ``TemplateRegistry.render`` so failures are reported instead of
producing an empty document.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from perch.config import TemplateConfig
from perch.errors import PerchError
from perch.templating.registry import TemplateRegistry


def _parse_vars(pairs: list[str]) -> dict[str, str]:
    variables: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            msg = f"Invalid --var {pair!r}, expected KEY=VALUE"
            raise ValueError(msg)
        variables[key] = value
    return variables


def _load_json(path: str) -> dict[str, Any]:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        msg = f"{path} must contain a JSON object"
        raise ValueError(msg)
    return data


def render_template(args: argparse.Namespace) -> None:
    """Render ``args.name`` from ``args.folder``. Exits 1 on any error."""
    try:
        variables: dict[str, Any] = {}
        if args.json_file:
            variables.update(_load_json(args.json_file))
        variables.update(_parse_vars(args.var))

        registry = TemplateRegistry.load_folder(args.folder, config=TemplateConfig(suffix=args.suffix))
        output = registry.render(args.name, variables)
    except (PerchError, OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    sys.stdout.write(output)
