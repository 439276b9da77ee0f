"""``perch templates``: list what a registry would index."""

import argparse
import sys

from perch.config import TemplateConfig
from perch.errors import PerchError
from perch.templating.registry import TemplateRegistry


def list_templates(args: argparse.Namespace) -> None:
    """Print one indexed template name per line. Exits 1 on a bad folder."""
    try:
        registry = TemplateRegistry.load_folder(args.folder, config=TemplateConfig(suffix=args.suffix))
    except PerchError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    for name in registry.names:
        print(name)
