"""Perch CLI: inspect and render template folders.

Entry point registered as ``perch`` in ``pyproject.toml``::

    [project.scripts]
    perch = "perch.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``perch`` command."""
    parser = argparse.ArgumentParser(
        prog="perch",
        description="perch: response builder and template registry for ASGI handlers.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- perch templates --------------------------------------------------
    templates_parser = subparsers.add_parser("templates", help="List indexed templates")
    templates_parser.add_argument("folder", help="Template folder")
    templates_parser.add_argument(
        "--suffix",
        default=".tmpl",
        help="Template file suffix (default: .tmpl)",
    )

    # -- perch render -----------------------------------------------------
    render_parser = subparsers.add_parser("render", help="Render a template to stdout")
    render_parser.add_argument("folder", help="Template folder")
    render_parser.add_argument("name", help="Template name (e.g. index.tmpl)")
    render_parser.add_argument(
        "--suffix",
        default=".tmpl",
        help="Template file suffix (default: .tmpl)",
    )
    render_parser.add_argument(
        "--var",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Template variable (repeatable)",
    )
    render_parser.add_argument(
        "--json",
        dest="json_file",
        default=None,
        metavar="FILE",
        help="JSON object file with template variables",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "templates":
        from perch.cli._templates import list_templates

        list_templates(args)
    elif args.command == "render":
        from perch.cli._render import render_template

        render_template(args)
