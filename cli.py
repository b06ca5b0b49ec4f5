"""
Command line interface for Orbiter diagnostics.

Examples
--------
List every suggestion Orbiter can attach to an error::

    python cli.py suggestions

Show the advice template for one suggestion kind::

    python cli.py explain run_graph_list
"""

from __future__ import annotations

import argparse
import json
import sys

from loguru import logger

from orbiter.diagnostics import SuggestionKind
from orbiter.exceptions import OrbiterError
from orbiter.reporting import default_catalog, describe_error
from orbiter.utils import configure_logging


def _suggestions_command(args: argparse.Namespace) -> None:
    templates = default_catalog.templates()
    if args.json:
        print(json.dumps(templates, indent=2))
        return
    for kind in SuggestionKind:
        print(kind.value)
        print(f"  {templates[kind.value]}")


def _explain_command(args: argparse.Namespace) -> None:
    try:
        kind = SuggestionKind(args.kind.strip().lower().replace("-", "_"))
    except ValueError:
        valid = ", ".join(kind.value for kind in SuggestionKind)
        raise SystemExit(f"Unknown suggestion kind '{args.kind}'. Available kinds: {valid}")
    print(default_catalog.template(kind))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="orbiter", description="Orbiter diagnostics CLI")
    parser.add_argument("--verbose", action="store_true", help="Emit debug logs to stderr.")
    subparsers = parser.add_subparsers(dest="command")

    suggestions_parser = subparsers.add_parser("suggestions", help="List every suggestion kind and its advice.")
    suggestions_parser.add_argument("--json", action="store_true", help="Render the catalogue as JSON.")
    suggestions_parser.set_defaults(func=_suggestions_command)

    explain_parser = subparsers.add_parser("explain", help="Show the advice for a single suggestion kind.")
    explain_parser.add_argument("kind", help="Suggestion kind (e.g. run_graph_list).")
    explain_parser.set_defaults(func=_explain_command)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    argv = list(sys.argv[1:] if argv is None else argv)
    if not argv:
        parser.print_help()
        return 0
    parsed = parser.parse_args(argv)
    configure_logging("DEBUG" if parsed.verbose else None)
    if not hasattr(parsed, "func"):
        parser.print_help()
        return 0
    try:
        parsed.func(parsed)
    except OrbiterError as exc:
        logger.debug("Command '{}' failed with {}", parsed.command, type(exc).__name__)
        print(describe_error(exc), file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
