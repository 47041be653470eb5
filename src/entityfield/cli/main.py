"""CLI entrypoint for entityfield."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from entityfield import __version__
from entityfield.cli.handlers import build_report, render_json, render_text
from entityfield.config import load_conditions, validate_config_file
from entityfield.constants.branding import CLI_DESCRIPTION
from entityfield.exceptions import ConfigurationError, SnapshotError
from entityfield.exceptions.validation import format_errors
from entityfield.io import load_record
from entityfield.snapshot import build_snapshot

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="entityfield", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    evaluate = subparsers.add_parser("evaluate", help="Evaluate conditions against an entity record")
    evaluate.add_argument("-c", "--config", type=Path, required=True, help="Condition file or directory")
    evaluate.add_argument("-e", "--entity", type=Path, required=True, help="Entity record (YAML or JSON mapping)")
    evaluate.add_argument(
        "-b",
        "--bundle",
        default=None,
        help="Bundle of the entity record (default: the record stands in for every bundle)",
    )
    evaluate.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
    evaluate.add_argument("-v", "--verbose", action="store_true", help="Log each condition verdict")

    validate = subparsers.add_parser("validate-config", help="Validate a condition file without evaluating")
    validate.add_argument("-c", "--config", type=Path, required=True, help="Condition file or directory")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if getattr(args, "verbose", False) else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")

    if args.command == "validate-config":
        return _handle_validate_config(args)

    if args.command != "evaluate":
        parser.error(f"Unsupported command: {args.command}")

    errors = validate_config_file(args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    try:
        condition_set = load_conditions(args.config)
        snapshot = build_snapshot(load_record(args.entity))
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2
    except SnapshotError as exc:
        print(f"Entity error: {exc}", file=sys.stderr)
        return 2

    bundle_ids = (args.bundle,) if args.bundle else condition_set.bundle_ids
    results = condition_set.evaluate_all({bundle_id: snapshot for bundle_id in bundle_ids})
    report = build_report(condition_set, results)
    logger.debug("Evaluated %d condition(s) from %s", len(condition_set), args.config)

    print(render_json(report) if args.format == "json" else render_text(report))
    return 0 if report["passed"] else 1


def _handle_validate_config(args: argparse.Namespace) -> int:
    """Run condition file validation and report results."""
    errors = validate_config_file(args.config)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
