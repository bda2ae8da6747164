"""Main CLI entry point for uirecorder."""

from __future__ import annotations

import argparse
import logging
import sys

from uirecorder.cli.commands import events, stats, validate
from uirecorder.logging import configure_logging


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="uirecorder",
        description="uirecorder - inspect exported interaction recordings",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        help="Emit logs as JSON instead of console lines",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # stats command
    stats_parser = subparsers.add_parser("stats", help="Summarize a recording by type and screen")
    stats_parser.add_argument("file", help="Exported recording (JSON array)")

    # events command
    events_parser = subparsers.add_parser("events", help="List events in a recording")
    events_parser.add_argument("file", help="Exported recording (JSON array)")
    events_parser.add_argument("--type", dest="event_type", help="Only events of this type")
    events_parser.add_argument("--screen", help="Only events captured on this screen")
    events_parser.add_argument("--json", dest="as_json", action="store_true", help="Print as JSON")

    # validate command
    validate_parser = subparsers.add_parser("validate", help="Check that a recording is well-formed")
    validate_parser.add_argument("file", help="Exported recording (JSON array)")

    args = parser.parse_args(argv)

    configure_logging(
        json_format=args.json_logs,
        level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    if args.command == "stats":
        stats(args.file)
    elif args.command == "events":
        events(args.file, event_type=args.event_type, screen=args.screen, as_json=args.as_json)
    elif args.command == "validate":
        validate(args.file)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
