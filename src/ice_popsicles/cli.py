"""
Command-line interface for the application.

This module provides the main entry point for the CLI.
"""

from __future__ import annotations

import argparse
import sys

from ice_popsicles import __version__
from ice_popsicles.config import get_settings
from ice_popsicles.datasources.usgs import GageFetchError, SiteInfoError
from ice_popsicles.flows.build import build_all
from ice_popsicles.flows.fetch import fetch_all


def _add_states_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--states",
        nargs="+",
        metavar="CODE",
        default=None,
        help="Two-letter state codes (default: states from settings)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="ice-popsicles",
        description="Share of US river gages reporting ice each winter day, drawn as popsicles",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug mode",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("info", help="Show application info")

    fetch_parser = subparsers.add_parser("fetch", help="Fetch daily values and site metadata")
    _add_states_arg(fetch_parser)

    build_parser = subparsers.add_parser("build", help="Build the popsicle chart from cached data")
    _add_states_arg(build_parser)

    refresh_parser = subparsers.add_parser("refresh", help="Fetch data and build the chart")
    _add_states_arg(refresh_parser)

    return parser


def cmd_info(_args: argparse.Namespace) -> int:
    """Handle the 'info' command."""
    settings = get_settings()
    print(f"Application: {settings.app_name}")
    print(f"Version: {__version__}")
    print(f"Environment: {settings.app_env}")
    print(f"Debug: {settings.debug}")
    print(f"Window: {settings.start_date} → {settings.end_date}")
    print(f"States: {len(settings.states)}")
    print(f"Output: {settings.output_path}")
    return 0


def cmd_fetch(args: argparse.Namespace) -> int:
    """Handle the 'fetch' command."""
    result = fetch_all(states=args.states)
    print(
        f"Fetched {len(result['fetched'])} states, "
        f"{len(result['skipped'])} fresh, {len(result['failed'])} failed."
    )
    return 0


def cmd_build(args: argparse.Namespace) -> int:
    """Handle the 'build' command."""
    result = build_all(states=args.states)
    if "error" in result:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1
    print(f"Wrote {result['output']}")
    return 0


def cmd_refresh(args: argparse.Namespace) -> int:
    """Handle the 'refresh' command: fetch data then build the chart."""
    settings = get_settings()
    print(f"Fetching data for {settings.start_date} → {settings.end_date}...")
    fetch_all(states=args.states)

    print("Building chart...")
    result = build_all(states=args.states)
    if "error" in result:
        print(f"Error: {result['error']}", file=sys.stderr)
        return 1

    print("Done.")
    return 0


def main() -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    if args.debug:
        print(f"Debug mode enabled. Settings: {get_settings()}")

    commands = {
        "info": cmd_info,
        "fetch": cmd_fetch,
        "build": cmd_build,
        "refresh": cmd_refresh,
    }

    handler = commands.get(args.command)
    if handler is None:
        parser.print_help()
        return 1

    try:
        return handler(args)
    except (GageFetchError, SiteInfoError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
