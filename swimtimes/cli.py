"""
CLI (Command Line Interface).

Looks up upcoming sessions and prints them as a table, e.g.:

    swimtimes
    swimtimes tomorrow --filter lane
    swimtimes next friday --center "St Ives"
    swimtimes saturday --json

Note:
- The web front end lives in swimtimes/web.py
- Any error aborts the lookup: a one-line diagnostic goes to stderr and the
  exit code is 1
"""

from __future__ import annotations

import argparse
import dataclasses
import sys
from datetime import datetime

import requests

from swimtimes.config import AppConfig, load_config
from swimtimes.errors import SwimTimesError
from swimtimes.logging_config import setup_logging
from swimtimes.pipeline import find_swims
from swimtimes.render import render_json, render_table


def _cmd_lookup(
    args: argparse.Namespace,
    config: AppConfig,
    *,
    now: datetime | None = None,
    session: requests.Session | None = None,
) -> int:
    """
    Resolve the phrase, fetch the timetable and print the upcoming entries.
    """
    phrase = " ".join(args.duration).strip()

    try:
        window, entries = find_swims(
            phrase,
            args.filter,
            venue_name=config.center,
            api_url=config.api_url,
            now=now,
            session=session,
        )
    except SwimTimesError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.json:
        print(render_json(entries))
    else:
        print(render_table(window.start, entries, color=sys.stdout.isatty()), end="")
    return 0


def build_parser(config: AppConfig | None = None) -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser. Defaults come from `config`.
    """
    config = config or AppConfig()
    parser = argparse.ArgumentParser(prog="swimtimes", description="Upcoming swimming sessions")
    parser.add_argument(
        "duration",
        nargs="*",
        default=[],
        help='When to look, e.g. "today", "tomorrow", "next friday" (default: today)',
    )
    parser.add_argument("--center", "-c", type=str, default=config.center, help="Name of the center")
    parser.add_argument("--filter", "-f", type=str, default="", help='Activity filter keyword (e.g. "lane")')
    parser.add_argument("--json", action="store_true", help="Print JSON instead of a table")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output to stderr")
    return parser


def main(
    argv: list[str] | None = None,
    *,
    now: datetime | None = None,
    session: requests.Session | None = None,
) -> None:
    """
    CLI entry point. Parses args, runs the lookup,
    and exits via SystemExit with a return code.
    """
    try:
        config = load_config()
    except SwimTimesError as exc:
        print(f"error: {exc}", file=sys.stderr)
        raise SystemExit(1)

    args = build_parser(config).parse_args(argv)

    setup_logging("DEBUG" if args.verbose else "WARNING")
    config = dataclasses.replace(config, center=args.center)

    raise SystemExit(_cmd_lookup(args, config, now=now, session=session))
