#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
AIRAC helpers and command line tool.
Current and upcoming cycles, cycle boundaries and a self check of the
cycle calendar.
"""

import argparse
import sys
from datetime import datetime, timezone

from tqdm import tqdm

from airac import (
    CYCLE_DURATION,
    DATE_FORMAT,
    Airac,
    AiracError,
)

# ---------------------------------------------------------------------
#  Constants
# ---------------------------------------------------------------------
DEFAULT_FUTURE_COUNT = 13
# Identifiers only resolve within this window
PARSEABLE_YEARS = range(1964, 2064)
LAST_SUPPORTED_DATE = datetime(2192, 12, 31, tzinfo=timezone.utc)


# ---------------------------------------------------------------------
#  AIRAC Utilities
# ---------------------------------------------------------------------
def get_current_airac(now=None, debug=False):
    """Return the AIRAC cycle effective at ``now`` (default: current UTC time)."""
    if now is None:
        now = datetime.now(timezone.utc)
    airac = Airac.from_date(now)

    if debug:
        print(f"[DEBUG] Now: {now.isoformat()}")
        print(f"[DEBUG] Cycles since epoch: {airac.index}")
        print(f"[DEBUG] Current AIRAC: {airac.long_string()}")

    return airac


def list_future_airacs(count=DEFAULT_FUTURE_COUNT, start=None, debug=False):
    """Return ``count`` (identifier, effective date) pairs, starting with the cycle effective at ``start``."""
    current = get_current_airac(start)
    result = []
    for offset in range(count):
        airac = current + offset
        result.append((str(airac), airac.effective.strftime(DATE_FORMAT)))
    if debug:
        print("[DEBUG] Upcoming AIRAC cycles:")
        for code, effective in result:
            print(f"  - {code} → {effective}")
    return result


def is_airac_start(today=None, debug=False):
    """Return True if ``today`` is the effective date of an AIRAC cycle."""
    if today is None:
        today = datetime.now(timezone.utc).date()
    elif isinstance(today, datetime):
        if today.tzinfo is not None:
            today = today.astimezone(timezone.utc)
        today = today.date()
    airac = Airac.from_date(today)
    match = airac.effective.date() == today
    if debug:
        print(f"[DEBUG] Today: {today}")
        print(f"[DEBUG] Cycle effective: {airac.effective.date()}")
        print(f"[DEBUG] Is AIRAC boundary: {match}")
    return match


def verify_cycles(last=None, show_progress=False):
    """Check the cycle calendar from the epoch up to ``last``.

    Args:
        last (Airac | None): Last cycle to check, defaults to the last cycle of 2192
        show_progress (bool): Whether to show a progress bar

    Returns:
        list[str]: Descriptions of every inconsistency found, empty if none
    """
    if last is None:
        last = Airac.from_date(LAST_SUPPORTED_DATE)

    problems = []
    iterator = range(last.index + 1)
    if show_progress:
        iterator = tqdm(iterator, desc="Verifying AIRAC cycles", unit="cycle")

    for index in iterator:
        airac = Airac(index)
        if index > 0:
            spacing = airac.effective - airac.previous_cycle().effective
            if spacing != CYCLE_DURATION:
                problems.append(f"{airac.long_string()}: {spacing} after previous cycle")
        if Airac.from_date(airac.effective) != airac:
            problems.append(f"{airac.long_string()}: effective date maps to another cycle")
        if airac.year in PARSEABLE_YEARS:
            try:
                parsed = Airac.from_string(str(airac))
            except AiracError as e:
                problems.append(f"{airac.long_string()}: {e}")
                continue
            if parsed != airac:
                problems.append(f"{airac.long_string()}: identifier parses to {parsed.long_string()}")

    return problems


# ---------------------------------------------------------------------
#  CLI
# ---------------------------------------------------------------------
def _parse_date(value):
    try:
        return datetime.strptime(value, DATE_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        raise ValueError(f"invalid date {value!r}, expected YYYY-MM-DD") from None


def build_parser():
    parser = argparse.ArgumentParser(prog="airac", description="AIRAC cycle utilities")
    parser.add_argument(
        "command",
        choices=["current", "current_only", "future", "is_start", "date", "parse", "verify"],
        help="Command to run",
    )
    parser.add_argument("value", nargs="?", help='Date (YYYY-MM-DD) for "date", identifier (YYOO) for "parse"')
    parser.add_argument("--date", dest="at", help="Reference date (YYYY-MM-DD) instead of today")
    parser.add_argument("--count", type=int, default=DEFAULT_FUTURE_COUNT, help="Number of cycles for \"future\"")
    parser.add_argument("--progress", action="store_true", help="Show progress bar during verify")
    parser.add_argument("--debug", action="store_true", help="Enable debug output")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        at = _parse_date(args.at) if args.at else None

        if args.command.startswith("current"):
            airac = get_current_airac(at, debug=args.debug)
            if args.command == "current":
                print(f"Current AIRAC: {airac.long_string()}")
                print(f"Next cycle starts on: {airac.next_cycle().effective.strftime(DATE_FORMAT)}")
            else:
                print(f"{airac}")

        elif args.command == "future":
            for code, effective in list_future_airacs(args.count, at, debug=args.debug):
                print(f"{code} - starts on {effective}")

        elif args.command == "is_start":
            print("1" if is_airac_start(at, debug=args.debug) else "0")

        elif args.command == "date":
            if args.value is None:
                parser.error('"date" needs a date argument')
            print(Airac.from_date(_parse_date(args.value)).long_string())

        elif args.command == "parse":
            if args.value is None:
                parser.error('"parse" needs an identifier argument')
            print(Airac.from_string(args.value).long_string())

        elif args.command == "verify":
            problems = verify_cycles(show_progress=args.progress)
            for problem in problems:
                print(f"❌ {problem}")
            if problems:
                return 1
            print("✅ AIRAC calendar consistent")

    except (AiracError, ValueError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
