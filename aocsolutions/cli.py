"""Command line entry point: choose a year, a day and a part."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from aocsolutions.day import Day, UsageError
from aocsolutions.year2023 import (
    day01 as y23d01,
    day02 as y23d02,
    day03 as y23d03,
    day04 as y23d04,
    day05 as y23d05,
    day06 as y23d06,
    day07 as y23d07,
    day08 as y23d08,
    day09 as y23d09,
)
from aocsolutions.year2024 import (
    day01 as y24d01,
    day02 as y24d02,
    day03 as y24d03,
    day04 as y24d04,
    day05 as y24d05,
    day06 as y24d06,
    day07 as y24d07,
    day08 as y24d08,
)

_YEARS = {
    "2023": (y23d01, y23d02, y23d03, y23d04, y23d05, y23d06, y23d07, y23d08, y23d09),
    "2024": (y24d01, y24d02, y24d03, y24d04, y24d05, y24d06, y24d07, y24d08),
}


def _add_day(days: argparse._SubParsersAction, day: Day) -> None:
    day_parser = days.add_parser(
        day.name, aliases=[day.alias], help=day.description, description=day.description
    )
    day_parser.set_defaults(help_parser=day_parser)
    parts = day_parser.add_subparsers(dest="part_name", metavar="PART")
    for number in day.parts:
        part_parser = parts.add_parser(
            str(number),
            help=f"Solution for part {number}",
            description=f"Solution for part {number}",
        )
        part_parser.add_argument("input", nargs="?", help="input file (default: stdin)")
        part_parser.set_defaults(
            help_parser=part_parser, solution_day=day, part_number=number
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aocsolutions", description="Advent Of Code Solutions"
    )
    parser.set_defaults(help_parser=parser, solution_day=None)
    years = parser.add_subparsers(dest="year", metavar="YEAR")
    for year, modules in _YEARS.items():
        year_parser = years.add_parser(
            year, help=f"Solutions for {year}", description=f"Solutions for {year}"
        )
        year_parser.set_defaults(help_parser=year_parser)
        days = year_parser.add_subparsers(dest="day_name", metavar="DAY")
        for module in modules:
            _add_day(days, module.new())
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    day = args.solution_day
    if day is None:
        args.help_parser.print_help()
        return 0
    try:
        day.run(args.part_number, args.input)
    except UsageError:
        args.help_parser.print_usage(sys.stderr)
        return 0
    except (OSError, ValueError, RuntimeError, IndexError, KeyError) as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())