"""Command line: solve one puzzle part from its input file."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path

from advent_puzzles import (
    y2023_day01,
    y2023_day02,
    y2023_day03,
    y2023_day04,
    y2023_day05,
    y2023_day06,
    y2023_day07,
    y2023_day08,
    y2023_day09,
    y2023_day10,
    y2023_day11,
    y2024_day01,
    y2024_day02,
    y2024_day03,
    y2024_day04,
    y2024_day05,
    y2024_day06,
    y2024_day07,
    y2024_day08,
    y2024_day09,
    y2024_day10,
    y2024_day11,
)

Solver = Callable[..., int]

PUZZLES: dict[tuple[int, int], tuple[Solver, ...]] = {
    (2023, 1): (y2023_day01.part1, y2023_day01.part2),
    (2023, 2): (y2023_day02.part1, y2023_day02.part2),
    (2023, 3): (y2023_day03.part1, y2023_day03.part2),
    (2023, 4): (y2023_day04.part1, y2023_day04.part2),
    (2023, 5): (y2023_day05.part1, y2023_day05.part2),
    (2023, 6): (y2023_day06.part1, y2023_day06.part2),
    (2023, 7): (y2023_day07.part1, y2023_day07.part2),
    (2023, 8): (y2023_day08.part1, y2023_day08.part2),
    (2023, 9): (y2023_day09.part1, y2023_day09.part2),
    (2023, 10): (y2023_day10.part1, y2023_day10.part2),
    (2023, 11): (y2023_day11.part1, y2023_day11.part2),
    (2024, 1): (y2024_day01.part1, y2024_day01.part2),
    (2024, 2): (y2024_day02.part1, y2024_day02.part2),
    (2024, 3): (y2024_day03.part1, y2024_day03.part2),
    (2024, 4): (y2024_day04.part1, y2024_day04.part2),
    (2024, 5): (y2024_day05.part1, y2024_day05.part2),
    (2024, 6): (y2024_day06.part1, y2024_day06.part2),
    (2024, 7): (y2024_day07.part1, y2024_day07.part2),
    (2024, 8): (y2024_day08.part1, y2024_day08.part2),
    (2024, 9): (y2024_day09.part1, y2024_day09.part2),
    (2024, 10): (y2024_day10.part1, y2024_day10.part2),
    (2024, 11): (y2024_day11.part1,),
}

INPUT_DIR = Path("inputs")
DEFAULT_INPUT = INPUT_DIR / "input.txt"
DEFAULT_INPUTS: dict[tuple[int, int], tuple[Path, ...]] = {
    (2024, 5): (INPUT_DIR / "input_pages.txt", INPUT_DIR / "input_updates.txt"),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advent-puzzles",
        description="Solve one part of a puzzle and print the answer.",
    )
    parser.add_argument("year", type=int, help="puzzle year, e.g. 2024")
    parser.add_argument("day", type=int, help="puzzle day")
    parser.add_argument("part", type=int, choices=(1, 2), help="puzzle part")
    parser.add_argument(
        "inputs",
        nargs="*",
        help=f"input file(s); defaults to {DEFAULT_INPUT}",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    parser = _parser()
    args = parser.parse_args(argv)
    key = (args.year, args.day)

    parts = PUZZLES.get(key)
    if parts is None:
        parser.error(f"no puzzle for {args.year} day {args.day}")
    if args.part > len(parts):
        parser.error(f"{args.year} day {args.day} has no part {args.part}")

    defaults = DEFAULT_INPUTS.get(key, (DEFAULT_INPUT,))
    paths = [Path(name) for name in args.inputs] or list(defaults)
    if len(paths) != len(defaults):
        parser.error(
            f"{args.year} day {args.day} needs {len(defaults)} input file(s), "
            f"got {len(paths)}"
        )

    try:
        texts = [path.read_text() for path in paths]
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    try:
        answer = parts[args.part - 1](*texts)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(answer)
    return 0


if __name__ == "__main__":
    sys.exit(main())