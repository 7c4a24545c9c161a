"""Bridge repair: finding operators that make each equation true."""

from __future__ import annotations

from collections.abc import Iterable


def _concatenate(left: int, right: int) -> int:
    return int(f"{left}{right}")


def can_make(target: int, numbers: Iterable[int], concat: bool = False) -> bool:
    """True if inserting + and * (and || when concat) between the numbers,
    evaluated left to right, gives the target."""
    values = list(numbers)
    if not values:
        raise ValueError("an equation needs at least one number")

    def search(index: int, current: int) -> bool:
        if index == len(values):
            return current == target
        number = values[index]
        return (
            search(index + 1, current + number)
            or search(index + 1, current * number)
            or (concat and search(index + 1, _concatenate(current, number)))
        )

    return search(1, values[0])


def _equations(text: str) -> list[tuple[int, list[int]]]:
    equations = []
    for line in text.splitlines():
        if not line.strip():
            continue
        head, sep, rest = line.partition(":")
        if sep:
            target, numbers = head, rest.split()
        else:
            target, *numbers = line.split()
        equations.append((int(target), [int(n) for n in numbers]))
    return equations


def _calibration(text: str, concat: bool) -> int:
    return sum(
        target
        for target, numbers in _equations(text)
        if can_make(target, numbers, concat)
    )


def part1(text: str) -> int:
    """Sum of the targets reachable with + and *."""
    return _calibration(text, concat=False)


def part2(text: str) -> int:
    """Sum of the targets reachable with +, * and concatenation."""
    return _calibration(text, concat=True)