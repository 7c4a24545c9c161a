"""Historian location lists: comparing two columns of IDs."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence


def parse_lists(text: str) -> tuple[list[int], list[int]]:
    """The left and right columns of the input, one pair of numbers per line."""
    left: list[int] = []
    right: list[int] = []
    for line in text.splitlines():
        fields = line.split()
        if not fields:
            continue
        if len(fields) != 2:
            raise ValueError(f"expected two numbers, got {line!r}")
        first, second = (int(field) for field in fields)
        left.append(first)
        right.append(second)
    return left, right


def total_distance(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of the differences between the lists paired in sorted order."""
    if len(left) != len(right):
        raise ValueError("both lists must have the same length")
    return sum(abs(a - b) for a, b in zip(sorted(left), sorted(right)))


def similarity_score(left: Sequence[int], right: Sequence[int]) -> int:
    """Sum of each left number times how often it appears on the right."""
    counts = Counter(right)
    return sum(number * counts[number] for number in left)


def part1(text: str) -> int:
    """Total distance between the two lists."""
    return total_distance(*parse_lists(text))


def part2(text: str) -> int:
    """Similarity score of the two lists."""
    return similarity_score(*parse_lists(text))