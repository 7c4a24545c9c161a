"""Plutonian pebbles: stones that change every time you blink."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

BLINKS = 25
MULTIPLIER = 2024


def _blink_stone(stone: int) -> tuple[int, ...]:
    if stone == 0:
        return (1,)
    digits = str(stone)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return int(digits[:half]), int(digits[half:])
    return (stone * MULTIPLIER,)


def blink(stones: Iterable[int]) -> list[int]:
    """The row of stones after one blink, in order.

    A 0 becomes 1; a stone with an even number of digits splits into its two
    halves; any other stone is multiplied by 2024.
    """
    return [new for stone in stones for new in _blink_stone(stone)]


def count_after(stones: Iterable[int], blinks: int) -> int:
    """Number of stones after blinking the given number of times."""
    if blinks < 0:
        raise ValueError(f"blinks must not be negative, got {blinks}")
    counts = Counter(stones)
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for stone, amount in counts.items():
            for new in _blink_stone(stone):
                following[new] += amount
        counts = following
    return sum(counts.values())


def part1(text: str) -> int:
    """Number of stones after 25 blinks."""
    return count_after((int(field) for field in text.split()), BLINKS)