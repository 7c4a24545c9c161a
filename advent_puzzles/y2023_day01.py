"""Calibration values: the first and last digit found on each line."""

from __future__ import annotations

DIGIT_WORDS = {
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
}

_DIGITS = "0123456789"


def _digit_positions(line: str) -> list[tuple[int, int]]:
    return [(pos, int(ch)) for pos, ch in enumerate(line) if ch in _DIGITS]


def _combine(first: int, last: int) -> int:
    return first * 10 + last


def calibration_value(line: str) -> int:
    """Two-digit number made of the first and last digit character of the line."""
    found = _digit_positions(line)
    if not found:
        raise ValueError(f"no digit in line {line!r}")
    return _combine(found[0][1], found[-1][1])


def calibration_value_with_words(line: str) -> int:
    """Like calibration_value, but digits spelled as words also count."""
    candidates = _digit_positions(line)
    for word, value in DIGIT_WORDS.items():
        first = line.find(word)
        if first != -1:
            candidates.append((first, value))
            candidates.append((line.rfind(word), value))
    if not candidates:
        raise ValueError(f"no digit in line {line!r}")
    first_digit = min(candidates)[1]
    last_digit = max(candidates)[1]
    return _combine(first_digit, last_digit)


def part1(text: str) -> int:
    """Sum of the calibration values of all lines."""
    return sum(calibration_value(line) for line in text.splitlines())


def part2(text: str) -> int:
    """Sum of the calibration values of all lines, counting spelled digits."""
    return sum(calibration_value_with_words(line) for line in text.splitlines())