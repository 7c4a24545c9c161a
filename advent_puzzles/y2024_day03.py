"""Corrupted memory: adding up the multiplications that survived."""

from __future__ import annotations

import re

_MUL = r"mul\(([0-9]+),([0-9]+)\)"
_MUL_RE = re.compile(_MUL)
_INSTRUCTION = re.compile(rf"{_MUL}|(do\(\))|(don't\(\))")


def part1(text: str) -> int:
    """Sum of the products of every well-formed mul(a,b) instruction."""
    return sum(int(left) * int(right) for left, right in _MUL_RE.findall(text))


def part2(text: str) -> int:
    """Sum of the products of the mul instructions that are enabled.

    Multiplications start enabled; don't() disables the ones that follow it
    and do() enables them again.
    """
    enabled = True
    total = 0
    for match in _INSTRUCTION.finditer(text):
        if match.group(3):
            enabled = True
        elif match.group(4):
            enabled = False
        elif enabled:
            total += int(match.group(1)) * int(match.group(2))
    return total