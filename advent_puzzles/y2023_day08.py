"""Haunted wasteland: following left/right instructions through a network."""

from __future__ import annotations

import itertools
import math
import re
from collections.abc import Callable, Mapping

Network = Mapping[str, tuple[str, str]]

_NODE = re.compile(r"([0-9A-Z]+) = \(([0-9A-Z]+),\s*([0-9A-Z]+)\)")
_DIRECTIONS = frozenset("LR")


def parse_network(text: str) -> tuple[str, dict[str, tuple[str, str]]]:
    """Read the instruction line and the node table that follows it."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        raise ValueError("network description is empty")
    instructions = lines[0]
    if not instructions or set(instructions) - _DIRECTIONS:
        raise ValueError(f"instructions must be made of L and R: {instructions!r}")
    nodes: dict[str, tuple[str, str]] = {}
    for line in lines[1:]:
        match = _NODE.search(line)
        if match:
            name, left, right = match.groups()
            nodes.setdefault(name, (left, right))
    return instructions, nodes


def _step(nodes: Network, node: str, direction: str) -> str:
    try:
        left, right = nodes[node]
    except KeyError:
        raise ValueError(f"unknown node {node!r}") from None
    if direction == "L":
        return left
    if direction == "R":
        return right
    raise ValueError(f"unknown direction {direction!r}")


def count_steps(
    instructions: str,
    nodes: Network,
    start: str,
    is_end: Callable[[str], bool],
) -> int:
    """Steps taken from start, repeating the instructions, until is_end holds."""
    if not instructions:
        raise ValueError("no instructions to follow")
    node = start
    steps = 0
    for direction in itertools.cycle(instructions):
        if is_end(node):
            return steps
        node = _step(nodes, node, direction)
        steps += 1
    raise AssertionError("unreachable")


def part1(text: str) -> int:
    """Steps from AAA to ZZZ."""
    instructions, nodes = parse_network(text)
    return count_steps(instructions, nodes, "AAA", lambda node: node == "ZZZ")


def part2(text: str) -> int:
    """Steps until every node ending in A stands on a node ending in Z at once.

    Each start is followed to its first node ending in Z; the answer is the
    least common multiple of those step counts.
    """
    instructions, nodes = parse_network(text)
    starts = [name for name in nodes if name.endswith("A")]
    if not starts:
        raise ValueError("no start node ends with 'A'")
    return math.lcm(
        *(
            count_steps(instructions, nodes, start, lambda node: node.endswith("Z"))
            for start in starts
        )
    )