"""Print queue: checking and fixing page orders against ordering rules."""

from __future__ import annotations

from collections.abc import Collection, Sequence

Rule = tuple[int, int]


def parse_rules(text: str) -> set[Rule]:
    """The (before, after) pairs of the 'X|Y' rule lines."""
    rules: set[Rule] = set()
    for line in text.splitlines():
        if not line.strip():
            continue
        before, sep, after = line.partition("|")
        if not sep:
            raise ValueError(f"rule line must read 'X|Y': {line!r}")
        try:
            rules.add((int(before), int(after)))
        except ValueError:
            raise ValueError(f"rule line must hold two numbers: {line!r}") from None
    return rules


def parse_updates(text: str) -> list[list[int]]:
    """The page lists of the comma-separated update lines."""
    return [
        [int(page) for page in line.split(",")]
        for line in text.splitlines()
        if line.strip()
    ]


def is_ordered(update: Sequence[int], rules: Collection[Rule]) -> bool:
    """True if a rule allows every page to come right before the next one."""
    return all((before, after) in rules for before, after in zip(update, update[1:]))


def reorder(update: Sequence[int], rules: Collection[Rule]) -> list[int]:
    """The pages sorted by insertion so that rules put earlier pages first."""
    pages = list(update)
    for index in range(1, len(pages)):
        key = pages[index]
        slot = index - 1
        while slot >= 0 and (key, pages[slot]) in rules:
            pages[slot + 1] = pages[slot]
            slot -= 1
        pages[slot + 1] = key
    return pages


def _middle(update: Sequence[int]) -> int:
    return update[(len(update) - 1) // 2]


def part1(rules_text: str, updates_text: str) -> int:
    """Sum of the middle pages of the updates already in order."""
    rules = parse_rules(rules_text)
    return sum(
        _middle(update)
        for update in parse_updates(updates_text)
        if is_ordered(update, rules)
    )


def part2(rules_text: str, updates_text: str) -> int:
    """Sum of the middle pages of the out-of-order updates once reordered."""
    rules = parse_rules(rules_text)
    return sum(
        _middle(reorder(update, rules))
        for update in parse_updates(updates_text)
        if not is_ordered(update, rules)
    )