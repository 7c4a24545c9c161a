"""Camel Cards: ranking poker-like hands and totting up their winnings."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from enum import IntEnum

HAND_SIZE = 5
JOKER = "J"

CARD_VALUES = {
    "2": 2,
    "3": 3,
    "4": 4,
    "5": 5,
    "6": 6,
    "7": 7,
    "8": 8,
    "9": 9,
    "T": 10,
    "J": 11,
    "Q": 12,
    "K": 13,
    "A": 14,
}

JOKER_CARD_VALUES = {**CARD_VALUES, JOKER: 1}


class HandType(IntEnum):
    """Strength of a hand, weakest first."""

    HIGH_CARD = 1
    ONE_PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    FULL_HOUSE = 5
    FOUR_OF_A_KIND = 6
    FIVE_OF_A_KIND = 7


def _check_hand(hand: str) -> None:
    if len(hand) != HAND_SIZE:
        raise ValueError(f"a hand holds {HAND_SIZE} cards, got {hand!r}")
    unknown = set(hand) - CARD_VALUES.keys()
    if unknown:
        raise ValueError(f"unknown cards {sorted(unknown)} in hand {hand!r}")


def _type_from_counts(counts: Iterable[int]) -> HandType:
    counts = list(counts)
    distinct = len(counts)
    if distinct == 1:
        return HandType.FIVE_OF_A_KIND
    if distinct == 2:
        return HandType.FOUR_OF_A_KIND if 4 in counts else HandType.FULL_HOUSE
    if distinct == 3:
        return HandType.THREE_OF_A_KIND if 3 in counts else HandType.TWO_PAIR
    if distinct == 4:
        return HandType.ONE_PAIR
    return HandType.HIGH_CARD


def hand_type(hand: str) -> HandType:
    """The type of a hand with every card standing for itself."""
    _check_hand(hand)
    return _type_from_counts(Counter(hand).values())


def joker_hand_type(hand: str) -> HandType:
    """The type of a hand where every J joins the most frequent other card.

    Among equally frequent cards the highest one is chosen; a hand of jokers
    alone is five of a kind.
    """
    _check_hand(hand)
    jokers = hand.count(JOKER)
    counts = Counter(card for card in hand if card != JOKER)
    if jokers:
        if not counts:
            return HandType.FIVE_OF_A_KIND
        best = max(counts, key=lambda card: (counts[card], JOKER_CARD_VALUES[card]))
        counts[best] += jokers
    return _type_from_counts(counts.values())


def rank_hands(hands: Iterable[str], jokers: bool = False) -> list[str]:
    """Hands ordered from weakest to strongest.

    Hands are ordered by type, then card by card from the left; equal hands
    keep their input order.
    """
    classify = joker_hand_type if jokers else hand_type
    values = JOKER_CARD_VALUES if jokers else CARD_VALUES
    return sorted(
        hands,
        key=lambda hand: (classify(hand), tuple(values[card] for card in hand)),
    )


def _parse(text: str) -> tuple[list[str], dict[str, int]]:
    hands: list[str] = []
    bids: dict[str, int] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"expected a hand and a bid, got {line!r}")
        hand, bid = parts
        hands.append(hand)
        bids.setdefault(hand, int(bid))
    return hands, bids


def _winnings(text: str, jokers: bool) -> int:
    hands, bids = _parse(text)
    return sum(
        rank * bids[hand]
        for rank, hand in enumerate(rank_hands(hands, jokers), start=1)
    )


def part1(text: str) -> int:
    """Total winnings: each bid multiplied by the rank of its hand."""
    return _winnings(text, jokers=False)


def part2(text: str) -> int:
    """Total winnings with J read as a joker."""
    return _winnings(text, jokers=True)


def _all_types(hands: Sequence[str]) -> list[HandType]:
    return [hand_type(hand) for hand in hands]