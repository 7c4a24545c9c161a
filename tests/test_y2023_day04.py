import pytest

from advent_puzzles.y2023_day04 import count_matches, parse_card, part1, part2

CARDS = [
    "Card 1: 41 48 83 86 17 | 83 86  6 31 17  9 48 53",
    "Card 2: 13 32 20 16 61 | 61 30 68 82 17 32 24 19",
    "Card 3:  1 21 53 59 44 | 69 82 63 72 16 21 14  1",
    "Card 4: 41 92 73 84 69 | 59 84 76 51 58  5 54 83",
    "Card 5: 87 83 26 28 32 | 88 30 70 12 93 22 82 36",
    "Card 6: 31 18 13 56 72 | 74 77 10 23 35 67 36 11",
]
EXAMPLE = "\n".join(CARDS) + "\n"
LOSING = "Card 1: 1 2 3 | 4 5 6"


def test_part1_example():
    assert part1(EXAMPLE) == 13


def test_part2_example():
    assert part2(EXAMPLE) == 30


def test_parse_card():
    assert parse_card(CARDS[0]) == (
        [41, 48, 83, 86, 17],
        [83, 86, 6, 31, 17, 9, 48, 53],
    )


def test_count_matches_example_card():
    assert count_matches(*parse_card(CARDS[0])) == 4


def test_duplicates_count_each_time():
    assert count_matches([5, 5], [5]) == count_matches([5], [5, 5])
    assert count_matches([5, 5], [5]) > count_matches([5], [5])


def test_losing_card_scores_nothing():
    assert part1(LOSING) == 0


def test_losing_card_is_still_held_once():
    assert part2(LOSING) == 1


def test_part2_holds_at_least_every_card():
    assert part2(EXAMPLE) >= len(CARDS)


def test_missing_bar_raises():
    with pytest.raises(ValueError):
        parse_card("Card 1: 1 2 3 4 5 6")


def test_missing_colon_raises():
    with pytest.raises(ValueError):
        parse_card("1 2 3 | 4 5 6")


def test_wins_past_the_last_card_are_dropped():
    text = "Card 1: 1 2 | 1 2\nCard 2: 3 | 4"
    assert part2(text) == part2("Card 1: 1 | 1\nCard 2: 3 | 4")