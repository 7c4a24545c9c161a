import pytest

from advent_puzzles.y2024_day01 import (
    parse_lists,
    part1,
    part2,
    similarity_score,
    total_distance,
)

EXAMPLE = "3   4\n4   3\n2   5\n1   3\n3   9\n3   3\n"


def test_parse_lists_splits_columns():
    assert parse_lists(EXAMPLE) == ([3, 4, 2, 1, 3, 3], [4, 3, 5, 3, 9, 3])


def test_parse_lists_skips_blank_lines():
    assert parse_lists("1 2\n\n3 4\n") == ([1, 3], [2, 4])


def test_example_part1():
    assert part1(EXAMPLE) == 11


def test_example_part2():
    assert part2(EXAMPLE) == 31


def test_distance_is_symmetric():
    left, right = parse_lists(EXAMPLE)
    assert total_distance(left, right) == total_distance(right, left)


def test_distance_ignores_order():
    left, right = parse_lists(EXAMPLE)
    assert total_distance(left[::-1], right) == total_distance(left, right)


def test_distance_of_a_list_with_a_shuffle_of_itself_vanishes():
    left, _ = parse_lists(EXAMPLE)
    assert total_distance(left, sorted(left)) == total_distance([], [])


def test_similarity_of_disjoint_lists_is_zero():
    assert similarity_score([1, 2, 3], [4, 5, 6]) == similarity_score([], [])


def test_similarity_counts_repeats_on_the_left():
    assert similarity_score([7, 7], [7]) == 2 * similarity_score([7], [7])


def test_unequal_lengths_are_rejected():
    with pytest.raises(ValueError):
        total_distance([1, 2], [3])


def test_line_with_one_number_is_rejected():
    with pytest.raises(ValueError):
        parse_lists("1 2\n3\n")


def test_non_numeric_field_is_rejected():
    with pytest.raises(ValueError):
        parse_lists("1 x\n")