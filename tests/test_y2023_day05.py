import pytest

from advent_puzzles.y2023_day05 import (
    Almanac,
    convert,
    lowest_location,
    lowest_location_for_ranges,
    parse_almanac,
    part1,
    part2,
    reverse_convert,
)

EXAMPLE = """\
seeds: 79 14 55 13

seed-to-soil map:
50 98 2
52 50 48

soil-to-fertilizer map:
0 15 37
37 52 2
39 0 15

fertilizer-to-water map:
49 53 8
0 11 42
42 0 7
57 7 4

water-to-light map:
88 18 7
18 25 70

light-to-temperature map:
45 77 23
81 45 19
68 64 13

temperature-to-humidity map:
0 69 1
1 0 69

humidity-to-location map:
60 56 37
56 93 4
"""

SOIL = ((50, 98, 2), (52, 50, 48))


def test_parse_almanac_reads_seeds_and_maps():
    almanac = parse_almanac(EXAMPLE)
    assert isinstance(almanac, Almanac)
    assert almanac.seeds == (79, 14, 55, 13)
    assert len(almanac.maps) == 7
    assert almanac.maps[0] == SOIL
    assert almanac.names[0] == "seed-to-soil"
    assert almanac.names[-1] == "humidity-to-location"


def test_parse_almanac_requires_seeds():
    with pytest.raises(ValueError):
        parse_almanac("")
    with pytest.raises(ValueError):
        parse_almanac("seed-to-soil map:\n50 98 2\n")


def test_parse_almanac_rejects_bad_map_line():
    with pytest.raises(ValueError):
        parse_almanac("seeds: 1 2\n\nseed-to-soil map:\n50 98\n")


def test_convert_inside_and_outside_ranges():
    assert convert(98, SOIL) == 50
    assert convert(10, SOIL) == 10


def test_convert_first_matching_triple_wins():
    assert convert(0, [(100, 0, 10), (200, 0, 10)]) == 100


def test_reverse_convert_inverts_convert_for_a_permutation():
    for value in range(0, 120):
        assert reverse_convert(convert(value, SOIL), SOIL) == value
    assert reverse_convert(50, SOIL) == 98


def test_lowest_location_is_min_of_single_seeds():
    almanac = parse_almanac(EXAMPLE)
    singles = [lowest_location([seed], almanac.maps) for seed in almanac.seeds]
    assert lowest_location(almanac.seeds, almanac.maps) == min(singles)


def test_lowest_location_needs_seeds():
    with pytest.raises(ValueError):
        lowest_location([], [SOIL])


def test_lowest_location_for_ranges_without_maps_is_lowest_start():
    assert lowest_location_for_ranges([5, 0, 3, 2], []) == 3


def test_lowest_location_for_ranges_includes_range_end():
    swap = [((0, 10, 1), (10, 0, 1))]
    assert lowest_location_for_ranges([9, 1], swap) == 0


def test_lowest_location_for_ranges_needs_pairs():
    with pytest.raises(ValueError):
        lowest_location_for_ranges([7], [SOIL])


def test_ranges_never_beat_their_own_start_seeds():
    almanac = parse_almanac(EXAMPLE)
    starts = almanac.seeds[::2]
    assert lowest_location_for_ranges(almanac.seeds, almanac.maps) <= lowest_location(
        starts, almanac.maps
    )


def test_example_answers():
    assert part1(EXAMPLE) == 35
    assert part2(EXAMPLE) == 46