from advent_puzzles.grid import parse_char_grid
from advent_puzzles.y2024_day08 import antinodes, part1, part2, resonant_antinodes

EXAMPLE = """\
............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""

DIAGONAL = "....\n.a..\n..a.\n....\n"


def test_example_part1():
    assert part1(EXAMPLE) == 14


def test_example_part2():
    assert part2(EXAMPLE) == 34


def test_two_antennas_give_two_antinodes():
    assert antinodes(parse_char_grid(DIAGONAL)) == {(0, 0), (3, 3)}


def test_antinodes_are_among_resonant_antinodes():
    grid = parse_char_grid(EXAMPLE)
    assert antinodes(grid) <= resonant_antinodes(grid)


def test_resonant_antinodes_include_paired_antennas():
    grid = parse_char_grid(EXAMPLE)
    found = resonant_antinodes(grid)
    antennas = {
        (row, col)
        for row, line in enumerate(grid)
        for col, ch in enumerate(line)
        if ch != "."
    }
    assert antennas <= found


def test_antinodes_stay_inside_the_map():
    grid = parse_char_grid(EXAMPLE)
    for row, col in resonant_antinodes(grid):
        assert 0 <= row < len(grid)
        assert 0 <= col < len(grid[0])


def test_resonant_points_are_collinear_with_the_pair():
    grid = parse_char_grid(DIAGONAL)
    for row, col in resonant_antinodes(grid):
        assert row == col


def test_different_frequencies_do_not_pair():
    grid = parse_char_grid("....\n.a..\n..b.\n....\n")
    assert antinodes(grid) == set()
    assert resonant_antinodes(grid) == set()


def test_lone_antenna_makes_nothing():
    assert part1("...\n.a.\n...\n") == part2("...\n.a.\n...\n") == len(set())