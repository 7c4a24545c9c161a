import pytest

from advent_puzzles.grid import parse_char_grid
from advent_puzzles.y2024_day06 import causes_loop, part1, part2, visited_cells

EXAMPLE = """\
....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""

LOOPING = """\
.#...
.^..#
#....
...#.
"""


def _example_grid():
    grid = parse_char_grid(EXAMPLE)
    start = next(
        (row, col)
        for row, line in enumerate(grid)
        for col, ch in enumerate(line)
        if ch == "^"
    )
    return grid, start


def _with_border(text):
    rows = text.splitlines()
    width = len(rows[0]) + 2
    edge = "N" * width
    return "\n".join([edge, *("N" + row + "N" for row in rows), edge])


def test_part1_worked_example():
    assert part1(EXAMPLE) == 41


def test_part2_worked_example():
    assert part2(EXAMPLE) == 6


def test_visited_cells_hold_start_and_no_obstacles():
    grid, start = _example_grid()
    cells = visited_cells(grid, start)
    assert start in cells
    assert all(grid[row][col] != "#" for row, col in cells)
    assert len(cells) == part1(EXAMPLE)


def test_border_cells_end_the_walk():
    bordered = _with_border(EXAMPLE)
    assert part1(bordered) == part1(EXAMPLE)
    assert part2(bordered) == part2(EXAMPLE)


def test_looping_guard_raises():
    grid = parse_char_grid(LOOPING)
    with pytest.raises(ValueError):
        visited_cells(grid, (1, 1))


def test_boxed_in_guard_raises():
    grid = parse_char_grid(".#.\n#^#\n.#.")
    with pytest.raises(ValueError):
        visited_cells(grid, (1, 1))


def test_missing_guard_raises():
    with pytest.raises(ValueError):
        part1("....\n.#..\n....")


def test_obstacle_next_to_start_traps_guard():
    grid, start = _example_grid()
    assert causes_loop(grid, start, (start[0], start[1] - 1))


def test_obstacle_off_route_changes_nothing():
    grid, start = _example_grid()
    route = visited_cells(grid, start)
    off_route = next(
        (row, col)
        for row, line in enumerate(grid)
        for col, ch in enumerate(line)
        if ch == "." and (row, col) not in route
    )
    assert not causes_loop(grid, start, off_route)


def test_obstacle_on_start_raises():
    grid, start = _example_grid()
    with pytest.raises(ValueError):
        causes_loop(grid, start, start)