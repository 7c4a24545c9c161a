"""Pipe maze: following the loop through S and counting the tiles it encloses."""

from __future__ import annotations

from collections.abc import Sequence

Direction = tuple[int, int]

NORTH: Direction = (-1, 0)
SOUTH: Direction = (1, 0)
EAST: Direction = (0, 1)
WEST: Direction = (0, -1)

PIPES: dict[str, tuple[Direction, Direction]] = {
    "|": (NORTH, SOUTH),
    "-": (EAST, WEST),
    "L": (NORTH, EAST),
    "J": (NORTH, WEST),
    "7": (SOUTH, WEST),
    "F": (SOUTH, EAST),
}

_NORTH_OPEN = frozenset(pipe for pipe, exits in PIPES.items() if NORTH in exits)

START = "S"

Grid = Sequence[str]


def _find_start(grid: Grid) -> tuple[int, int]:
    starts = [
        (row, col)
        for row, line in enumerate(grid)
        for col, ch in enumerate(line)
        if ch == START
    ]
    if len(starts) != 1:
        raise ValueError(f"the maze must hold exactly one {START!r}, found {len(starts)}")
    return starts[0]


def _tile(grid: Grid, row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return "."


def _opposite(direction: Direction) -> Direction:
    return (-direction[0], -direction[1])


def _start_shape(grid: Grid, start: tuple[int, int]) -> str:
    """The pipe hidden under S, read from the neighbours that connect to it."""
    row, col = start
    connected = {
        direction
        for direction in (NORTH, EAST, SOUTH, WEST)
        if _opposite(direction)
        in PIPES.get(_tile(grid, row + direction[0], col + direction[1]), ())
    }
    for pipe, exits in PIPES.items():
        if set(exits) == connected:
            return pipe
    raise ValueError(
        f"the start tile must connect to exactly two pipes, found {len(connected)}"
    )


def parse_maze(text: str) -> list[str]:
    """The lines of the maze, checked to hold a single start tile."""
    grid = text.splitlines()
    _find_start(grid)
    return grid


def loop_tiles(grid: Grid) -> set[tuple[int, int]]:
    """Positions (row, column) of every tile on the loop through S."""
    start = _find_start(grid)
    direction = PIPES[_start_shape(grid, start)][0]
    tiles = {start}
    row, col = start
    while True:
        row, col = row + direction[0], col + direction[1]
        if (row, col) == start:
            return tiles
        exits = PIPES.get(_tile(grid, row, col))
        back = _opposite(direction)
        if exits is None or back not in exits:
            raise ValueError(f"the loop is broken at row {row}, column {col}")
        tiles.add((row, col))
        direction = exits[1] if exits[0] == back else exits[0]


def part1(text: str) -> int:
    """Steps to the point of the loop farthest from the start."""
    return len(loop_tiles(parse_maze(text))) // 2


def part2(text: str) -> int:
    """Number of tiles enclosed by the loop."""
    grid = parse_maze(text)
    loop = loop_tiles(grid)
    start_shape = _start_shape(grid, _find_start(grid))
    enclosed = 0
    for row, line in enumerate(grid):
        inside = False
        for col, ch in enumerate(line):
            if (row, col) in loop:
                pipe = start_shape if ch == START else ch
                if pipe in _NORTH_OPEN:
                    inside = not inside
            elif inside:
                enclosed += 1
    return enclosed