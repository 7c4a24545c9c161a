"""Seed almanac: following seeds through a chain of range maps."""

from __future__ import annotations

import itertools
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

Triple = tuple[int, int, int]
RangeMap = Sequence[Triple]

_NUMBER = re.compile(r"-?[0-9]+")
_BLANK_LINES = re.compile(r"\n[ \t]*\n")


@dataclass(frozen=True)
class Almanac:
    """Seeds to plant and the maps that lead from seed to location.

    Each map is a sequence of (destination, source, length) triples, in the
    order the almanac lists them.
    """

    seeds: tuple[int, ...]
    maps: tuple[tuple[Triple, ...], ...]
    names: tuple[str, ...] = ()


def _numbers(line: str) -> list[int]:
    return [int(n) for n in _NUMBER.findall(line)]


def parse_almanac(text: str) -> Almanac:
    """Read the seeds line and every 'x-to-y map:' block that follows it."""
    blocks = [block.strip() for block in _BLANK_LINES.split(text.strip()) if block.strip()]
    if not blocks or not blocks[0].startswith("seeds:"):
        raise ValueError("almanac must start with a 'seeds:' line")
    seeds = tuple(_numbers(blocks[0].partition(":")[2]))

    names: list[str] = []
    maps: list[tuple[Triple, ...]] = []
    for block in blocks[1:]:
        header, *rows = block.splitlines()
        if not header.rstrip().endswith("map:"):
            raise ValueError(f"expected a map header, got {header!r}")
        names.append(header.rstrip().removesuffix("map:").strip())
        triples: list[Triple] = []
        for row in rows:
            values = _numbers(row)
            if len(values) != 3:
                raise ValueError(f"map line must hold three numbers: {row!r}")
            destination, source, length = values
            triples.append((destination, source, length))
        maps.append(tuple(triples))
    return Almanac(seeds=seeds, maps=tuple(maps), names=tuple(names))


def convert(value: int, triples: RangeMap) -> int:
    """Map a value through the first triple whose source range holds it."""
    for destination, source, length in triples:
        if source <= value < source + length:
            return destination + (value - source)
    return value


def reverse_convert(value: int, triples: RangeMap) -> int:
    """Map a value back through the first triple whose destination range holds it."""
    for destination, source, length in triples:
        if destination <= value < destination + length:
            return source + (value - destination)
    return value


def _location(seed: int, maps: Iterable[RangeMap]) -> int:
    value = seed
    for triples in maps:
        value = convert(value, triples)
    return value


def lowest_location(seeds: Iterable[int], maps: Sequence[RangeMap]) -> int:
    """The lowest location reached by any of the seeds."""
    locations = [_location(seed, maps) for seed in seeds]
    if not locations:
        raise ValueError("no seeds given")
    return min(locations)


def lowest_location_for_ranges(seeds: Sequence[int], maps: Sequence[RangeMap]) -> int:
    """The lowest location whose seed falls in one of the (start, length) pairs.

    Locations are tried upwards from 0 and walked back through the maps; a
    seed matches a pair when start <= seed <= start + length.  An unpaired
    trailing value is ignored.
    """
    pairs = list(zip(seeds[::2], seeds[1::2]))
    if not pairs:
        raise ValueError("no seed ranges given")
    backwards = list(reversed(maps))
    for location in itertools.count():
        seed = location
        for triples in backwards:
            seed = reverse_convert(seed, triples)
        if any(start <= seed <= start + length for start, length in pairs):
            return location
    raise AssertionError("unreachable")


def part1(text: str) -> int:
    """Lowest location of any listed seed."""
    almanac = parse_almanac(text)
    return lowest_location(almanac.seeds, almanac.maps)


def part2(text: str) -> int:
    """Lowest location of any seed in the listed seed ranges."""
    almanac = parse_almanac(text)
    return lowest_location_for_ranges(almanac.seeds, almanac.maps)