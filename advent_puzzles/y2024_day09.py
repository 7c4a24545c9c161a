"""Disk fragmenter: compacting a disk map and computing its checksum."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import groupby

Block = int | None
_DIGITS = "0123456789"


def parse_disk(text: str) -> list[Block]:
    """Expand a dense disk map into blocks: file IDs, or None for free space."""
    disk: list[Block] = []
    for index, ch in enumerate(text.strip()):
        if ch not in _DIGITS:
            raise ValueError(f"disk map holds a non-digit {ch!r} at {index}")
        length = int(ch)
        if index % 2 == 0:
            disk.extend([index // 2] * length)
        else:
            disk.extend([None] * length)
    return disk


def compact_blocks(disk: Sequence[Block]) -> list[Block]:
    """Move file blocks one at a time from the end into the leftmost free block."""
    blocks = list(disk)
    left, right = 0, len(blocks) - 1
    while True:
        while left < right and blocks[left] is not None:
            left += 1
        while left < right and blocks[right] is None:
            right -= 1
        if left >= right:
            return blocks
        blocks[left], blocks[right] = blocks[right], None


def _runs(disk: Sequence[Block]) -> Iterator[tuple[Block, int, int]]:
    position = 0
    for value, group in groupby(disk):
        length = sum(1 for _ in group)
        yield value, position, length
        position += length


def compact_files(disk: Sequence[Block]) -> list[Block]:
    """Move whole files, highest ID first, into the leftmost free span that fits.

    A file only moves to a span lying to its left; each file moves at most once.
    """
    files: dict[int, tuple[int, int]] = {}
    spans: list[list[int]] = []
    for value, start, length in _runs(disk):
        if value is None:
            spans.append([start, length])
        elif value in files:
            raise ValueError(f"file {value} is not in one piece")
        else:
            files[value] = (start, length)

    for file_id in sorted(files, reverse=True):
        start, length = files[file_id]
        for span in spans:
            if span[0] >= start:
                break
            if span[1] >= length:
                files[file_id] = (span[0], length)
                span[0] += length
                span[1] -= length
                break

    result: list[Block] = [None] * len(disk)
    for file_id, (start, length) in files.items():
        result[start : start + length] = [file_id] * length
    return result


def checksum(disk: Sequence[Block]) -> int:
    """Sum of each block's position times its file ID; free blocks count 0."""
    return sum(position * block for position, block in enumerate(disk) if block is not None)


def part1(text: str) -> int:
    """Checksum after compacting block by block."""
    return checksum(compact_blocks(parse_disk(text)))


def part2(text: str) -> int:
    """Checksum after compacting whole files."""
    return checksum(compact_files(parse_disk(text)))