"""Reading puzzle input as a grid of characters."""

from __future__ import annotations


def parse_char_grid(text: str) -> list[list[str]]:
    """Split text into rows of characters, skipping whitespace inside each line.

    Every line of the text becomes one row, an empty line giving an empty row.
    """
    return [[ch for ch in line if not ch.isspace()] for line in text.splitlines()]