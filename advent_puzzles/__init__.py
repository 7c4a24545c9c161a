"""Solutions to daily programming puzzles from the 2023 and 2024 seasons, with a command line."""

__version__ = "0.1.0"