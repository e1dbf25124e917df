"""Sudoku solving by wave-function collapse over a frontier of board states."""

__version__ = "1.0.0"
