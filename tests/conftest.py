"""Shared fixtures for the test suite."""

import matplotlib
matplotlib.use("Agg")

import pytest

from sudoku_wfc.core.board import Board


# A known solvable puzzle (medium difficulty)
TEST_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

# The solution to the test puzzle
TEST_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

BLANK_PUZZLE = "\n".join(["........."] * 9) + "\n"

# Cell (8, 0) has no candidates: its row holds 1-8 and its column a 9
CONTRADICTION_PUZZLE = "12345678.\n\n\n\n\n\n\n\n........9\n"


@pytest.fixture
def puzzle_board():
    return Board.from_string(TEST_PUZZLE)


@pytest.fixture
def blank_board():
    return Board.parse(BLANK_PUZZLE)


@pytest.fixture
def puzzle_file(tmp_path):
    path = tmp_path / "puzzle.txt"
    rows = [TEST_PUZZLE[i:i + 9].replace("0", ".") for i in range(0, 81, 9)]
    path.write_text("\n".join(rows) + "\n")
    return str(path)


@pytest.fixture
def contradiction_file(tmp_path):
    path = tmp_path / "contradiction.txt"
    path.write_text(CONTRADICTION_PUZZLE)
    return str(path)
