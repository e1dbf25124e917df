"""Sudoku board holding per-cell domains for wave-function-collapse solving."""

from __future__ import annotations
import random
import numpy as np
from typing import List, Tuple, Optional, Set

from .cell import Cell, Candidates, Fixed
from .errors import EmptyDomainError, AlreadyFixedError


BOARD_DIM = 9
QUADRANT_DIM = 3
EXPECTED_SUM = sum(range(1, BOARD_DIM + 1))

DIGITS = "0123456789"

Coord = Tuple[int, int]


class Board:
    """
    A 9x9 grid of cells addressed by (x, y) = (column, row).

    Every cell is either fixed to a value or holds the list of values that
    are still possible. Cells given by the puzzle are static and never
    touched by the solver. Boards are values: ``copy()`` produces a fully
    independent board, which is what branching relies on.
    """

    def __init__(self, grid: Optional[List[List[Cell]]] = None):
        """
        Initialize a board.

        Args:
            grid: Optional rows of cells (``grid[y][x]``). If None, creates a
                  board where every cell is an empty, non-static candidate cell.
        """
        if grid is not None:
            if len(grid) != BOARD_DIM or any(len(row) != BOARD_DIM for row in grid):
                raise ValueError(f"Grid must be {BOARD_DIM}x{BOARD_DIM}")
            self.grid = [[cell.copy() for cell in row] for row in grid]
        else:
            self.grid = [
                [Cell(Candidates()) for _ in range(BOARD_DIM)]
                for _ in range(BOARD_DIM)
            ]

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, path: str) -> Board:
        """
        Read a puzzle from a text file.

        Raises:
            OSError: If the file cannot be read or is not valid UTF-8.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise OSError(f"{path} is not a valid UTF-8 text file") from e
        return cls.parse(text)

    @classmethod
    def parse(cls, text: str) -> Board:
        """
        Build a board from puzzle text.

        Each line is a row and each character a column. A decimal digit
        becomes a static fixed cell, any other character a blank cell.
        Anything outside the 9x9 area is ignored.
        """
        board = cls()
        for y, line in enumerate(text.split("\n")):
            if y >= BOARD_DIM:
                break
            if line.endswith("\r"):
                line = line[:-1]
            for x, char in enumerate(line[:BOARD_DIM]):
                if char in DIGITS:
                    board.grid[y][x] = Cell(Fixed(int(char)), is_static=True)
        return board

    @classmethod
    def from_string(cls, s: str) -> Board:
        """
        Create a board from an 81 character string.

        Args:
            s: Row-major values, 0 or . for empty, 1-9 for clues.
        """
        if len(s) != BOARD_DIM * BOARD_DIM:
            raise ValueError(f"String length must be {BOARD_DIM * BOARD_DIM}, got {len(s)}")

        board = cls()
        for idx, c in enumerate(s):
            y, x = divmod(idx, BOARD_DIM)
            if c in DIGITS and c != "0":
                board.grid[y][x] = Cell(Fixed(int(c)), is_static=True)
            elif c not in "0.":
                raise ValueError(f"Unexpected character {c!r} at position {idx}")
        return board

    def to_string(self) -> str:
        """Row-major string of fixed values, 0 for undecided cells."""
        return "".join(str(v) for v in self.to_array().flatten())

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------

    def cell(self, x: int, y: int) -> Cell:
        return self.grid[y][x]

    def copy(self) -> Board:
        """Create a deep copy of the board."""
        return Board(self.grid)

    def cells(self):
        """Yield ``((x, y), cell)`` in row-major order."""
        for y in range(BOARD_DIM):
            for x in range(BOARD_DIM):
                yield (x, y), self.grid[y][x]

    # ------------------------------------------------------------------
    # Constraint groups
    # ------------------------------------------------------------------

    @staticmethod
    def quadrant_cells(qx: int, qy: int) -> List[Coord]:
        """Coordinates of the 3x3 block with block index (qx, qy)."""
        if not (0 <= qx < QUADRANT_DIM and 0 <= qy < QUADRANT_DIM):
            raise ValueError(f"Quadrant index out of range: ({qx}, {qy})")

        start_x = qx * QUADRANT_DIM
        start_y = qy * QUADRANT_DIM
        return [
            (x, y)
            for y in range(start_y, start_y + QUADRANT_DIM)
            for x in range(start_x, start_x + QUADRANT_DIM)
        ]

    @staticmethod
    def row_cells(row: int) -> List[Coord]:
        """Coordinates of every cell in a row."""
        if not 0 <= row < BOARD_DIM:
            raise ValueError(f"Row index out of range: {row}")
        return [(x, row) for x in range(BOARD_DIM)]

    @staticmethod
    def column_cells(col: int) -> List[Coord]:
        """Coordinates of every cell in a column."""
        if not 0 <= col < BOARD_DIM:
            raise ValueError(f"Column index out of range: {col}")
        return [(col, y) for y in range(BOARD_DIM)]

    @classmethod
    def peers(cls, x: int, y: int) -> Set[Coord]:
        """
        All cells constraining (x, y): its row, column and quadrant.

        The cell itself is included.
        """
        peers = set(cls.quadrant_cells(x // QUADRANT_DIM, y // QUADRANT_DIM))
        peers.update(cls.row_cells(y))
        peers.update(cls.column_cells(x))
        return peers

    # ------------------------------------------------------------------
    # Propagation
    # ------------------------------------------------------------------

    def recompute_candidates(self, x: int, y: int) -> None:
        """
        Recompute the candidates of one undecided cell.

        Static and fixed cells are left alone. The new candidates are 1-9
        minus every fixed value in the cell's row, column and quadrant.
        """
        cell = self.grid[y][x]
        if cell.is_static or cell.domain.is_certain():
            return

        used = set()
        for px, py in self.peers(x, y):
            domain = self.grid[py][px].domain
            if isinstance(domain, Fixed):
                used.add(domain.value)

        cell.domain = Candidates(
            tuple(v for v in range(1, BOARD_DIM + 1) if v not in used)
        )

    def recompute_all_candidates(self) -> None:
        """Recompute candidates for every cell in row-major order."""
        for y in range(BOARD_DIM):
            for x in range(BOARD_DIM):
                self.recompute_candidates(x, y)

    def select_min_entropy_cell(self) -> Coord:
        """
        Find the undecided cell with the fewest candidates.

        Ties go to the first cell in row-major order. Returns (0, 0) when
        every cell is fixed, so callers should check completion first.
        """
        index = (0, 0)
        least = None

        for (x, y), cell in self.cells():
            if cell.domain.is_certain():
                continue
            entropy = len(cell.domain)
            if least is None or entropy < least:
                index = (x, y)
                least = entropy

        return index

    def collapse(self, x: int, y: int, rng: Optional[random.Random] = None) -> List[Board]:
        """
        Commit cell (x, y) to one of its candidates.

        A candidate is picked at random and fixed on this board. For every
        other candidate a copy of the board is made with the cell fixed to
        that value instead.

        Args:
            x, y: Cell position.
            rng: Random source. Defaults to the module-level ``random``.

        Returns:
            The alternative boards, shuffled.

        Raises:
            EmptyDomainError: The cell has no candidates (board is a dead end).
                              The board is not modified.
            AlreadyFixedError: The cell is already fixed.
        """
        if rng is None:
            rng = random
        cell = self.grid[y][x]
        if cell.domain.is_certain():
            raise AlreadyFixedError(x, y)

        values = list(cell.domain.as_sequence())
        if not values:
            raise EmptyDomainError(x, y)

        chosen = rng.randrange(len(values))
        cell.domain = Fixed(values[chosen])

        alternatives = []
        for i, value in enumerate(values):
            if i == chosen:
                continue
            branch = self.copy()
            branch.grid[y][x].domain = Fixed(value)
            alternatives.append(branch)

        rng.shuffle(alternatives)
        return alternatives

    def reset(self) -> None:
        """Clear every non-static cell back to an empty candidate list."""
        for _, cell in self.cells():
            if not cell.is_static:
                cell.domain = Candidates()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_fully_fixed(self) -> bool:
        """Check if every cell holds a fixed value."""
        return all(cell.domain.is_certain() for _, cell in self.cells())

    def is_complete(self) -> bool:
        """
        Check if the board is solved.

        Every cell must be fixed and every row, column and quadrant must
        sum to 45. The sum test does not catch a duplicate that is
        compensated by another wrong value in the same group.
        """
        if not self.is_fully_fixed():
            return False

        values = self.to_array()
        if not np.all(values.sum(axis=0) == EXPECTED_SUM):
            return False
        if not np.all(values.sum(axis=1) == EXPECTED_SUM):
            return False

        quadrants = values.reshape(QUADRANT_DIM, QUADRANT_DIM, QUADRANT_DIM, QUADRANT_DIM)
        return bool(np.all(quadrants.sum(axis=(1, 3)) == EXPECTED_SUM))

    def count_fixed(self) -> int:
        """Count cells holding a fixed value."""
        return sum(1 for _, cell in self.cells() if cell.domain.is_certain())

    def count_static(self) -> int:
        """Count the clues given by the puzzle."""
        return sum(1 for _, cell in self.cells() if cell.is_static)

    def entropy(self) -> int:
        """Total number of remaining candidates over undecided cells."""
        return sum(
            len(cell.domain) for _, cell in self.cells()
            if not cell.domain.is_certain()
        )

    def to_array(self) -> np.ndarray:
        """Fixed values as a 9x9 array indexed ``[y, x]``, 0 where undecided."""
        values = np.zeros((BOARD_DIM, BOARD_DIM), dtype=np.int32)
        for (x, y), cell in self.cells():
            if isinstance(cell.domain, Fixed):
                values[y, x] = cell.domain.value
        return values

    def __str__(self) -> str:
        """Pretty-print the fixed values."""
        lines = []
        horizontal_sep = '+' + (('-' * (QUADRANT_DIM * 2 + 1)) + '+') * QUADRANT_DIM

        for y in range(BOARD_DIM):
            if y % QUADRANT_DIM == 0:
                lines.append(horizontal_sep)

            row_str = '|'
            for x in range(BOARD_DIM):
                domain = self.grid[y][x].domain
                if isinstance(domain, Fixed):
                    row_str += f' {domain.value}'
                else:
                    row_str += ' .'

                if (x + 1) % QUADRANT_DIM == 0:
                    row_str += ' |'

            lines.append(row_str)

        lines.append(horizontal_sep)
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return f"Board(fixed={self.count_fixed()}, static={self.count_static()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.grid == other.grid

    __hash__ = None
