"""Draw board states with matplotlib."""

from __future__ import annotations
import os
from typing import Optional, Tuple

import matplotlib.pyplot as plt

from ..core.board import Board, BOARD_DIM, QUADRANT_DIM
from ..core.cell import Cell


COLOR_STATIC = "#1d2021"
COLOR_CERTAIN = "#0083b0"
COLOR_UNCERTAIN = "#518471"
COLOR_BACKGROUND = "white"


def candidate_layout(count: int) -> Tuple[int, int]:
    """Columns and rows used to lay out ``count`` digits inside one cell."""
    if count >= 7:
        return 3, 3
    if count >= 5:
        return 3, 2
    if count >= 3:
        return 2, 2
    if count == 2:
        return 2, 1
    return 1, 1


def cell_color(cell: Cell) -> str:
    """Clues, solver-fixed values and candidates each get their own colour."""
    if cell.is_static:
        return COLOR_STATIC
    if cell.domain.is_certain():
        return COLOR_CERTAIN
    return COLOR_UNCERTAIN


class BoardRenderer:
    """
    Renders a board onto a matplotlib axes.

    Fixed values are drawn large in the middle of their cell. Candidate
    lists are drawn small, spread over a grid sized by their count.
    """

    def __init__(self, size: float = 9.0):
        """
        Args:
            size: Figure width and height in inches.
        """
        self.size = size

    @property
    def font_size(self) -> float:
        # 72 points per inch, 40% of a cell
        return self.size * 72 / BOARD_DIM * 0.4

    @property
    def small_font_size(self) -> float:
        return self.size * 72 / BOARD_DIM * 0.25

    def new_figure(self):
        return plt.subplots(figsize=(self.size, self.size))

    def draw(self, board: Board, ax) -> None:
        """Clear ``ax`` and draw ``board`` on it."""
        ax.clear()
        ax.set_facecolor(COLOR_BACKGROUND)
        ax.set_xlim(0, BOARD_DIM)
        ax.set_ylim(BOARD_DIM, 0)
        ax.set_aspect('equal')
        ax.set_xticks([])
        ax.set_yticks([])

        for (x, y), cell in board.cells():
            values = cell.domain.as_sequence()
            if not values:
                continue

            cols, rows = candidate_layout(len(values))
            font_size = self.font_size if len(values) == 1 else self.small_font_size
            color = cell_color(cell)

            for i, value in enumerate(values):
                row, col = divmod(i, cols)
                ax.text(
                    x + (col + 0.5) / cols,
                    y + (row + 0.5) / rows,
                    str(value),
                    ha='center', va='center',
                    fontsize=font_size, color=color
                )

        for i in range(BOARD_DIM + 1):
            width = 3.0 if i % QUADRANT_DIM == 0 else 0.8
            ax.axhline(i, color=COLOR_STATIC, linewidth=width)
            ax.axvline(i, color=COLOR_STATIC, linewidth=width)

    def save(self, board: Board, path: str, title: Optional[str] = None) -> str:
        """
        Render ``board`` to an image file.

        Returns:
            The path written.
        """
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        fig, ax = self.new_figure()
        self.draw(board, ax)
        if title:
            ax.set_title(title, fontsize=14, fontweight='bold')

        plt.savefig(path, dpi=100, bbox_inches='tight')
        plt.close(fig)
        return path
