"""Core module: cell domains, the board and collapse errors."""

from .cell import Cell, CellDomain, Candidates, Fixed
from .board import Board, BOARD_DIM, QUADRANT_DIM
from .errors import CollapseError, EmptyDomainError, AlreadyFixedError

__all__ = [
    "Cell",
    "CellDomain",
    "Candidates",
    "Fixed",
    "Board",
    "BOARD_DIM",
    "QUADRANT_DIM",
    "CollapseError",
    "EmptyDomainError",
    "AlreadyFixedError",
]
