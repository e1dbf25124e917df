"""Batch solver that runs the wave-function-collapse step loop to the end."""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import Optional, Tuple, Dict, Any
import time
import tracemalloc

from .frontier import SearchFrontier, FrontierStatus
from ..core.board import Board


@dataclass
class SolverStats:
    """Statistics collected during one solve."""
    solved: bool = False
    status: str = FrontierStatus.EXPLORING.value
    time_seconds: float = 0.0
    memory_bytes: int = 0
    steps: int = 0
    collapses: int = 0
    dead_ends: int = 0
    branches: int = 0
    max_frontier_size: int = 0
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class WFCSolver:
    """
    Wave-function-collapse solver.

    Repeats the interactive "step" command until the active board is
    complete or every branch has been abandoned:
    - Recompute candidate domains on the active board
    - Collapse the cell with the fewest candidates to a random value
    - Queue one alternative board per untaken value
    - Abandon the active board on contradiction
    """

    name = "WFC"

    def __init__(self, seed: Optional[int] = None, max_steps: Optional[int] = None):
        """
        Initialize the WFC solver.

        Args:
            seed: Random seed for reproducible exploration order.
            max_steps: Give up after this many steps (None for no limit).
        """
        self.seed = seed
        self.max_steps = max_steps
        self.frontier: Optional[SearchFrontier] = None
        self.stats = SolverStats()

    def solve(self, board: Board) -> Tuple[Optional[Board], SolverStats]:
        """
        Solve the puzzle and collect performance statistics.

        Args:
            board: The puzzle to solve. It is never modified.

        Returns:
            Tuple of (solved board or None, statistics)
        """
        self.stats = SolverStats()
        self.frontier = SearchFrontier(board, seed=self.seed)

        tracemalloc.start()
        start_time = time.perf_counter()

        solution = None
        try:
            status = self.frontier.run(self.max_steps)
            if status is FrontierStatus.SOLVED:
                solution = self.frontier.active_board()
            self.stats.status = status.value
        except Exception as e:
            self.stats.status = "error"
            self.stats.error = str(e)

        self.stats.time_seconds = time.perf_counter() - start_time
        _, peak = tracemalloc.get_traced_memory()
        tracemalloc.stop()

        self.stats.memory_bytes = peak
        self.stats.steps = self.frontier.steps
        self.stats.collapses = self.frontier.collapses
        self.stats.dead_ends = self.frontier.dead_ends
        self.stats.branches = self.frontier.branches_created
        self.stats.max_frontier_size = self.frontier.max_frontier_size
        self.stats.solved = solution is not None and solution.is_complete()

        return solution, self.stats
