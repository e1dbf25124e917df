"""The search frontier: every board state still worth exploring."""

from __future__ import annotations
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from ..core.board import Board
from ..core.errors import EmptyDomainError


class FrontierStatus(Enum):
    """Where the search currently stands."""
    EXPLORING = "exploring"
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


class StepOutcome(Enum):
    """What a single step did."""
    COLLAPSED = "collapsed"
    DEAD_END = "dead_end"
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"


@dataclass
class StepResult:
    """Result of one step command."""
    outcome: StepOutcome
    cell: Optional[Tuple[int, int]] = None
    value: Optional[int] = None
    branches: int = 0


class SearchFrontier:
    """
    Ordered collection of candidate boards, explored depth first.

    The board at index 0 is the active one: it is shown to the user and
    advanced by ``step()``. A successful collapse queues the untaken
    alternatives right behind it, so they are tried before older branches.
    A contradiction abandons the active board and the next one takes over.

    When the last board hits a contradiction the frontier does not empty
    itself. It keeps that board on display and switches to the terminal
    UNSOLVABLE status; further steps do nothing until ``reset()``.
    """

    def __init__(
        self,
        board: Board,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None
    ):
        """
        Initialize the frontier.

        Args:
            board: The loaded puzzle. The frontier keeps its own copy.
            rng: Random source for value choice and branch order.
            seed: Seed for a fresh random source, used when rng is None.
        """
        self.rng = rng if rng is not None else random.Random(seed)
        self.boards: List[Board] = [board.copy()]
        self.status = FrontierStatus.EXPLORING
        self._reset_counters()

    def _reset_counters(self) -> None:
        self.steps = 0
        self.collapses = 0
        self.dead_ends = 0
        self.branches_created = 0
        self.max_frontier_size = len(self.boards)

    def active_board(self) -> Board:
        """The board currently being displayed and advanced."""
        return self.boards[0]

    def __len__(self) -> int:
        return len(self.boards)

    def is_finished(self) -> bool:
        return self.status is not FrontierStatus.EXPLORING

    def step(self) -> StepResult:
        """
        Advance the active board by one collapse.

        Returns:
            A StepResult describing what happened.
        """
        if self.status is FrontierStatus.UNSOLVABLE:
            return StepResult(StepOutcome.UNSOLVABLE)

        board = self.boards[0]
        if board.is_complete():
            self.status = FrontierStatus.SOLVED
            return StepResult(StepOutcome.SOLVED)

        self.steps += 1
        board.recompute_all_candidates()

        # Fully fixed but not complete: the clues themselves conflict
        if board.is_fully_fixed():
            return self._abandon_active()

        x, y = board.select_min_entropy_cell()
        try:
            alternatives = board.collapse(x, y, self.rng)
        except EmptyDomainError:
            return self._abandon_active(cell=(x, y))

        self.boards[1:1] = alternatives
        self.collapses += 1
        self.branches_created += len(alternatives)
        self.max_frontier_size = max(self.max_frontier_size, len(self.boards))

        if board.is_complete():
            self.status = FrontierStatus.SOLVED

        return StepResult(
            StepOutcome.COLLAPSED,
            cell=(x, y),
            value=board.cell(x, y).domain.value,
            branches=len(alternatives)
        )

    def _abandon_active(self, cell: Optional[Tuple[int, int]] = None) -> StepResult:
        """Drop the active board, or stop if it is the last one."""
        self.dead_ends += 1
        if len(self.boards) == 1:
            self.status = FrontierStatus.UNSOLVABLE
            return StepResult(StepOutcome.UNSOLVABLE, cell=cell)

        self.boards.pop(0)
        return StepResult(StepOutcome.DEAD_END, cell=cell)

    def reset(self) -> None:
        """Discard all branches and clear the active board back to its clues."""
        del self.boards[1:]
        self.boards[0].reset()
        self.status = FrontierStatus.EXPLORING
        self._reset_counters()

    def run(self, max_steps: Optional[int] = None) -> FrontierStatus:
        """
        Step until the puzzle is solved, proven unsolvable or the step
        limit is reached.
        """
        while not self.is_finished():
            if max_steps is not None and self.steps >= max_steps:
                break
            self.step()
        return self.status
