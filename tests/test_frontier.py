"""Tests for the search frontier and its step/reset commands."""

import random

import pytest

from sudoku_wfc.core.board import Board
from sudoku_wfc.core.cell import Candidates, Fixed
from sudoku_wfc.solvers.frontier import (
    SearchFrontier, FrontierStatus, StepOutcome
)

from conftest import TEST_SOLUTION, CONTRADICTION_PUZZLE


class TestStep:
    """Tests for the step command."""

    def test_first_step_on_blank_board(self, blank_board):
        """Test the first step on a blank board."""
        frontier = SearchFrontier(blank_board, seed=1)
        result = frontier.step()

        assert result.outcome is StepOutcome.COLLAPSED
        assert result.cell == (0, 0)
        assert result.branches == 8
        assert len(frontier) == 9

        values = [b.cell(0, 0).domain.value for b in frontier.boards]
        assert values[0] == result.value
        assert sorted(values) == list(range(1, 10))

    def test_alternatives_queued_in_collapse_order(self, blank_board):
        """Test that queued boards follow the order collapse returned them in."""
        expected_active = blank_board.copy()
        expected_active.recompute_all_candidates()
        expected = expected_active.collapse(0, 0, random.Random(6))

        frontier = SearchFrontier(blank_board, seed=6)
        frontier.step()

        assert frontier.active_board() == expected_active
        assert frontier.boards[1:] == expected

    def test_frontier_keeps_its_own_copy(self, blank_board):
        """Test that stepping does not touch the loaded board."""
        frontier = SearchFrontier(blank_board, seed=1)
        frontier.step()
        assert blank_board.cell(0, 0).domain == Candidates()

    def test_alternatives_explored_before_older_branches(self, blank_board):
        """Test that new alternatives go ahead of older branches."""
        frontier = SearchFrontier(blank_board, seed=2)
        frontier.step()
        result = frontier.step()

        assert result.cell == (1, 0)
        assert result.branches == 7
        assert len(frontier) == 16
        for board in frontier.boards[:8]:
            assert isinstance(board.cell(1, 0).domain, Fixed)
        for board in frontier.boards[8:]:
            assert not board.cell(1, 0).domain.is_certain()

    def test_injected_rng_is_used(self, blank_board):
        """Test that an injected random source matches a seeded one."""
        first = SearchFrontier(blank_board, rng=random.Random(9))
        second = SearchFrontier(blank_board, seed=9)
        for _ in range(3):
            assert first.step() == second.step()
        assert first.boards == second.boards

    def test_dead_end_drops_active_board(self):
        """Test that a dead end moves on to the next board."""
        board = Board.parse(CONTRADICTION_PUZZLE)
        frontier = SearchFrontier(board, seed=0)
        frontier.boards.append(Board())

        result = frontier.step()

        assert result.outcome is StepOutcome.DEAD_END
        assert result.cell == (8, 0)
        assert len(frontier) == 1
        assert frontier.active_board().count_static() == 0
        assert frontier.status is FrontierStatus.EXPLORING
        assert frontier.dead_ends == 1

    def test_last_dead_end_is_unsolvable(self):
        """Test that a dead end on the last board is unsolvable."""
        frontier = SearchFrontier(Board.parse(CONTRADICTION_PUZZLE), seed=0)

        result = frontier.step()

        assert result.outcome is StepOutcome.UNSOLVABLE
        assert frontier.status is FrontierStatus.UNSOLVABLE
        assert len(frontier) == 1
        # Further steps do nothing
        assert frontier.step().outcome is StepOutcome.UNSOLVABLE
        assert frontier.steps == 1

    def test_conflicting_full_board_is_a_dead_end(self):
        """Test that a full board with conflicting clues is a dead end."""
        swapped = TEST_SOLUTION[1] + TEST_SOLUTION[0] + TEST_SOLUTION[2:]
        frontier = SearchFrontier(Board.from_string(swapped))

        assert frontier.step().outcome is StepOutcome.UNSOLVABLE
        assert frontier.status is FrontierStatus.UNSOLVABLE

    def test_step_on_complete_board(self):
        """Test stepping a board that is already complete."""
        frontier = SearchFrontier(Board.from_string(TEST_SOLUTION))

        assert frontier.step().outcome is StepOutcome.SOLVED
        assert frontier.status is FrontierStatus.SOLVED
        assert frontier.steps == 0

    def test_last_collapse_marks_solved(self):
        """Test that filling the last cell marks the frontier solved."""
        board = Board.from_string(TEST_SOLUTION[:80] + "0")
        frontier = SearchFrontier(board)

        result = frontier.step()

        assert result.outcome is StepOutcome.COLLAPSED
        assert result.value == 9
        assert frontier.status is FrontierStatus.SOLVED

    def test_counters(self, blank_board):
        """Test the step and branch counters."""
        frontier = SearchFrontier(blank_board, seed=4)
        frontier.step()
        frontier.step()

        assert frontier.steps == 2
        assert frontier.collapses == 2
        assert frontier.branches_created == 15
        assert frontier.max_frontier_size == 16


class TestReset:
    """Tests for the reset command."""

    def test_reset_discards_branches(self, puzzle_board):
        """Test that reset keeps only the cleared initial board."""
        frontier = SearchFrontier(puzzle_board, seed=3)
        for _ in range(10):
            frontier.step()

        frontier.reset()

        assert len(frontier) == 1
        assert frontier.status is FrontierStatus.EXPLORING
        assert frontier.steps == 0
        active = frontier.active_board()
        assert active.count_fixed() == active.count_static() == 30

    def test_reset_after_unsolvable(self):
        """Test resetting an unsolvable frontier."""
        frontier = SearchFrontier(Board.parse(CONTRADICTION_PUZZLE))
        frontier.step()
        frontier.reset()

        assert frontier.status is FrontierStatus.EXPLORING
        assert frontier.step().outcome is StepOutcome.UNSOLVABLE


class TestRun:
    """Tests for running the step loop to the end."""

    def test_run_solves_puzzle(self, puzzle_board):
        """Test running a puzzle to completion."""
        frontier = SearchFrontier(puzzle_board, seed=42)

        status = frontier.run()

        assert status is FrontierStatus.SOLVED
        assert frontier.active_board().to_string() == TEST_SOLUTION

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_run_on_blank_board_finds_a_solution(self, blank_board, seed):
        """Test that a blank board always gets filled."""
        frontier = SearchFrontier(blank_board, seed=seed)

        status = frontier.run(max_steps=20000)

        assert status is FrontierStatus.SOLVED
        assert frontier.active_board().is_complete()

    def test_run_respects_step_limit(self, puzzle_board):
        """Test that run stops at the step limit."""
        frontier = SearchFrontier(puzzle_board, seed=42)

        status = frontier.run(max_steps=3)

        assert status is FrontierStatus.EXPLORING
        assert frontier.steps == 3


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
