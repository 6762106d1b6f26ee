"""Unit tests for the puzzle-level solve API."""

import pytest
from sudoku_prop import MalformedPuzzleError, PropagationSolver, is_solved, parse_grid, solve
from sudoku_prop.core.topology import units
from sudoku_prop.core.validator import validate_solution

from puzzles import (
    EASY_PUZZLE,
    EASY_SOLUTION,
    EXHAUSTED_PUZZLE,
    HARD_PUZZLE,
    INVALID_PUZZLE,
    TEST_PUZZLE,
    TEST_SOLUTION,
)


class TestSolve:
    """Tests for solve()."""

    def test_solve_puzzle(self):
        """Test solving a known puzzle."""
        result = solve(TEST_PUZZLE)

        assert result.solved
        assert result.grid is not None
        assert is_solved(result.grid)
        assert result.to_string() == TEST_SOLUTION

    def test_every_unit_holds_one_to_nine(self):
        """Each unit of a solution shows 1-9 exactly once."""
        grid = solve(HARD_PUZZLE).grid
        for unit in units():
            digits = [grid.digit(s) for s in unit]
            assert sorted(digits) == list(range(1, 10))

    def test_easy_needs_no_search(self):
        """Propagation alone solves an easy puzzle."""
        result = solve(EASY_PUZZLE)
        assert result.to_string() == EASY_SOLUTION
        assert result.nodes_explored == 0
        assert result.eliminations == 648

    def test_already_solved(self):
        """A complete grid comes back unchanged with no branches taken."""
        result = solve(TEST_SOLUTION)
        assert result.solved
        assert result.to_string() == TEST_SOLUTION
        assert result.nodes_explored == 0
        assert result.backtracks == 0

    def test_hard_puzzle(self):
        """Test a puzzle that needs search."""
        result = solve(HARD_PUZZLE)
        assert result.solved
        assert validate_solution(HARD_PUZZLE, result.grid)
        assert result.nodes_explored > 0

    def test_search_exhausted(self):
        """Clues that propagate cleanly but admit no solution give no grid."""
        grid = parse_grid(EXHAUSTED_PUZZLE)
        assert not is_solved(grid)

        result = solve(EXHAUSTED_PUZZLE)
        assert result.grid is None
        assert not result.solved
        assert result.to_string() == "." * 81
        assert result.eliminations > 0
        assert result.backtracks > 0
        assert result.nodes_explored >= result.backtracks

    def test_contradictory_clues(self):
        """Conflicting clues give no grid rather than an exception."""
        result = solve(INVALID_PUZZLE)
        assert result.grid is None
        assert not result.solved
        assert result.to_string() == "." * 81
        assert result.eliminations > 0

    def test_malformed_input(self):
        """Input that is not 81 cells is rejected outright."""
        with pytest.raises(MalformedPuzzleError):
            solve(TEST_PUZZLE[:-1])

    def test_deterministic(self):
        """Solving twice gives identical output and counters."""
        first = solve(HARD_PUZZLE)
        second = solve(HARD_PUZZLE)
        assert first.to_string() == second.to_string()
        assert first.eliminations == second.eliminations
        assert first.nodes_explored == second.nodes_explored


class TestPropagationSolver:
    """Tests for the solver class and its stats."""

    def test_stats_collected(self):
        """Test that stats are collected."""
        result = PropagationSolver().solve(HARD_PUZZLE)
        assert result.time_seconds > 0
        assert result.eliminations >= 648

    def test_solve_grid(self):
        """Searching a parsed grid matches solving the text and leaves the grid alone."""
        grid = parse_grid(HARD_PUZZLE)
        before = grid.copy()

        result = PropagationSolver().solve_grid(grid)

        assert grid == before
        assert result.to_string() == solve(HARD_PUZZLE).to_string()
        assert result.eliminations == solve(HARD_PUZZLE).eliminations
        assert result.time_seconds > 0

    def test_solve_grid_exhausted(self):
        """An unsolvable parsed grid gives no solution."""
        result = PropagationSolver().solve_grid(parse_grid(EXHAUSTED_PUZZLE))
        assert result.grid is None
        assert result.backtracks > 0

    def test_to_dict(self):
        """Test result serialization."""
        data = PropagationSolver().solve(TEST_PUZZLE).to_dict()
        assert data["solved"] is True
        assert data["solution"] == TEST_SOLUTION
        assert set(data) == {
            "solved", "solution", "eliminations",
            "nodes_explored", "backtracks", "time_seconds",
        }


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
