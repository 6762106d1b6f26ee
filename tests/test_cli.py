"""Smoke tests for the command-line interface."""

import os

import pytest
from sudoku_prop.cli import main

import sudoku_prop.cli
import sudoku_prop.solver

from puzzles import EASY_PUZZLE, EXHAUSTED_PUZZLE, INVALID_PUZZLE, TEST_PUZZLE, TEST_SOLUTION


class TestSolveCommand:
    """Tests for the solve command."""

    def test_solve(self, capsys):
        main(["solve", TEST_PUZZLE])
        out = capsys.readouterr().out
        assert "Solved in" in out
        assert "Eliminations:" in out

    def test_no_solution(self, capsys):
        main(["solve", INVALID_PUZZLE])
        assert "No solution" in capsys.readouterr().out

    def test_search_exhausted(self, capsys):
        main(["solve", EXHAUSTED_PUZZLE])
        out = capsys.readouterr().out
        assert "Input puzzle" in out
        assert "No solution" in out

    def test_parses_once(self, monkeypatch, capsys):
        """The preview grid is reused for solving."""
        calls = []
        original = sudoku_prop.cli.parse_grid

        def counting_parse(text):
            calls.append(text)
            return original(text)

        monkeypatch.setattr(sudoku_prop.cli, "parse_grid", counting_parse)
        monkeypatch.setattr(sudoku_prop.solver, "parse_grid", counting_parse)

        main(["solve", TEST_PUZZLE])

        assert calls == [TEST_PUZZLE]
        assert "Solved in" in capsys.readouterr().out

    def test_malformed(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["solve", "123"])
        assert exc_info.value.code == 1
        assert "Error parsing puzzle" in capsys.readouterr().out

    def test_no_command(self):
        with pytest.raises(SystemExit):
            main([])


class TestBatchCommand:
    """Tests for the batch command."""

    def test_batch(self, tmp_path, capsys):
        path = tmp_path / "puzzles.txt"
        path.write_text(TEST_PUZZLE + "\n" + EASY_PUZZLE + "\n")
        json_path = tmp_path / "results.json"

        main(["batch", str(path), "--no-progress", "--json", str(json_path)])

        out = capsys.readouterr().out
        assert "Solved 2 of 2 puzzles" in out
        assert json_path.is_file()
        with open(tmp_path / "puzzles.out") as f:
            assert f.readline().strip() == TEST_SOLUTION

    def test_missing_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["batch", str(tmp_path / "missing.txt")])
        assert exc_info.value.code == 1

    def test_charts(self, tmp_path, capsys):
        path = tmp_path / "puzzles.txt"
        path.write_text(TEST_PUZZLE + "\n")
        charts_dir = tmp_path / "charts"

        main(["batch", str(path), "--no-progress", "--charts", str(charts_dir)])

        assert os.path.isfile(charts_dir / "time_distribution.png")
        assert "Charts saved to" in capsys.readouterr().out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
