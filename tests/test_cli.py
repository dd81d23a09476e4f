"""
Tests for the command-line entry point.

These tests verify:
    1. Both answers are printed for a valid input file
    2. Malformed input and missing files exit with status 1
    3. Generated scenarios run end to end
"""

import pytest

from sequencer.cli import main, run
from sequencer.config import SchedulerConfig
from sequencer.models.requirement import PrecedenceSet

EXAMPLE_TEXT = "\n".join([
    "Step C must be finished before step A can begin.",
    "Step C must be finished before step F can begin.",
    "Step A must be finished before step B can begin.",
    "Step A must be finished before step D can begin.",
    "Step B must be finished before step E can begin.",
    "Step D must be finished before step E can begin.",
    "Step F must be finished before step E can begin.",
]) + "\n"


class TestCli:
    """Tests for the sequencer CLI."""

    def _write_input(self, tmp_path, text: str = EXAMPLE_TEXT):
        path = tmp_path / "input.txt"
        path.write_text(text, encoding="utf-8")
        return path

    def test_run_returns_both_answers(self):
        precedence = PrecedenceSet.from_lines(EXAMPLE_TEXT.splitlines())
        assert run(precedence, SchedulerConfig.simple()) == ("CABDFE", 15)

    def test_main_prints_answers(self, tmp_path, capsys):
        path = self._write_input(tmp_path)
        assert main([str(path), "--workers", "2", "--delay", "0"]) == 0
        out = capsys.readouterr().out
        assert "Part 1: CABDFE" in out
        assert "Part 2: 15" in out

    def test_main_with_report(self, tmp_path, capsys):
        path = self._write_input(tmp_path)
        assert main([str(path), "--workers", "2", "--delay", "0", "--report"]) == 0
        assert "Worker Utilization" in capsys.readouterr().out

    def test_malformed_input_fails(self, tmp_path, capsys):
        path = self._write_input(tmp_path, EXAMPLE_TEXT + "Step 9 must be done.\n")
        assert main([str(path)]) == 1
        assert "line 8" in capsys.readouterr().out

    def test_missing_file_fails(self, tmp_path):
        assert main([str(tmp_path / "missing.txt")]) == 1

    def test_cycle_fails(self, tmp_path, capsys):
        text = (
            "Step A must be finished before step B can begin.\n"
            "Step B must be finished before step A can begin.\n"
        )
        path = self._write_input(tmp_path, text)
        assert main([str(path)]) == 1
        assert "cycle" in capsys.readouterr().out

    def test_invalid_worker_count_fails(self, tmp_path):
        path = self._write_input(tmp_path)
        assert main([str(path), "--workers", "0"]) == 1

    def test_random_scenario(self, capsys):
        assert main(["--random", "8", "--seed", "3"]) == 0
        assert "Part 2:" in capsys.readouterr().out

    def test_input_required(self):
        with pytest.raises(SystemExit):
            main([])

    def test_input_and_random_are_exclusive(self, tmp_path):
        """A file and a generated scenario cannot both be requested."""
        path = self._write_input(tmp_path)
        with pytest.raises(SystemExit) as excinfo:
            main([str(path), "--random", "5"])
        assert excinfo.value.code == 2

    def test_unknown_log_level_rejected(self, tmp_path):
        path = self._write_input(tmp_path)
        with pytest.raises(SystemExit) as excinfo:
            main([str(path), "--log-level", "chatty"])
        assert excinfo.value.code == 2

    def test_log_level_is_case_insensitive(self, tmp_path):
        path = self._write_input(tmp_path)
        assert main([str(path), "--workers", "2", "--delay", "0", "--log-level", "debug"]) == 0
