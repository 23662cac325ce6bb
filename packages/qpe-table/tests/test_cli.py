"""Tests for the qpe-table command line interface."""

from __future__ import annotations

import logging

import pytest
from click.testing import CliRunner

from qpe.table import cli
from qpe.table.cli import main
from qpe.table.stream import TableStream


class TestCli:
    """Reading delimited rows and streaming them as a table."""

    def test_uniform_table_from_stdin(self) -> None:
        result = CliRunner().invoke(
            main, ["--width", "40", "--cell-size", "5"], input="a,b\n1,2\n"
        )
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "┌─────┬─────┐",
            "│  a  │  b  │",
            "├─────┼─────┤",
            "│  1  │  2  │",
            "└─────┴─────┘",
        ]

    def test_explicit_widths_and_delimiter(self) -> None:
        result = CliRunner().invoke(
            main, ["-w", "40", "-d", ";", "--widths", "3,4"], input="x;y\n"
        )
        assert result.exit_code == 0, result.output
        assert result.output.splitlines() == [
            "┌───┬────┐",
            "│ x │ y  │",
            "└───┴────┘",
        ]

    def test_short_rows_are_padded(self) -> None:
        result = CliRunner().invoke(
            main, ["--width", "40", "--cell-size", "5"], input="a,b\n1\n"
        )
        assert result.exit_code == 0
        assert "│  1  │     │" in result.output

    def test_blank_lines_skipped(self) -> None:
        result = CliRunner().invoke(
            main, ["--width", "40", "--cell-size", "3"], input="a\n\nb\n"
        )
        assert result.exit_code == 0
        assert result.output.count("│") == 4

    def test_empty_input_prints_nothing(self) -> None:
        result = CliRunner().invoke(main, ["--width", "40"], input="")
        assert result.exit_code == 0
        assert result.output == ""

    def test_widths_must_match_first_row(self) -> None:
        result = CliRunner().invoke(main, ["--widths", "3,4,5"], input="a,b\n")
        assert result.exit_code == 2

    def test_widths_must_be_integers(self) -> None:
        result = CliRunner().invoke(main, ["--widths", "3,x"], input="a,b\n")
        assert result.exit_code == 2

    def test_reads_file_argument(self, tmp_path) -> None:
        source = tmp_path / "rows.csv"
        source.write_text("k,v\n", encoding="utf-8")
        result = CliRunner().invoke(main, [str(source), "--width", "40", "--cell-size", "3"])
        assert result.exit_code == 0, result.output
        assert "│ k │ v │" in result.output

    def test_long_rows_are_truncated_with_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="qpe.table.cli"):
            result = CliRunner().invoke(
                main, ["--width", "40", "--cell-size", "5"], input="a,b\n1,2,3\n"
            )
        assert result.exit_code == 0
        assert "│  1  │  2  │" in result.output
        assert "│  3  │" not in result.output
        assert "row 2 has 3 cell(s), expected 2" in caplog.text

    def test_widths_below_two_rejected(self) -> None:
        result = CliRunner().invoke(main, ["--widths", "1,4"], input="a,b\n")
        assert result.exit_code == 2

    def test_broken_pipe_silences_stdout_and_exits(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        silenced: list[bool] = []

        def fail_push(self: TableStream, cell: str) -> None:
            raise BrokenPipeError()

        monkeypatch.setattr(TableStream, "push", fail_push)
        monkeypatch.setattr(cli, "_silence_stdout", lambda: silenced.append(True))
        result = CliRunner().invoke(main, ["--width", "40"], input="a,b\n")
        assert result.exit_code == 1
        assert silenced == [True]
