"""Tests for qpe.table.separator -- junction glyph selection."""

from __future__ import annotations

import pytest

from qpe.table.separator import (
    CONTINUATION_GLYPHS,
    END_GLYPHS,
    HEAD_GLYPHS,
    RECORD_GLYPHS,
    SeparatorGlyphs,
    build_separator,
)


class TestSeparatorGlyphs:
    """Junction selection from boundary presence."""

    def test_junction_table(self) -> None:
        g = SeparatorGlyphs(start="s", end="e", line="-", only_above="A", only_below="B", both="X")
        assert g.junction(False, False) == "-"
        assert g.junction(True, False) == "A"
        assert g.junction(False, True) == "B"
        assert g.junction(True, True) == "X"


class TestBuildSeparator:
    """Separator lines between two column groups."""

    def test_identical_groups_use_only_both_glyph(self) -> None:
        line = build_separator([5, 5, 5], [5, 5, 5], RECORD_GLYPHS)
        assert line == "├" + "─" * 5 + "┼" + "─" * 5 + "┼" + "─" * 5 + "┤\n"
        assert "┬" not in line
        assert "┴" not in line

    def test_head_separator(self) -> None:
        line = build_separator([3, 4], [3, 4], HEAD_GLYPHS)
        assert line == "┌───┬────┐\n"

    def test_end_separator(self) -> None:
        line = build_separator([3, 4], [3, 4], END_GLYPHS)
        assert line == "└───┴────┘\n"

    def test_single_column_has_no_junctions(self) -> None:
        assert build_separator([6], [6], HEAD_GLYPHS) == "┌──────┐\n"

    def test_continuation_merges_boundaries(self) -> None:
        # [7, 7, 7] above ends columns at offsets 7 and 15; [15, 7] at 15.
        line = build_separator([7, 7, 7], [15, 7], CONTINUATION_GLYPHS)
        assert line == "├" + "╌" * 7 + "┴" + "╌" * 7 + "┼" + "╌" * 7 + "┤\n"

    def test_new_record_after_wrapped_block(self) -> None:
        line = build_separator([15, 7], [7, 7, 7], RECORD_GLYPHS)
        assert line == "├" + "─" * 7 + "┬" + "─" * 7 + "┼" + "─" * 7 + "┤\n"

    def test_separator_width_matches_group(self) -> None:
        line = build_separator([10, 5], [16], RECORD_GLYPHS)
        # │10│5│ is 18 columns wide.
        assert len(line.rstrip("\n")) == 18

    def test_mismatched_widths_rejected(self) -> None:
        with pytest.raises(ValueError):
            build_separator([5, 5], [5], RECORD_GLYPHS)
