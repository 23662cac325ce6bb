"""Horizontal separator lines between column group blocks.

A separator sits between a block rendered with one column group (above) and
a block rendered with another (below). Each column boundary position picks
a junction glyph depending on whether the boundary exists above, below,
both, or neither.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from qpe.table.planner import group_display_width


@dataclass(frozen=True)
class SeparatorGlyphs:
    """Glyph set for one kind of separator."""

    start: str
    end: str
    line: str
    only_above: str
    only_below: str
    both: str

    def junction(self, above: bool, below: bool) -> str:
        if above and below:
            return self.both
        if above:
            return self.only_above
        if below:
            return self.only_below
        return self.line


# Top of the table, before the first block ever printed
HEAD_GLYPHS = SeparatorGlyphs(
    start="┌", end="┐", line="─", only_above="─", only_below="┬", both="┬"
)

# Between the last block of one record and the first block of the next
RECORD_GLYPHS = SeparatorGlyphs(
    start="├", end="┤", line="─", only_above="┴", only_below="┬", both="┼"
)

# Between blocks of the same record wrapped over several column groups
CONTINUATION_GLYPHS = SeparatorGlyphs(
    start="├", end="┤", line="╌", only_above="┴", only_below="┬", both="┼"
)

# Bottom of the table
END_GLYPHS = SeparatorGlyphs(
    start="└", end="┘", line="─", only_above="┴", only_below="─", both="┴"
)


def _boundaries(widths: Sequence[int]) -> set[int]:
    """Return inner offsets where a column ends, excluding the last column."""
    ticks: set[int] = set()
    offset = 0
    for w in widths[:-1]:
        offset += w
        ticks.add(offset)
        offset += 1
    return ticks


def build_separator(
    above: Sequence[int],
    below: Sequence[int],
    glyphs: SeparatorGlyphs,
) -> str:
    """Build one separator line between groups *above* and *below*.

    Offsets are counted from the first position after the ``start`` glyph.
    The result ends with a newline.
    """
    width = group_display_width(above)
    if group_display_width(below) != width:
        raise ValueError(
            f"column groups differ in display width: {list(above)} vs {list(below)}"
        )

    above_ticks = _boundaries(above)
    below_ticks = _boundaries(below)
    inner = "".join(
        glyphs.junction(i in above_ticks, i in below_ticks) for i in range(width - 2)
    )
    return f"{glyphs.start}{inner}{glyphs.end}\n"
