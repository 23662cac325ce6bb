"""Streaming table renderer.

``TableStream`` prints a table one cell at a time. Columns that do not fit
on one line are split into column groups; each logical row is printed as
one block per group, cycling through the groups round-robin. Blocks are
separated by box-drawing rules: a solid rule between records, a dashed rule
between the blocks of one wrapped record.

Five 7-column cells on a 25-column line::

    ┌───────┬───────┬───────┐
    │head 1 │head 2 │head 3 │
    ├╌╌╌╌╌╌╌┴╌╌╌╌╌╌╌┼╌╌╌╌╌╌╌┤
    │ head 4 (long) │head 5 │
    │               │ (even │
    │               │longer │
    │               │ !!!!) │
    └───────────────┴───────┘
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from qpe.table.planner import group_display_width, plan_column_groups
from qpe.table.policy import ExplicitWidths, UniformWidth, WidthPolicy
from qpe.table.separator import (
    CONTINUATION_GLYPHS,
    END_GLYPHS,
    HEAD_GLYPHS,
    RECORD_GLYPHS,
    build_separator,
)
from qpe.table.sink import TextSink, stdout_sink
from qpe.table.utils import center_to_width, wrap_cell

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = "│"
LINE_DELIMITER = "│"


# ---------------------------------------------------------------------------
# TablePlan
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TablePlan:
    """Column groups and the precomputed separators for one table.

    ``mid_separators[i]`` is written before a block of group ``i`` once the
    table has started: index 0 opens a new record, any other index continues
    the current record.
    """

    groups: tuple[tuple[int, ...], ...]
    head_separator: str
    mid_separators: tuple[str, ...]
    end_separator: str

    @classmethod
    def create(cls, column_widths: Sequence[int], line_width: int) -> TablePlan:
        groups = [tuple(g) for g in plan_column_groups(column_widths, line_width)]
        count = len(groups)
        mid = tuple(
            build_separator(
                groups[(i - 1) % count],
                groups[i],
                RECORD_GLYPHS if i == 0 else CONTINUATION_GLYPHS,
            )
            for i in range(count)
        )
        return cls(
            groups=tuple(groups),
            head_separator=build_separator(groups[0], groups[0], HEAD_GLYPHS),
            mid_separators=mid,
            end_separator=build_separator(groups[-1], groups[-1], END_GLYPHS),
        )

    @property
    def display_width(self) -> int:
        return group_display_width(self.groups[0])

    @property
    def column_count(self) -> int:
        return sum(len(g) for g in self.groups)


def render_block(cells: Sequence[str], widths: Sequence[int]) -> list[str]:
    """Render one block: each cell wrapped to its column and centered.

    The block is as tall as its tallest wrapped cell; shorter cells are
    padded with blank sub-lines.
    """
    wrapped = [wrap_cell(cell, w) for cell, w in zip(cells, widths)]
    height = max(len(sub_lines) for sub_lines in wrapped)

    lines: list[str] = []
    for row in range(height):
        parts = [
            center_to_width(sub_lines[row] if row < len(sub_lines) else "", w)
            for sub_lines, w in zip(wrapped, widths)
        ]
        lines.append(LINE_DELIMITER + FIELD_SEPARATOR.join(parts) + LINE_DELIMITER + "\n")
    return lines


# ---------------------------------------------------------------------------
# TableStream
# ---------------------------------------------------------------------------


class TableStream:
    """Incrementally render a table of string cells within a line width.

    Cells are pushed in row-major order. The table is not thread safe; one
    owner must serialize calls. The sink's lock is held only while a block
    is being written.
    """

    def __init__(
        self,
        column_widths: Sequence[int],
        line_width: int,
        *,
        sink: TextSink | None = None,
    ) -> None:
        self._init(ExplicitWidths(tuple(column_widths)), line_width, sink)

    @classmethod
    def uniform(
        cls,
        column_count: int,
        cell_size: int,
        line_width: int,
        *,
        sink: TextSink | None = None,
    ) -> TableStream:
        """Create a table whose columns all request *cell_size* columns."""
        return cls.from_policy(UniformWidth(column_count, cell_size), line_width, sink=sink)

    @classmethod
    def from_policy(
        cls,
        policy: WidthPolicy,
        line_width: int,
        *,
        sink: TextSink | None = None,
    ) -> TableStream:
        table = cls.__new__(cls)
        table._init(policy, line_width, sink)
        return table

    def _init(self, policy: WidthPolicy, line_width: int, sink: TextSink | None) -> None:
        if line_width < 1:
            raise ValueError(f"line_width must be positive, got {line_width}")
        self._policy = policy
        self._plan = TablePlan.create(policy.column_widths(), line_width)
        self._sink: TextSink = sink if sink is not None else stdout_sink()
        self._pending: list[str] = []
        self._cursor = 0
        self._table_started = False
        logger.debug(
            "planned %d column group(s) for line width %d: %s",
            len(self._plan.groups),
            line_width,
            [list(g) for g in self._plan.groups],
        )

    # -- properties ---------------------------------------------------------

    @property
    def plan(self) -> TablePlan:
        return self._plan

    @property
    def policy(self) -> WidthPolicy:
        return self._policy

    @property
    def line_width(self) -> int:
        """Rendered width of every line of this table, newline excluded."""
        return self._plan.display_width

    @property
    def column_count(self) -> int:
        return self._plan.column_count

    @property
    def pending(self) -> int:
        """Number of cells buffered for the block currently being filled."""
        return len(self._pending)

    def is_started(self) -> bool:
        return self._table_started

    # -- output -------------------------------------------------------------

    def push(self, cell: str) -> None:
        """Add the next cell, writing a block once its column group is full.

        Raises ``OSError`` if the sink fails. The buffered cells are dropped
        and the cursor advanced regardless, so the caller may keep pushing.
        """
        self._pending.append(cell)
        widths = self._plan.groups[self._cursor]
        if len(self._pending) < len(widths):
            return

        cells = self._pending
        self._pending = []
        cursor = self._cursor
        self._cursor = (cursor + 1) % len(self._plan.groups)

        if self._table_started:
            separator = self._plan.mid_separators[cursor]
        else:
            separator = self._plan.head_separator
            self._table_started = True

        self._write(separator + "".join(render_block(cells, widths)))

    def end_table(self) -> None:
        """Close the table with the end separator if a block was printed.

        Does nothing before the first block. Otherwise cells of an unfinished
        row are discarded so that a table restarted by further pushes begins
        with a fresh row.
        """
        if not self._table_started:
            return

        if self._pending:
            logger.debug("discarding %d cell(s) of an unfinished row", len(self._pending))
        self._pending = []
        self._cursor = 0
        self._table_started = False
        self._write(self._plan.end_separator)

    def _write(self, data: str) -> None:
        try:
            with self._sink.lock:
                self._sink.write(data)
                self._sink.flush()
        except OSError as e:
            logger.debug("table write failed: %s", e)
            raise
