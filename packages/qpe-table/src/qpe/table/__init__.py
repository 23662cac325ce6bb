"""qpe-table: streaming box-drawn tables that fit a fixed line width."""

# Configuration
from qpe.table.config import (
    DEFAULT_CELL_SIZE,
    DEFAULT_LINE_WIDTH,
    LINE_LEN_ENV,
    resolve_line_width,
)

# Record writer
from qpe.table.live import LiveTableWriter

# Planning
from qpe.table.planner import MIN_LINE_WIDTH, group_display_width, plan_column_groups

# Width policies
from qpe.table.policy import ExplicitWidths, UniformWidth, WidthPolicy

# Separators
from qpe.table.separator import (
    CONTINUATION_GLYPHS,
    END_GLYPHS,
    HEAD_GLYPHS,
    RECORD_GLYPHS,
    SeparatorGlyphs,
    build_separator,
)

# Output sinks
from qpe.table.sink import StreamSink, TextSink, stdout_sink

# Core table
from qpe.table.stream import TablePlan, TableStream, render_block

# Utilities
from qpe.table.utils import center_to_width, visible_width, wrap_cell

__all__ = [
    # Config
    "DEFAULT_CELL_SIZE",
    "DEFAULT_LINE_WIDTH",
    "LINE_LEN_ENV",
    "resolve_line_width",
    # Live writer
    "LiveTableWriter",
    # Planner
    "MIN_LINE_WIDTH",
    "group_display_width",
    "plan_column_groups",
    # Policies
    "ExplicitWidths",
    "UniformWidth",
    "WidthPolicy",
    # Separators
    "CONTINUATION_GLYPHS",
    "END_GLYPHS",
    "HEAD_GLYPHS",
    "RECORD_GLYPHS",
    "SeparatorGlyphs",
    "build_separator",
    # Sinks
    "StreamSink",
    "TextSink",
    "stdout_sink",
    # Table
    "TablePlan",
    "TableStream",
    "render_block",
    # Utilities
    "center_to_width",
    "visible_width",
    "wrap_cell",
]
