"""Column group planning: split columns into blocks that fit a line width.

A column group is rendered as ``│c1│c2│...│cn│``, so its display width is
the sum of its column widths plus one glyph per column plus the leading one.
Every group of a plan is widened to the same display width so that stacked
blocks line up.
"""

from __future__ import annotations

from typing import Sequence

MIN_LINE_WIDTH = 9


def group_display_width(widths: Sequence[int]) -> int:
    """Return the rendered width of a group, separator glyphs included."""
    return sum(widths) + len(widths) + 1


def plan_column_groups(requested: Sequence[int], line_width: int) -> list[list[int]]:
    """Partition *requested* column widths into groups fitting *line_width*.

    Columns are accumulated greedily; a column that would overflow the line
    starts a new group, and a column that alone exceeds the line is clamped
    to fit. Slack is then added to the first column of each narrower group
    so that all groups share the widest group's display width.

    >>> plan_column_groups([20, 10, 5], 25)
    [[20], [14, 5]]
    """
    if not requested:
        raise ValueError("at least one column is required")

    line_width = max(line_width, MIN_LINE_WIDTH)

    groups: list[list[int]] = []
    group: list[int] = []
    group_width = 1
    for w in requested:
        if group_width + w + 1 > line_width:
            if group:
                groups.append(group)
                group = []
            group_width = 1
        group.append(min(w, line_width - group_width - 1))
        group_width += w + 1
    groups.append(group)

    target = max(group_display_width(g) for g in groups)
    for g in groups:
        g[0] += target - group_display_width(g)
    return groups
