"""Width policies: how a table derives its requested column widths."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Sequence

MIN_COLUMN_WIDTH = 2


class WidthPolicy(Protocol):
    """Source of requested column widths for a table."""

    def column_widths(self) -> list[int]: ...


def _check_widths(widths: Sequence[int]) -> None:
    if not widths:
        raise ValueError("a table needs at least one column")
    for index, w in enumerate(widths):
        # Narrower columns cannot hold a double-width grapheme
        if w < MIN_COLUMN_WIDTH:
            raise ValueError(
                f"column {index} has width {w}, minimum is {MIN_COLUMN_WIDTH}"
            )


@dataclass(frozen=True)
class ExplicitWidths:
    """One requested width per column."""

    widths: tuple[int, ...]

    def __post_init__(self) -> None:
        _check_widths(self.widths)

    def column_widths(self) -> list[int]:
        return list(self.widths)


@dataclass(frozen=True)
class UniformWidth:
    """Every column requests the same *cell_size*."""

    column_count: int
    cell_size: int

    def __post_init__(self) -> None:
        if self.column_count < 1:
            raise ValueError(f"column_count must be at least 1, got {self.column_count}")
        # Narrower cells cannot hold a centered value with any padding
        if self.cell_size < 3:
            raise ValueError(f"cell_size must be at least 3, got {self.cell_size}")

    def column_widths(self) -> list[int]:
        return [self.cell_size] * self.column_count
