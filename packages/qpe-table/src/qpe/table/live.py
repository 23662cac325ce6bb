"""Live record writer: streams header + records through a ``TableStream``."""

from __future__ import annotations

from typing import Sequence

from qpe.table.config import DEFAULT_CELL_SIZE, resolve_line_width
from qpe.table.sink import TextSink
from qpe.table.stream import TableStream


class LiveTableWriter:
    """Print records as they arrive, as one live table per batch.

    The table is created on the first record, with one uniform column per
    header name, and the header is printed as its first row. ``dump_and_reset``
    closes the table; the next record starts a new one with its header.
    """

    def __init__(
        self,
        *,
        line_width: int | None = None,
        cell_size: int = DEFAULT_CELL_SIZE,
        sink: TextSink | None = None,
    ) -> None:
        self._line_width = line_width
        self._cell_size = cell_size
        self._sink = sink
        self._table: TableStream | None = None

    @property
    def table(self) -> TableStream | None:
        return self._table

    def write_record(self, header: Sequence[str], values: Sequence[str]) -> None:
        if len(values) != len(header):
            raise ValueError(
                f"record has {len(values)} value(s) but header has {len(header)} column(s)"
            )

        if self._table is None:
            self._table = TableStream.uniform(
                len(header),
                self._cell_size,
                resolve_line_width(self._line_width),
                sink=self._sink,
            )
            for name in header:
                self._table.push(name)
        elif self._table.column_count != len(header):
            raise ValueError(
                f"header has {len(header)} column(s) but the open table has "
                f"{self._table.column_count}"
            )

        for value in values:
            self._table.push(value)

    def dump_and_reset(self) -> None:
        if self._table is not None:
            table = self._table
            self._table = None
            table.end_table()

    def close(self) -> None:
        self.dump_and_reset()

    def __enter__(self) -> LiveTableWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
