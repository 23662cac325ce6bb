"""CLI entry point for qpe-table. Uses Click for argument parsing.

Reads delimited rows and streams them as a box-drawn table::

    printf 'name,count\\nfoo,10\\n' | qpe-table --width 40
"""

from __future__ import annotations

import csv
import logging
import os
import sys

import click

from qpe.table.config import DEFAULT_CELL_SIZE, resolve_line_width
from qpe.table.policy import MIN_COLUMN_WIDTH
from qpe.table.stream import TableStream

logger = logging.getLogger(__name__)


def _parse_widths(ctx, param, value):
    if value is None:
        return None
    try:
        widths = [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise click.BadParameter("expected comma separated integers, e.g. 10,5,10") from None
    if not widths or any(w < MIN_COLUMN_WIDTH for w in widths):
        raise click.BadParameter(f"every width must be at least {MIN_COLUMN_WIDTH}")
    return widths


def _fit_row(row: list[str], column_count: int, row_no: int) -> list[str]:
    if len(row) == column_count:
        return row
    logger.warning(
        "row %d has %d cell(s), expected %d", row_no, len(row), column_count
    )
    if len(row) > column_count:
        return row[:column_count]
    return row + [""] * (column_count - len(row))


def _silence_stdout() -> None:
    """Point stdout at devnull so the flush at interpreter exit cannot fail."""
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())


@click.command()
@click.argument("source", type=click.File("r", encoding="utf-8"), default="-")
@click.option("--delimiter", "-d", default=",", show_default=True, help="Field delimiter")
@click.option(
    "--width",
    "-w",
    type=click.IntRange(min=1),
    default=None,
    help="Line width (default: $QPE_LINE_LEN, then terminal width, then 160)",
)
@click.option(
    "--cell-size",
    type=click.IntRange(min=3),
    default=DEFAULT_CELL_SIZE,
    show_default=True,
    help="Column width when --widths is not given",
)
@click.option(
    "--widths",
    callback=_parse_widths,
    default=None,
    help="Comma separated per-column widths, e.g. 10,5,10",
)
@click.option(
    "--log-level",
    default="warning",
    type=click.Choice(["debug", "info", "warning", "error"]),
    show_default=True,
)
def main(source, delimiter, width, cell_size, widths, log_level):
    """Print delimited rows from SOURCE (default: stdin) as a streaming table."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    reader = csv.reader(source, delimiter=delimiter)
    first = next(reader, None)
    if first is None:
        return

    if not first:
        raise click.UsageError("the first row has no cells")
    if widths is not None and len(widths) != len(first):
        raise click.UsageError(
            f"--widths names {len(widths)} column(s) but the first row has {len(first)}"
        )

    line_width = resolve_line_width(width)
    if widths is not None:
        table = TableStream(widths, line_width)
    else:
        table = TableStream.uniform(len(first), cell_size, line_width)

    try:
        for cell in first:
            table.push(cell)
        for row_no, row in enumerate(reader, start=2):
            if not row:
                continue
            for cell in _fit_row(row, len(first), row_no):
                table.push(cell)
        table.end_table()
    except BrokenPipeError:
        # Reader went away (e.g. piped into head)
        _silence_stdout()
        sys.exit(1)


if __name__ == "__main__":
    main()
