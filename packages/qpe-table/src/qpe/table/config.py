"""Line width resolution for callers constructing a table.

Tables never read the environment themselves; callers resolve a concrete
line width here first. Precedence: explicit value, ``QPE_LINE_LEN``, the
terminal width of stdout, then ``DEFAULT_LINE_WIDTH``.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Mapping

logger = logging.getLogger(__name__)

LINE_LEN_ENV = "QPE_LINE_LEN"
DEFAULT_LINE_WIDTH = 160
DEFAULT_CELL_SIZE = 9


def _line_len_from_env(env: Mapping[str, str]) -> int | None:
    raw = env.get(LINE_LEN_ENV)
    if raw is None:
        return None
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("failed to parse %s: %r", LINE_LEN_ENV, raw)
        return None
    if value <= 0:
        logger.warning("ignoring non-positive %s: %r", LINE_LEN_ENV, raw)
        return None
    return value


def terminal_columns() -> int | None:
    """Return the column count of the terminal attached to stdout, if any."""
    try:
        return os.get_terminal_size(sys.stdout.fileno()).columns
    except (AttributeError, ValueError, OSError):
        return None


def resolve_line_width(
    explicit: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    """Return the line width a table should be constructed with."""
    if explicit is not None:
        return explicit

    from_env = _line_len_from_env(os.environ if env is None else env)
    if from_env is not None:
        return from_env

    columns = terminal_columns()
    if columns:
        return columns

    return DEFAULT_LINE_WIDTH
