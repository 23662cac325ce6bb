"""Output sinks that tables write their lines to.

Provides a ``TextSink`` protocol and a ``StreamSink`` implementation that
writes to any text stream. Each sink carries a lock that a table holds for
the duration of one block, so blocks never interleave with other writers
sharing the same sink.
"""

from __future__ import annotations

import sys
import threading
from typing import Protocol, TextIO


class TextSink(Protocol):
    """Interface for line-oriented text output."""

    @property
    def lock(self) -> threading.Lock: ...

    def write(self, data: str) -> None: ...

    def flush(self) -> None: ...


class StreamSink:
    """Sink backed by a text stream.

    When no stream is given, ``sys.stdout`` is looked up on every write so
    that redirections made after construction are honoured. Write errors
    (``BrokenPipeError`` and other ``OSError``) propagate to the caller.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._lock = threading.Lock()

    @property
    def lock(self) -> threading.Lock:
        return self._lock

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, data: str) -> None:
        self.stream.write(data)

    def flush(self) -> None:
        self.stream.flush()


_stdout_sink = StreamSink()


def stdout_sink() -> StreamSink:
    """Return the process-wide sink for standard output."""
    return _stdout_sink
