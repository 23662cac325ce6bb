"""Virtual sink for testing -- implements the TextSink protocol in-memory.

All writes are captured in a buffer for assertions. Setting ``fail_with``
makes every subsequent write raise that error, to exercise I/O failures.
"""

from __future__ import annotations

import threading


class VirtualSink:
    """In-memory sink that records all writes for test inspection."""

    def __init__(self) -> None:
        self._buffer: list[str] = []
        self._lock = threading.Lock()
        self.fail_with: OSError | None = None
        self.flush_count = 0
        self.locked_writes = 0

    # -- TextSink protocol --------------------------------------------------

    @property
    def lock(self) -> threading.Lock:
        return self._lock

    def write(self, data: str) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        if self._lock.locked():
            self.locked_writes += 1
        self._buffer.append(data)

    def flush(self) -> None:
        self.flush_count += 1

    # -- Test helpers -------------------------------------------------------

    @property
    def output(self) -> str:
        """Return everything written as a single string."""
        return "".join(self._buffer)

    @property
    def lines(self) -> list[str]:
        """Return the written output split into lines, newlines removed."""
        return self.output.splitlines()

    @property
    def write_count(self) -> int:
        return len(self._buffer)

    def clear_buffer(self) -> None:
        self._buffer.clear()
