"""Fixed-capacity ring buffer of the most recent lines."""
from __future__ import annotations

from collections.abc import Iterator


class TrailingBuffer:
    """Index-addressed circular array holding the last *capacity* lines.

    Slots are allocated once; ``push`` overwrites the oldest slot when full.
    Index 0 is the oldest retained line, ``len(buf) - 1`` the newest.
    """

    __slots__ = ("_capacity", "_slots", "_head", "_size")

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._slots: list[str | None] = [None] * capacity
        self._head = 0  # next write position
        self._size = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        return self._size

    def push(self, line: str) -> None:
        if self._capacity == 0:
            return
        self._slots[self._head] = line
        self._head = (self._head + 1) % self._capacity
        if self._size < self._capacity:
            self._size += 1

    def __getitem__(self, offset: int) -> str:
        if not 0 <= offset < self._size:
            raise IndexError(f"buffer offset {offset} out of range 0..{self._size - 1}")
        oldest = (self._head - self._size) % self._capacity
        line = self._slots[(oldest + offset) % self._capacity]
        assert line is not None
        return line

    def __iter__(self) -> Iterator[str]:
        for offset in range(self._size):
            yield self[offset]

    def start_line(self, total_lines: int) -> int:
        """Absolute line number of the oldest buffered line."""
        return total_lines - self._size + 1

    def line_at(self, linenum: int, total_lines: int) -> str:
        """Buffered content of absolute line *linenum*."""
        return self[linenum - self.start_line(total_lines)]
