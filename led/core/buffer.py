"""
FILE: led/core/buffer.py
PURPOSE: In-memory line buffer with a 1-based current-line cursor
EXPORTS:
  - LineBuffer (class)
DEPENDENCIES:
  - logging (stdlib)
  - typing (type hints)
  - led.core.constants (default capacity and width hints)
  - led.core.exceptions (OutOfRangeError, BufferExhaustedError)
NOTES:
  - All addresses are 1-based; 0 and length+1 are always out of range
  - Never truly empty: an empty buffer holds a single empty line,
    so the cursor always points at a real line
  - capacity and line_width are hints only, the buffer grows past both
  - MemoryError while growing becomes BufferExhaustedError (fatal)
"""

import logging
from typing import Iterable, Iterator, List, Tuple

from .constants import DEFAULT_BUFFER_LENGTH, DEFAULT_LINE_WIDTH
from .exceptions import BufferExhaustedError, OutOfRangeError

logger = logging.getLogger(__name__)


def _strip_terminator(record: str) -> str:
    """Drop a trailing "\\n" or "\\r\\n" from an input record."""
    if record.endswith("\n"):
        record = record[:-1]
        if record.endswith("\r"):
            record = record[:-1]
    return record


class _NumberedLines:
    """Restartable iterable of (address, line) pairs over a buffer."""

    def __init__(self, lines: List[str]):
        self._lines = lines

    def __iter__(self) -> Iterator[Tuple[int, str]]:
        return enumerate(self._lines, start=1)


class LineBuffer:
    """
    Ordered, growable sequence of text lines plus a current-line cursor.

    Example:
        >>> buf = LineBuffer()
        >>> buf.load(["alpha", "beta"])
        >>> buf.append_after(2, "gamma")
        >>> buf.export()
        ['alpha', 'beta', 'gamma']
    """

    def __init__(
        self,
        capacity: int = DEFAULT_BUFFER_LENGTH,
        line_width: int = DEFAULT_LINE_WIDTH,
    ):
        self.capacity = capacity
        self.line_width = line_width
        self._lines: List[str] = [""]
        self._current = 1

    # --- Introspection ---

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def current(self) -> int:
        """1-based address of the current line."""
        return self._current

    def _check(self, addr: int) -> None:
        if addr < 1 or addr > len(self._lines):
            raise OutOfRangeError(addr, len(self._lines))

    def _note_width(self, text: str) -> None:
        if len(text) > self.line_width:
            logger.debug(
                "Line of %d characters exceeds width hint %d",
                len(text), self.line_width,
            )

    # --- Bulk load / export ---

    def load(self, records: Iterable[str]) -> None:
        """
        Replace the whole buffer with ``records``.

        Args:
            records: One string per line; trailing line terminators are removed

        Notes:
            - An empty sequence leaves a single empty line
            - The cursor is reset to line 1
        """
        try:
            lines = [_strip_terminator(record) for record in records]
        except MemoryError as exc:
            raise BufferExhaustedError(len(self._lines)) from exc

        for line in lines:
            self._note_width(line)

        self._lines = lines or [""]
        self._current = 1
        if len(self._lines) > self.capacity:
            logger.debug(
                "Loaded %d lines, growing past capacity hint %d",
                len(self._lines), self.capacity,
            )

    def export(self) -> List[str]:
        """Return a copy of every line in document order."""
        return list(self._lines)

    def iterate(self) -> Iterable[Tuple[int, str]]:
        """Return a restartable iterable of ``(address, line)`` pairs."""
        return _NumberedLines(self._lines)

    # --- Addressed access ---

    def get(self, addr: int) -> str:
        """Return the line at ``addr``."""
        self._check(addr)
        return self._lines[addr - 1]

    def set_current(self, addr: int) -> None:
        """Move the cursor to ``addr``."""
        self._check(addr)
        self._current = addr

    def replace(self, addr: int, text: str) -> None:
        """Overwrite the line at ``addr`` with ``text``."""
        self._check(addr)
        self._note_width(text)
        self._lines[addr - 1] = text

    def insert_before(self, addr: int, text: str) -> None:
        """Insert ``text`` as a new line at ``addr``, shifting later lines down."""
        self._check(addr)
        self._grow(addr - 1, text)

    def append_after(self, addr: int, text: str) -> None:
        """Insert ``text`` as a new line right after ``addr``."""
        self._check(addr)
        self._grow(addr, text)

    def _grow(self, index: int, text: str) -> None:
        self._note_width(text)
        try:
            self._lines.insert(index, text)
        except MemoryError as exc:
            raise BufferExhaustedError(len(self._lines)) from exc
        if len(self._lines) == self.capacity + 1:
            logger.debug("Buffer grew past capacity hint %d", self.capacity)
