"""
FILE: led/core/storage.py
PURPOSE: File collaborator: open/create the backing file and persist the buffer
EXPORTS:
  - open_target(path) -> (records, created)
  - split_records(text) -> List[str]
  - write_raw(console, text) -> None
  - FileSink (writes the buffer to a file)
  - ConsoleSink (writes the buffer to stdout)
DEPENDENCIES:
  - pathlib (stdlib)
  - logging (stdlib)
  - rich (console whose file ConsoleSink writes to)
  - led.core.exceptions (StorageError)
NOTES:
  - The only persisted format is plain text, one buffer line per file line,
    "\n" as the only record separator
  - Files are decoded as UTF-8 with surrogateescape, so bytes that aren't
    valid UTF-8 load, edit and write back unchanged
  - newline="" keeps "\r" of CRLF files inside the line, so it round-trips
  - OSError and UnicodeError are wrapped in StorageError so callers catch
    one error family
  - A failed write never touches the in-memory buffer
  - Buffer text bypasses Console.print, which would expand tabs
"""

import logging
from pathlib import Path
from typing import List, Sequence, Tuple

from rich.console import Console

from .exceptions import StorageError

logger = logging.getLogger(__name__)

ENCODING = "utf-8"
ERRORS = "surrogateescape"


def split_records(text: str) -> List[str]:
    """
    Split file text into lines on "\\n" only.

    Examples:
        >>> split_records("a\\nb\\n")
        ['a', 'b']
        >>> split_records("page1\\x0cpage2")
        ['page1\\x0cpage2']
        >>> split_records("")
        []
    """
    if not text:
        return []
    records = text.split("\n")
    if text.endswith("\n"):
        records.pop()
    return records


def open_target(path: Path) -> Tuple[List[str], bool]:
    """
    Open the backing file, creating it when it doesn't exist.

    Args:
        path: File to edit

    Returns:
        (records, created) where records holds one string per line
        (terminators removed) and created is True for a new empty file

    Raises:
        StorageError: If the file can't be read or created
    """
    try:
        if path.exists():
            with path.open("r", encoding=ENCODING, errors=ERRORS, newline="") as f:
                text = f.read()
            logger.info("Loaded %s", path)
            return split_records(text), False

        path.touch()
        logger.info("Created %s", path)
        return [], True
    except (OSError, UnicodeError) as e:
        raise StorageError(path, e) from e


def write_raw(console: Console, text: str) -> None:
    """
    Write ``text`` plus a newline to the console's file, untouched by rich.

    Uses the underlying binary buffer when there is one, so undecodable
    bytes loaded from a file come out as the same bytes.
    """
    stream = console.file
    data = f"{text}\n"
    binary = getattr(stream, "buffer", None)
    if binary is not None:
        stream.flush()
        binary.write(data.encode(ENCODING, ERRORS))
        binary.flush()
    else:
        stream.write(data.encode(ENCODING, ERRORS).decode(ENCODING, "replace"))


class FileSink:
    """Output sink that rewrites a file with the buffer contents."""

    def __init__(self, path: Path):
        self.path = path

    @property
    def name(self) -> str:
        return str(self.path)

    def write(self, lines: Sequence[str]) -> None:
        """
        Replace the file contents with ``lines``.

        Raises:
            StorageError: If the file can't be written
        """
        content = "".join(f"{line}\n" for line in lines)
        try:
            with self.path.open("w", encoding=ENCODING, errors=ERRORS, newline="") as f:
                f.write(content)
        except (OSError, UnicodeError) as e:
            raise StorageError(self.path, e) from e
        logger.info("Wrote %d lines to %s", len(lines), self.path)


class ConsoleSink:
    """Output sink that prints the buffer contents to stdout."""

    name = "<stdout>"

    def __init__(self, console: Console):
        self.console = console

    def write(self, lines: Sequence[str]) -> None:
        for line in lines:
            write_raw(self.console, line)
