"""
FILE: led/repl/commands/edit.py
PURPOSE: Buffer-mutating command handlers (i, a, c)
EXPORTS:
  - handle_insert_command
  - handle_append_command
  - handle_change_command
DEPENDENCIES:
  - logging (stdlib)
  - led.repl.context (EditorSession)
NOTES:
  - Each repetition reads one text line from the session's reader
  - End of input while waiting for text returns False (ends the session)
  - The address is validated before any text is read, so an out-of-range
    target never swallows an input line
  - Cursor: insert moves to the displaced line, append to the new line,
    change leaves it alone; repeating the bare command keeps line order
"""

import logging
from typing import Optional

from ..context import EditorSession

logger = logging.getLogger(__name__)


def _read_text(session: EditorSession, address: int) -> Optional[str]:
    # get() raises OutOfRangeError before we consume input
    session.buffer.get(address)
    text = session.reader.next_text()
    if text is None:
        logger.info("End of input while waiting for text for line %d", address)
    return text


def handle_insert_command(session: EditorSession, address: int) -> bool:
    """
    Handle 'i' - insert a new line before ``address``.

    Usage:
        1i          # Next input line goes before line 1
        1i hello    # "hello" goes before line 1
        1i3         # Next three input lines go before the old line 1
    """
    text = _read_text(session, address)
    if text is None:
        return False
    session.buffer.insert_before(address, text)
    session.buffer.set_current(address + 1)
    return True


def handle_append_command(session: EditorSession, address: int) -> bool:
    """
    Handle 'a' - add a new line after ``address``.

    Usage:
        a           # Next input line goes after the current line
        2a gamma    # "gamma" goes after line 2
    """
    text = _read_text(session, address)
    if text is None:
        return False
    session.buffer.append_after(address, text)
    session.buffer.set_current(address + 1)
    return True


def handle_change_command(session: EditorSession, address: int) -> bool:
    """
    Handle 'c' - replace the text of line ``address``.

    Usage:
        c           # Replace the current line with the next input line
        3c2         # Replace lines 3 and 4
    """
    text = _read_text(session, address)
    if text is None:
        return False
    session.buffer.replace(address, text)
    return True
