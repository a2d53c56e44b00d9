"""
FILE: led/repl/commands/view.py
PURPOSE: Read-only and cursor command handlers (v, r, l, s)
EXPORTS:
  - handle_view_command
  - handle_read_command
  - handle_line_command
  - handle_setline_command
DEPENDENCIES:
  - led.repl.context (EditorSession)
  - led.repl.display (display helpers)
NOTES:
  - Each handler runs one repetition at one resolved address and returns
    True to keep the session going
  - Out-of-range addresses raise OutOfRangeError from the buffer; the
    dispatcher reports it
"""

from ..context import EditorSession
from ..display import display_buffer, display_line, display_status


def handle_view_command(session: EditorSession, address: int) -> bool:
    """
    Handle 'v' - print every line with its number.

    Usage:
        v       # 1: first line / 2: second line / ...
    """
    display_buffer(session.console, session.buffer.iterate())
    return True


def handle_read_command(session: EditorSession, address: int) -> bool:
    """
    Handle 'r' - print the line at ``address`` and move the cursor there.

    Usage:
        r       # Print the current line
        5r      # Print line 5
        5r3     # Print lines 5, 6 and 7 (the dispatcher advances the address)
    """
    text = session.buffer.get(address)
    session.buffer.set_current(address)
    display_line(session.console, address, text)
    return True


def handle_line_command(session: EditorSession, address: int) -> bool:
    """Handle 'l' - print the current line number."""
    display_status(session.console, f"Line: {session.buffer.current}")
    return True


def handle_setline_command(session: EditorSession, address: int) -> bool:
    """
    Handle 's' - move the cursor to ``address``.

    Usage:
        4s      # Current line becomes 4
    """
    session.buffer.set_current(address)
    display_status(session.console, f"Set Line: {address}")
    return True
