"""
FILE: led/repl/commands/system.py
PURPOSE: Session command handlers (w, q)
EXPORTS:
  - handle_write_command
  - handle_quit_command
DEPENDENCIES:
  - led.repl.context (EditorSession)
  - led.repl.display (display_status)
NOTES:
  - 'w' hands the exported buffer to the session's sink (file or stdout);
    a StorageError propagates to the dispatcher and leaves the buffer intact
  - 'q' returns False so the loop stops
"""

from ..context import EditorSession
from ..display import display_status


def handle_write_command(session: EditorSession, address: int) -> bool:
    """
    Handle 'w' - export the whole buffer to the output sink.

    Usage:
        w       # Rewrite the backing file (or print to stdout without one)
    """
    display_status(session.console, "Writing file")
    session.sink.write(session.buffer.export())
    return True


def handle_quit_command(session: EditorSession, address: int) -> bool:
    """Handle 'q' - stop the session."""
    display_status(session.console, "Exiting program")
    return False
