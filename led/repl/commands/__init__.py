"""
FILE: led/repl/commands/__init__.py
PURPOSE: Command handler modules
"""

# Export all command handlers for easy importing
from .view import (
    handle_view_command,
    handle_read_command,
    handle_line_command,
    handle_setline_command,
)
from .edit import (
    handle_insert_command,
    handle_append_command,
    handle_change_command,
)
from .system import (
    handle_write_command,
    handle_quit_command,
)

__all__ = [
    "handle_view_command",
    "handle_read_command",
    "handle_line_command",
    "handle_setline_command",
    "handle_insert_command",
    "handle_append_command",
    "handle_change_command",
    "handle_write_command",
    "handle_quit_command",
]
