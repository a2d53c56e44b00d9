"""
FILE: led/repl/dispatcher.py
PURPOSE: Run parsed commands against the session's line buffer
EXPORTS:
  - COMMAND_HANDLERS (command id -> handler)
  - ADVANCING_COMMANDS (ids whose address moves between repetitions)
  - execute_command(command, session) -> bool
  - dispatch_token(token, session) -> bool
DEPENDENCIES:
  - logging (stdlib)
  - led.core.constants (command ids)
  - led.core.exceptions (LedError, BufferExhaustedError, UnknownCommandError)
  - led.repl.parser (parse_command)
  - led.repl.commands (handlers)
  - led.repl.display (display_error)
NOTES:
  - The address is resolved once per token: explicit address, else cursor
  - Every command runs `count` times; i/a/c (and r) step the address by one
    after each repetition
  - A failing repetition stops the token; earlier repetitions stay applied
  - Errors are reported here and never reach the loop, except
    BufferExhaustedError which is fatal
"""

import logging
from typing import Callable, Dict

from ..core.constants import (
    CMD_APPEND,
    CMD_CHANGE,
    CMD_INSERT,
    CMD_LINE,
    CMD_QUIT,
    CMD_READ,
    CMD_SETLINE,
    CMD_VIEW,
    CMD_WRITE,
    MUTATING_COMMANDS,
)
from ..core.exceptions import BufferExhaustedError, LedError, UnknownCommandError
from ..core.models import Command
from .commands import (
    handle_append_command,
    handle_change_command,
    handle_insert_command,
    handle_line_command,
    handle_quit_command,
    handle_read_command,
    handle_setline_command,
    handle_view_command,
    handle_write_command,
)
from .context import EditorSession
from .display import display_error
from .parser import parse_command

logger = logging.getLogger(__name__)

Handler = Callable[[EditorSession, int], bool]

COMMAND_HANDLERS: Dict[str, Handler] = {
    CMD_VIEW: handle_view_command,
    CMD_READ: handle_read_command,
    CMD_LINE: handle_line_command,
    CMD_SETLINE: handle_setline_command,
    CMD_INSERT: handle_insert_command,
    CMD_APPEND: handle_append_command,
    CMD_CHANGE: handle_change_command,
    CMD_WRITE: handle_write_command,
    CMD_QUIT: handle_quit_command,
}

# Repeated reads walk forward through the buffer like the editing commands
ADVANCING_COMMANDS = frozenset(MUTATING_COMMANDS + (CMD_READ,))


def execute_command(command: Command, session: EditorSession) -> bool:
    """
    Execute a parsed command.

    Args:
        command: Parsed command from parser
        session: Session holding the buffer, reader and consoles

    Returns:
        True to continue the session loop, False to exit

    Raises:
        UnknownCommandError: Command id isn't in the table
        OutOfRangeError: A repetition addressed a line outside the buffer
        StorageError: 'w' failed to write the backing file
    """
    handler = COMMAND_HANDLERS.get(command.id)
    if handler is None:
        raise UnknownCommandError(command.id)

    address = command.resolve_address(session.buffer.current)
    logger.debug(
        "Dispatching %s at line %d x%d", command.name, address, command.count
    )

    advance = command.id in ADVANCING_COMMANDS
    for _ in range(command.count):
        if not handler(session, address):
            return False
        if advance:
            address += 1

    return True


def dispatch_token(token: str, session: EditorSession) -> bool:
    """
    Parse and execute one token, reporting any per-token error.

    Args:
        token: Raw token from the input stream
        session: Current editor session

    Returns:
        True to continue the session loop, False to exit

    Raises:
        BufferExhaustedError: Memory ran out; the session can't continue
    """
    try:
        command = parse_command(token)
        return execute_command(command, session)
    except BufferExhaustedError:
        raise
    except LedError as e:
        logger.info("Rejected token %r: %s", token, e)
        display_error(session.error_console, str(e))
        return True
