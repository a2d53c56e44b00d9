"""
FILE: led/repl/main.py
PURPOSE: Session loop: read tokens until quit or end of input
EXPORTS:
  - run_session(session) -> int
  - main(config, records) -> int
DEPENDENCIES:
  - rich (welcome banner in interactive mode)
  - led.repl.context (EditorSession, create_session)
  - led.repl.dispatcher (dispatch_token)
NOTES:
  - One token at a time, fully dispatched before the next is read
  - End of input is an implicit quit
  - Per-token errors are handled by the dispatcher; only
    BufferExhaustedError escapes this loop
"""

import logging
from typing import Iterable

from ..core.models import EditorConfig
from .context import EditorSession, create_session
from .dispatcher import dispatch_token

logger = logging.getLogger(__name__)


def run_session(session: EditorSession) -> int:
    """
    Main session loop.

    Args:
        session: Session built by create_session()

    Returns:
        Exit status (0 on quit or end of input)

    Exits on:
    - End of input (Ctrl+D, end of script)
    - 'q' command
    """
    if session.config.interactive:
        session.console.print(
            "[bold cyan]led[/bold cyan] - [ADDRESS]COMMAND[COUNT], 'q' to quit"
        )

    while True:
        token = session.reader.next_token()
        if token is None:
            logger.debug("End of input")
            break

        if not dispatch_token(token, session):
            break

    return 0


def main(config: EditorConfig, records: Iterable[str] = ()) -> int:
    """
    Entry point for an editing session.

    Args:
        config: Startup configuration from the CLI
        records: Initial buffer contents

    Returns:
        Exit status for the process
    """
    session = create_session(config, records)
    return run_session(session)
