"""
FILE: led/repl/context.py
PURPOSE: Session context shared by the loop, dispatcher and handlers
EXPORTS:
  - EditorSession (dataclass)
  - create_session(config, records, console, error_console) -> EditorSession
DEPENDENCIES:
  - rich (consoles)
  - prompt_toolkit (interactive prompt, via led.repl.reader)
  - led.core.buffer (LineBuffer)
  - led.core.models (EditorConfig)
  - led.core.storage (FileSink, ConsoleSink)
  - led.repl.reader (InputSource, TokenReader)
NOTES:
  - Built once at startup and passed explicitly to every handler;
    there is no module-level editor state
"""

import sys
from dataclasses import dataclass, field
from typing import Iterable, Optional, Union

from rich.console import Console

from ..core.buffer import LineBuffer
from ..core.models import EditorConfig
from ..core.storage import ConsoleSink, FileSink
from .reader import InputSource, TokenReader, create_prompt_session


@dataclass
class EditorSession:
    """
    Everything a command needs to run.

    Attributes:
        buffer: The single line buffer being edited
        reader: Source of command tokens and text lines
        sink: Where 'w' exports the buffer
        console: Reports (view/read/status) go here
        error_console: Error messages go here
        config: Startup configuration
    """
    buffer: LineBuffer
    reader: TokenReader
    sink: Union[FileSink, ConsoleSink]
    console: Console
    error_console: Console
    config: EditorConfig = field(default_factory=EditorConfig)


def create_session(
    config: EditorConfig,
    records: Iterable[str] = (),
    console: Optional[Console] = None,
    error_console: Optional[Console] = None,
) -> EditorSession:
    """
    Build a session from startup configuration.

    Args:
        config: Startup configuration from the CLI
        records: Initial buffer contents (one string per line)
        console: Report console (defaults to stdout)
        error_console: Error console (defaults to stderr)

    Returns:
        EditorSession with the buffer loaded and the cursor on line 1
    """
    console = console or Console()
    error_console = error_console or Console(stderr=True)

    buffer = LineBuffer(capacity=config.buffer_capacity, line_width=config.line_width_hint)
    buffer.load(records)

    source = None
    if config.interactive:
        try:
            source = InputSource(session=create_prompt_session())
        except Exception as e:
            # Fallback to plain stdin if the terminal can't host a prompt
            error_console.print(f"[yellow]Warning:[/yellow] Running in simple input mode: {e}")
    if source is None:
        source = InputSource(stream=config.input_source or sys.stdin)

    if config.output_path is not None:
        sink = FileSink(config.output_path)
    else:
        sink = ConsoleSink(console)

    return EditorSession(
        buffer=buffer,
        reader=TokenReader(source),
        sink=sink,
        console=console,
        error_console=error_console,
        config=config,
    )
