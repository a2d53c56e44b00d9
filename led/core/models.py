"""
FILE: led/core/models.py
PURPOSE: Value objects shared by the parser, dispatcher and CLI
EXPORTS:
  - Command (dataclass for one parsed command token)
  - EditorConfig (dataclass for startup configuration)
DEPENDENCIES:
  - dataclasses (stdlib)
  - pathlib (stdlib)
  - typing (stdlib)
  - led.core.constants (defaults, command names)
NOTES:
  - Command is transient: built per token, never stored
  - EditorConfig is built once by the CLI and handed to the session
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, TextIO

from .constants import COMMAND_NAMES, DEFAULT_BUFFER_LENGTH, DEFAULT_LINE_WIDTH


@dataclass(frozen=True)
class Command:
    """
    A parsed ``[ADDRESS]COMMAND[COUNT]`` token.

    Attributes:
        id: Single command character (e.g., "v", "i")
        address: Target line, or None to use the current line
        count: Repeat count, always >= 1
        token: Original token text (for error messages)
    """
    id: str
    address: Optional[int] = None
    count: int = 1
    token: str = ""

    @property
    def name(self) -> str:
        """Human-readable command name, or the raw id if unknown."""
        return COMMAND_NAMES.get(self.id, self.id)

    def resolve_address(self, current: int) -> int:
        """Return the explicit address, falling back to ``current``."""
        return current if self.address is None else self.address


@dataclass
class EditorConfig:
    """
    Startup configuration consumed by the session.

    Attributes:
        buffer_capacity: Initial allocation hint for the line buffer
        line_width_hint: Advisory maximum line length
        input_source: Command input stream (None = standard input)
        output_path: Backing file written by 'w' (None = standard output)
        interactive: Read commands through a prompt_toolkit prompt
    """
    buffer_capacity: int = DEFAULT_BUFFER_LENGTH
    line_width_hint: int = DEFAULT_LINE_WIDTH
    input_source: Optional[TextIO] = None
    output_path: Optional[Path] = None
    interactive: bool = False
