"""
FILE: led/repl/display.py
PURPOSE: Display functions for buffer lines and status messages
EXPORTS:
  - print_plain() - Print user text verbatim
  - display_line() - Print one numbered line ("3: text")
  - display_buffer() - Print every line numbered
  - display_status() - Print a status message ("Set Line: 2")
  - display_error() - Print an error message to the error console
DEPENDENCIES:
  - rich (formatted output)
NOTES:
  - Buffer text bypasses rich entirely (write_raw), so "[red]", ":smile:"
    and tabs in a file stay literal
  - Consoles are passed in; tests hand over Console(file=StringIO())
"""

from typing import Iterable, Tuple

from rich.console import Console
from rich.markup import escape

from ..core.storage import write_raw


def print_plain(console: Console, text: str) -> None:
    """Print ``text`` exactly as given (tabs and markup left alone)."""
    write_raw(console, text)


def display_line(console: Console, address: int, text: str) -> None:
    """
    Print one numbered line.

    Args:
        console: Rich console to print to
        address: 1-based line number
        text: Line contents
    """
    print_plain(console, f"{address}: {text}")


def display_buffer(console: Console, lines: Iterable[Tuple[int, str]]) -> None:
    """Print every ``(address, text)`` pair."""
    for address, text in lines:
        display_line(console, address, text)


def display_status(console: Console, message: str) -> None:
    """Print a dim status message."""
    console.print(f"[dim]{escape(message)}[/dim]", highlight=False, soft_wrap=True)


def display_error(console: Console, message: str) -> None:
    """Print an error message in red."""
    console.print(f"[red]{escape(message)}[/red]", highlight=False, soft_wrap=True)
