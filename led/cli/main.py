"""
FILE: led/cli/main.py
PURPOSE: Typer-based CLI that configures and starts an editing session
EXPORTS:
  - app (Typer application)
  - main() (entry point)
  - edit() - Open FILE (or an empty buffer) and run the session loop
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output)
  - led.core.storage (open or create the backing file)
  - led.core.models (EditorConfig)
  - led.log (logging setup)
  - led.repl (session loop)
NOTES:
  - Messages go to stdout, errors to stderr
  - Exit codes: 0=success, 1=startup failure or out of memory, 2=usage error
  - Uses prompt_toolkit only when stdin and stdout are both terminals
    and no --input-stream is given
"""

import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..core.constants import DEFAULT_BUFFER_LENGTH, DEFAULT_LINE_WIDTH
from ..core.exceptions import BufferExhaustedError, StorageError
from ..core.models import EditorConfig
from ..core.storage import open_target
from ..log import configure_logging

# Typer app setup
app = typer.Typer(
    name="led",
    help="Line EDitor: edit a file with [ADDRESS]COMMAND[COUNT] commands",
    add_completion=False,
)

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)

# Version
__version__ = "0.2.0"


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"led v{__version__}")
        raise typer.Exit()


@app.command()
def edit(
    file: Optional[Path] = typer.Argument(
        None,
        help="File to edit; created if it doesn't exist. Without it 'w' prints to stdout.",
        dir_okay=False,
    ),
    buffer_length: int = typer.Option(
        DEFAULT_BUFFER_LENGTH,
        "--buffer-length",
        "--bl",
        min=1,
        help="Initial line buffer capacity (grows as needed)",
    ),
    line_width: int = typer.Option(
        DEFAULT_LINE_WIDTH,
        "--line-width",
        "--lw",
        min=1,
        help="Expected maximum line width (longer lines are still accepted)",
    ),
    input_stream: Optional[typer.FileText] = typer.Option(
        None,
        "--input-stream",
        "--is",
        help="Read commands from this file instead of standard input",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """
    Edit FILE with single-character commands.

    Commands: v view, r read, l line, s setline, i insert, a append,
    c change, w write, q quit.

    Example:
        led notes.txt
        led notes.txt --is script.led
    """
    configure_logging("DEBUG" if verbose else None)

    records = []
    if file is not None:
        try:
            records, created = open_target(file)
        except StorageError as e:
            error_console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(1)

        if created:
            console.print(f"Creating file: {escape(str(file))}", soft_wrap=True)
        else:
            console.print(f"Editing file: {escape(str(file))}", soft_wrap=True)

    config = EditorConfig(
        buffer_capacity=buffer_length,
        line_width_hint=line_width,
        input_source=input_stream,
        output_path=file,
        interactive=input_stream is None and sys.stdin.isatty() and sys.stdout.isatty(),
    )

    # Import here so --help and --version don't pay for prompt_toolkit
    from ..repl import main as repl_main

    try:
        status = repl_main(config, records)
    except BufferExhaustedError as e:
        error_console.print(f"[red]Fatal error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    if status:
        raise typer.Exit(status)


def main():
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
