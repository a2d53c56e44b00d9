"""
FILE: led/repl/completer.py
PURPOSE: Autocomplete for command tokens at the interactive prompt
EXPORTS:
  - LedCompleter (Completer for [ADDRESS]COMMAND tokens)
  - create_completer() -> LedCompleter
DEPENDENCIES:
  - prompt_toolkit.completion (Completer, Completion)
  - led.core.constants (COMMAND_NAMES)
NOTES:
  - Completes the word under the cursor while it is only an address
    (digits or nothing): "12" suggests "12v", "12r", ...
  - Each suggestion shows the command name as meta text
  - Once a command character is typed nothing is suggested
"""

from typing import Iterable

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from ..core.constants import COMMAND_NAMES


class LedCompleter(Completer):
    """Suggest command ids after an optional address."""

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions for the word before the cursor.

        Args:
            document: Current document with cursor position
            complete_event: Event that triggered completion
        """
        text = document.text_before_cursor
        if text and text[-1].isspace():
            word = ""
        else:
            words = text.split()
            word = words[-1] if words else ""

        if word and not (word.isascii() and word.isdigit()):
            return

        for command_id, name in COMMAND_NAMES.items():
            yield Completion(
                f"{word}{command_id}",
                start_position=-len(word),
                display_meta=name,
            )


def create_completer() -> LedCompleter:
    """Factory function for creating the completer."""
    return LedCompleter()
