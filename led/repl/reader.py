"""
FILE: led/repl/reader.py
PURPOSE: Turn an input stream into command tokens and text lines
EXPORTS:
  - InputSource (line source over a text stream or a PromptSession)
  - TokenReader (whitespace-delimited tokens + text lines for i/a/c)
  - create_prompt_session() -> PromptSession
DEPENDENCIES:
  - prompt_toolkit (interactive prompt with history and completion)
  - typing (type hints)
  - led.repl.completer (command completion)
NOTES:
  - Line terminators are stripped; None means end of input
  - Ctrl+C at the prompt discards the line and prompts again
  - Text for i/a/c is the rest of the token's line when it isn't blank,
    otherwise the next whole line
"""

from typing import Optional, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from ..core.constants import COMMAND_PROMPT, TEXT_PROMPT
from .completer import create_completer


def create_prompt_session() -> PromptSession:
    """
    Create the interactive prompt session.

    Returns:
        PromptSession with in-memory history and command completion
    """
    return PromptSession(
        history=InMemoryHistory(),
        completer=create_completer(),
        complete_while_typing=False,
    )


class InputSource:
    """
    Line source for the session loop.

    Reads from a PromptSession when one is given (interactive terminals),
    otherwise from a plain text stream (pipes, files, tests).
    """

    def __init__(self, stream: Optional[TextIO] = None, session: Optional[PromptSession] = None):
        self.stream = stream
        self.session = session

    @property
    def interactive(self) -> bool:
        return self.session is not None

    def readline(self, prompt: str = "") -> Optional[str]:
        """
        Read one line without its terminator.

        Args:
            prompt: Prompt shown in interactive mode (ignored for streams)

        Returns:
            The line, or None at end of input
        """
        if self.session is not None:
            while True:
                try:
                    return self.session.prompt(prompt)
                except KeyboardInterrupt:
                    continue
                except EOFError:
                    return None

        line = self.stream.readline()
        if line == "":
            return None
        if line.endswith("\n"):
            line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
        return line


class TokenReader:
    """
    Split input lines into command tokens.

    The unread rest of the current line is kept between calls, so
    "1i hello" yields the token "1i" and then the text "hello".
    """

    def __init__(self, source: InputSource):
        self.source = source
        self._pending = ""

    def next_token(self) -> Optional[str]:
        """
        Return the next whitespace-delimited token.

        Returns:
            Token string, or None at end of input
        """
        while True:
            stripped = self._pending.lstrip()
            if stripped:
                parts = stripped.split(None, 1)
                token = parts[0]
                # Keep the separator so next_text() can tell it apart from the text
                self._pending = stripped[len(token):]
                return token

            line = self.source.readline(COMMAND_PROMPT)
            if line is None:
                self._pending = ""
                return None
            self._pending = line

    def next_text(self) -> Optional[str]:
        """
        Return one line of text for insert/append/change.

        Returns:
            Rest of the current line (minus one separator) if it isn't blank,
            otherwise the next input line; None at end of input
        """
        rest, self._pending = self._pending, ""
        if rest.strip():
            return rest[1:]
        return self.source.readline(TEXT_PROMPT)
