"""
FILE: led/repl/parser.py
PURPOSE: Parse one command token into address, command id and repeat count
EXPORTS:
  - parse_command(token) -> Command
DEPENDENCIES:
  - led.core.models (Command)
  - led.core.constants (UINT_MAX, UNSET_ADDRESS)
  - led.core.exceptions (AddressOverflowError, CountOverflowError,
    InvalidCommandIdError)
NOTES:
  - Grammar: [ADDRESS]COMMAND[COUNT], e.g. "12i3", "v", "2s"
  - Leading digits are scanned left-to-right, trailing digits right-to-left;
    the token itself is never modified
  - Address 0 means "no address" (use the current line)
  - Count 0 means "no count" (run once)
  - Only ASCII 0-9 are digits
"""

from typing import Optional

from ..core.constants import UINT_MAX, UNSET_ADDRESS
from ..core.exceptions import (
    AddressOverflowError,
    CountOverflowError,
    InvalidCommandIdError,
)
from ..core.models import Command

_DIGITS = frozenset("0123456789")
_UINT_DIGITS = len(str(UINT_MAX))


def _leading_digits(text: str) -> int:
    """Length of the digit run at the start of ``text``."""
    end = 0
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return end


def _trailing_digits(text: str) -> int:
    """Length of the digit run at the end of ``text``."""
    start = len(text)
    while start > 0 and text[start - 1] in _DIGITS:
        start -= 1
    return len(text) - start


def _to_uint(digits: str) -> Optional[int]:
    """Convert a digit run, or return None when it exceeds UINT_MAX."""
    # Checking length first keeps huge runs away from int()
    significant = digits.lstrip("0") or "0"
    if len(significant) > _UINT_DIGITS:
        return None
    value = int(significant)
    return value if value <= UINT_MAX else None


def parse_command(token: str) -> Command:
    """
    Split a command token into a Command.

    Examples:
        >>> parse_command("v")
        Command(id='v', address=None, count=1, token='v')

        >>> parse_command("1i3")
        Command(id='i', address=1, count=3, token='1i3')

        >>> parse_command("0r0")
        Command(id='r', address=None, count=1, token='0r0')

    Args:
        token: One whitespace-free token from the input stream

    Returns:
        Command with address (or None), id and count (>= 1)

    Raises:
        AddressOverflowError: Address digits exceed UINT_MAX
        CountOverflowError: Count digits exceed UINT_MAX
        InvalidCommandIdError: Middle part is empty or longer than one character
    """
    # Address: maximal digit run from the left
    head = _leading_digits(token)
    address = None
    if head:
        value = _to_uint(token[:head])
        if value is None:
            raise AddressOverflowError(token)
        if value != UNSET_ADDRESS:
            address = value

    # Count: maximal digit run from the right of what's left
    rest = token[head:]
    tail = _trailing_digits(rest)
    count = 1
    if tail:
        value = _to_uint(rest[len(rest) - tail:])
        if value is None:
            raise CountOverflowError(token)
        count = value or 1

    command_id = rest[:len(rest) - tail]
    if len(command_id) != 1:
        raise InvalidCommandIdError(token)

    return Command(id=command_id, address=address, count=count, token=token)
