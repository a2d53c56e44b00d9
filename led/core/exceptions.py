"""
FILE: led/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - LedError (base exception)
  - ParseError, AddressOverflowError, CountOverflowError, InvalidCommandIdError
  - UnknownCommandError
  - OutOfRangeError
  - StorageError
  - BufferExhaustedError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from LedError for easy catching
  - Exceptions include context (token, address, length) for helpful messages
  - The dispatcher raises these, the session loop catches and displays them
  - BufferExhaustedError is the only fatal one; the session loop lets it through
"""


class LedError(Exception):
    """Base exception for all led errors."""
    pass


class ParseError(LedError):
    """Command token could not be split into address, id and count."""

    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(f"Invalid command: {token!r} ({reason})")


class AddressOverflowError(ParseError):
    """Leading address digits do not fit an unsigned integer."""

    def __init__(self, token: str):
        super().__init__(token, "address out of range")


class CountOverflowError(ParseError):
    """Trailing repeat-count digits do not fit an unsigned integer."""

    def __init__(self, token: str):
        super().__init__(token, "count out of range")


class InvalidCommandIdError(ParseError):
    """The part between address and count is not exactly one character."""

    def __init__(self, token: str):
        super().__init__(token, "expected a single command character")


class UnknownCommandError(LedError):
    """Well-formed token whose command id is not in the command table."""

    def __init__(self, command_id: str):
        self.command_id = command_id
        super().__init__(f"Invalid command: {command_id!r}")


class OutOfRangeError(LedError):
    """Address outside [1, length]."""

    def __init__(self, address: int, length: int):
        self.address = address
        self.length = length
        if address < 1:
            message = f"Invalid line number: {address}"
        else:
            message = f"EOF: line {address} is past the last line ({length})"
        super().__init__(message)


class StorageError(LedError):
    """Backing file could not be read or written."""

    def __init__(self, path, error: Exception):
        self.path = path
        self.error = error
        reason = getattr(error, "strerror", None) or error
        super().__init__(f"Cannot access {path}: {reason}")


class BufferExhaustedError(LedError):
    """Memory ran out while growing the line buffer."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(f"Out of memory growing line buffer past {length} lines")
