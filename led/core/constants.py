"""
FILE: led/core/constants.py
PURPOSE: Constants used throughout the editor
EXPORTS:
  - DEFAULT_LINE_WIDTH, DEFAULT_BUFFER_LENGTH: startup defaults
  - UINT_MAX: largest address or repeat count a token may carry
  - CMD_*: single-character command identifiers
  - COMMAND_NAMES: command id -> human-readable name
  - MUTATING_COMMANDS: ids whose address advances between repetitions
  - COMMAND_PROMPT, TEXT_PROMPT: interactive prompt strings
  - LOG_LEVEL_ENV: environment variable read by led.log
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - Single source of truth for command ids, so the dispatcher table,
    completer and help output never drift apart
"""

# Startup defaults (overridable from the CLI)
DEFAULT_LINE_WIDTH = 80
DEFAULT_BUFFER_LENGTH = 100

# Addresses and counts must fit an unsigned 32-bit integer
UINT_MAX = 2**32 - 1

# An address of 0 means "no address given"
UNSET_ADDRESS = 0

# Command identifiers
CMD_VIEW = "v"
CMD_READ = "r"
CMD_LINE = "l"
CMD_SETLINE = "s"
CMD_INSERT = "i"
CMD_APPEND = "a"
CMD_CHANGE = "c"
CMD_WRITE = "w"
CMD_QUIT = "q"

COMMAND_NAMES = {
    CMD_VIEW: "view",
    CMD_READ: "read",
    CMD_LINE: "line",
    CMD_SETLINE: "setline",
    CMD_INSERT: "insert",
    CMD_APPEND: "append",
    CMD_CHANGE: "change",
    CMD_WRITE: "write",
    CMD_QUIT: "quit",
}

MUTATING_COMMANDS = (CMD_INSERT, CMD_APPEND, CMD_CHANGE)

# Interactive prompts
COMMAND_PROMPT = "led> "
TEXT_PROMPT = "...> "

# Logging
LOG_LEVEL_ENV = "LED_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
