"""
FILE: led/repl/__init__.py
PURPOSE: Command interpretation package for the line editor
EXPORTS:
  - main() (from repl.main)
  - run_session() (from repl.main)
DEPENDENCIES:
  - prompt_toolkit (interactive input)
  - rich (formatted output)
  - led.core (buffer, models, storage)
NOTES:
  - Parser -> dispatcher -> handlers, driven by the session loop
"""

from .main import main, run_session

__all__ = ["main", "run_session"]
