"""Shared pytest configuration and fixtures for tests."""

import sys
import io
from pathlib import Path

import pytest
from rich.console import Console

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from led.core.models import EditorConfig  # noqa: E402
from led.repl.context import create_session  # noqa: E402


@pytest.fixture
def make_session():
    """
    Build a non-interactive session over an in-memory script.

    Usage:
        session = make_session(["alpha", "beta"], script="gamma\\n")
        session.console.file.getvalue()        # stdout reports
        session.error_console.file.getvalue()  # error messages
    """
    def _make(lines=(), script="", output_path=None):
        config = EditorConfig(input_source=io.StringIO(script), output_path=output_path)
        return create_session(
            config,
            lines,
            console=Console(file=io.StringIO(), width=200, color_system=None),
            error_console=Console(file=io.StringIO(), width=200, color_system=None),
        )

    return _make
