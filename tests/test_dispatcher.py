"""
Test command dispatch: address resolution, repeat counts and error reporting.
"""

# Path setup handled by conftest.py
import pytest

from led.core.buffer import LineBuffer
from led.core.exceptions import (
    BufferExhaustedError,
    OutOfRangeError,
    UnknownCommandError,
)
from led.core.models import Command
from led.repl.dispatcher import dispatch_token, execute_command
from led.repl.parser import parse_command


def stdout(session):
    return session.console.file.getvalue()


def stderr(session):
    return session.error_console.file.getvalue()


def test_view_lists_every_line(make_session):
    session = make_session(["alpha", "beta"])
    session.buffer.set_current(2)

    assert dispatch_token("v", session) is True

    assert stdout(session).splitlines() == ["1: alpha", "2: beta"]
    assert session.buffer.current == 2


def test_view_keeps_markup_literal(make_session):
    """Buffer text is printed verbatim, not as rich markup."""
    session = make_session(["[red]not red[/red] :smile:"])
    dispatch_token("v", session)
    assert stdout(session).strip() == "1: [red]not red[/red] :smile:"


def test_read_moves_cursor(make_session):
    session = make_session(["a", "b", "c"])

    dispatch_token("2r", session)

    assert stdout(session).strip() == "2: b"
    assert session.buffer.current == 2


def test_read_without_address_uses_cursor(make_session):
    session = make_session(["a", "b", "c"])
    session.buffer.set_current(3)
    dispatch_token("r", session)
    assert stdout(session).strip() == "3: c"


def test_repeated_read_walks_forward(make_session):
    session = make_session(["a", "b", "c"])

    dispatch_token("1r2", session)

    assert stdout(session).splitlines() == ["1: a", "2: b"]
    assert session.buffer.current == 2


def test_read_past_end_reports_eof(make_session):
    session = make_session(["a"])
    dispatch_token("5r", session)
    assert "EOF" in stderr(session)
    assert session.buffer.current == 1


def test_line_prints_cursor(make_session):
    session = make_session(["a", "b"])
    session.buffer.set_current(2)
    dispatch_token("l", session)
    assert "Line: 2" in stdout(session)


def test_setline(make_session):
    session = make_session(["a", "b", "c"])

    dispatch_token("3s", session)

    assert session.buffer.current == 3
    assert "Set Line: 3" in stdout(session)


def test_setline_out_of_range_changes_nothing(make_session):
    session = make_session(["a", "b"])
    session.buffer.set_current(2)

    assert dispatch_token("9s", session) is True

    assert session.buffer.current == 2
    assert "EOF" in stderr(session)


def test_change_current_line_only(make_session):
    """'c' with no address or count replaces just the current line."""
    session = make_session(["one", "two", "three", "four", "five"], script="THREE\n")
    session.buffer.set_current(3)

    dispatch_token("c", session)

    assert session.buffer.export() == ["one", "two", "THREE", "four", "five"]
    assert session.buffer.current == 3


def test_repeated_insert_keeps_input_order(make_session):
    """'1i3' with a, b, c puts them in that order before the old line 1."""
    session = make_session(["first", "second"], script="a\nb\nc\n")

    dispatch_token("1i3", session)

    assert session.buffer.export() == ["a", "b", "c", "first", "second"]
    assert session.buffer.current == 4
    assert session.buffer.get(session.buffer.current) == "first"


def test_repeated_append_keeps_input_order(make_session):
    session = make_session(["first", "last"], script="a\nb\n")

    dispatch_token("1a2", session)

    assert session.buffer.export() == ["first", "a", "b", "last"]
    assert session.buffer.current == 3


def test_bare_commands_continue_where_the_last_left_off(make_session):
    """Repeating a bare 'a' after '2a' keeps appending in order."""
    session = make_session(["x", "y"], script="1\n2\n")

    dispatch_token("2a", session)
    dispatch_token("a", session)

    assert session.buffer.export() == ["x", "y", "1", "2"]


def test_text_on_the_command_line(make_session):
    session = make_session(["alpha"])
    session.reader._pending = " hello world"

    dispatch_token("1a", session)

    assert session.buffer.export() == ["alpha", "hello world"]


def test_partial_application_on_out_of_range(make_session):
    """Repetitions before the failure stay applied; later input is untouched."""
    session = make_session(["x", "y"], script="one\ntwo\n")

    assert dispatch_token("2c3", session) is True

    assert session.buffer.export() == ["x", "one"]
    assert "EOF" in stderr(session)
    # "two" was never consumed
    assert session.reader.next_text() == "two"


def test_end_of_input_while_waiting_for_text(make_session):
    session = make_session(["a"])

    assert dispatch_token("i", session) is False

    assert session.buffer.export() == ["a"]


def test_invalid_tokens_are_reported(make_session):
    session = make_session(["a"])

    for token in ("z", "12", "3xy", "99999999999v"):
        assert dispatch_token(token, session) is True

    errors = stderr(session)
    assert errors.count("Invalid command") == 4
    assert session.buffer.export() == ["a"]
    assert stdout(session) == ""


def test_oversized_numbers_are_reported(make_session):
    """Huge digit runs are parse errors; the session keeps going."""
    session = make_session(["a"])

    assert dispatch_token("1" * 5000 + "v", session) is True
    assert dispatch_token("v" + "1" * 5000, session) is True

    assert stderr(session).count("Invalid command") == 2
    assert stdout(session) == ""


def test_tabs_survive_view_read_and_write(make_session):
    """Buffer text is written verbatim, tabs included."""
    session = make_session(["a\tb"])

    dispatch_token("v", session)
    dispatch_token("1r", session)
    dispatch_token("w", session)

    assert stdout(session).splitlines() == ["1: a\tb", "1: a\tb", "Writing file", "a\tb"]


def test_execute_command_raises_for_unknown_id(make_session):
    session = make_session(["a"])
    with pytest.raises(UnknownCommandError):
        execute_command(Command(id="x"), session)


def test_execute_command_raises_out_of_range(make_session):
    session = make_session(["a"])
    with pytest.raises(OutOfRangeError):
        execute_command(parse_command("2s"), session)


def test_quit_returns_false(make_session):
    session = make_session(["a"])
    assert dispatch_token("q3", session) is False
    assert stdout(session).count("Exiting program") == 1


def test_write_to_console_sink(make_session):
    session = make_session(["alpha", "beta"])

    dispatch_token("w", session)

    assert stdout(session).splitlines() == ["Writing file", "alpha", "beta"]


def test_write_to_file(make_session, tmp_path):
    target = tmp_path / "out.txt"
    session = make_session(["alpha", "beta"], output_path=target)

    dispatch_token("w", session)

    assert target.read_text(encoding="utf-8") == "alpha\nbeta\n"


def test_write_failure_keeps_buffer(make_session, tmp_path):
    """A write error is reported; the session and buffer carry on."""
    session = make_session(["alpha"], output_path=tmp_path)

    assert dispatch_token("w", session) is True

    assert "Cannot access" in stderr(session)
    assert session.buffer.export() == ["alpha"]


class _ExhaustedList(list):
    def insert(self, index, item):
        raise MemoryError


def test_buffer_exhaustion_is_fatal(make_session):
    session = make_session(["a"], script="x\n")
    session.buffer._lines = _ExhaustedList(session.buffer._lines)

    with pytest.raises(BufferExhaustedError):
        dispatch_token("i", session)


def test_session_buffer_uses_config_hints(make_session):
    session = make_session(["a"])
    assert isinstance(session.buffer, LineBuffer)
    assert session.buffer.capacity == session.config.buffer_capacity


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
