"""Quick test of completer functionality."""

# Path setup handled by conftest.py
from led.repl.completer import create_completer
from prompt_toolkit.document import Document


def complete(text):
    completer = create_completer()
    doc = Document(text, cursor_position=len(text))
    return list(completer.get_completions(doc, None))


def test_empty_prompt_suggests_every_command():
    """All nine command ids are offered with their names."""
    completions = complete("")

    texts = [c.text for c in completions]
    assert sorted(texts) == sorted("vrlsiacwq")

    metas = {c.text: c.display_meta_text for c in completions}
    assert metas["v"] == "view"
    assert metas["a"] == "append"
    print("✓ Command completion works")


def test_address_prefix_is_kept():
    completions = complete("12")

    assert any(c.text == "12i" for c in completions), "Should suggest '12i'"
    assert all(c.start_position == -2 for c in completions)
    print("✓ Address prefix completion works")


def test_completes_last_word_only():
    completions = complete("v 3")
    assert any(c.text == "3s" for c in completions)


def test_no_suggestions_after_command_id():
    assert complete("3s") == []
    assert complete("v") == []


if __name__ == "__main__":
    test_empty_prompt_suggests_every_command()
    test_address_prefix_is_kept()
    test_completes_last_word_only()
    test_no_suggestions_after_command_id()
    print("\n✓ All completer tests passed!")
