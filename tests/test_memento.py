"""Tests for the memento pattern."""

import dataclasses

import pytest

from pattern_catalog.patterns.memento import EditorHistory, TextEditor, main


class TestTextEditor:
    def test_write_appends_and_moves_cursor(self):
        editor = TextEditor()
        editor.write("ab")
        editor.write("cd")

        assert editor.content == "abcd"
        assert editor.cursor_position == 4

    def test_set_cursor_ignores_out_of_range(self):
        editor = TextEditor()
        editor.set_text("hello")

        editor.set_cursor(2)
        editor.set_cursor(99)
        editor.set_cursor(-1)

        assert editor.cursor_position == 2

    def test_memento_is_immutable(self):
        memento = TextEditor().save()
        with pytest.raises(dataclasses.FrozenInstanceError):
            memento.content = "changed"


class TestEditorHistory:
    """K backups come back in reverse order; one more undo yields None."""

    def test_undo_in_reverse_order(self):
        editor = TextEditor()
        history = EditorHistory()

        for text in ("a", "b", "c"):
            editor.write(text)
            history.backup(editor.save())

        restored = [history.undo().content for _ in range(3)]

        assert restored == ["abc", "ab", "a"]
        assert history.undo() is None
        assert len(history) == 0

    def test_restore(self):
        editor = TextEditor()
        editor.write("one")
        snapshot = editor.save()
        editor.write(" two")

        editor.restore(snapshot)

        assert editor.content == "one"
        assert editor.cursor_position == 3


def test_main_output(capsys):
    main()

    out = capsys.readouterr().out
    assert out.startswith("--- Writing and saving states ---\nWriting: Hello \n")
    assert "Content: 'Hello World! This is a test. More text here.' (cursor at position 44)" in out
    assert "\n--- Undoing changes ---\nHistory has 3 saved states\n" in out
    assert out.endswith(
        "Editor state restored\n"
        "Content: 'Hello ' (cursor at position 6)\n"
        "History has 0 saved states\n"
    )
