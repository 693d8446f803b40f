"""
Memento pattern: undo for a text editor.

The editor (originator) produces immutable snapshots of its state; the
history (caretaker) stores them without looking inside and hands them back
in last-in, first-out order.
"""

from dataclasses import dataclass
from typing import List, Optional

from pattern_catalog.observability.logging import get_logger
from pattern_catalog.registry import PatternCategory, demo

logger = get_logger("patterns.memento")


@dataclass(frozen=True)
class EditorMemento:
    content: str
    cursor_position: int


class TextEditor:
    """Originator: a single-buffer text editor."""

    def __init__(self) -> None:
        self._content = ""
        self._cursor_position = 0

    @property
    def content(self) -> str:
        return self._content

    @property
    def cursor_position(self) -> int:
        return self._cursor_position

    def write(self, text: str) -> None:
        self._content += text
        self._cursor_position += len(text)
        print(f"Writing: {text}")

    def set_text(self, text: str) -> None:
        self._content = text
        self._cursor_position = len(text)

    def set_cursor(self, position: int) -> None:
        """Move the cursor; positions outside the content are ignored."""
        if 0 <= position <= len(self._content):
            self._cursor_position = position
        else:
            logger.debug(
                "Cursor position out of range",
                data={"position": position, "length": len(self._content)},
            )

    def save(self) -> EditorMemento:
        print("Saving editor state...")
        return EditorMemento(self._content, self._cursor_position)

    def restore(self, memento: EditorMemento) -> None:
        self._content = memento.content
        self._cursor_position = memento.cursor_position
        print("Editor state restored")

    def print_content(self) -> None:
        print(
            f"Content: '{self._content}' (cursor at position {self._cursor_position})"
        )


class EditorHistory:
    """Caretaker: a stack of snapshots."""

    def __init__(self) -> None:
        self._history: List[EditorMemento] = []

    def __len__(self) -> int:
        return len(self._history)

    def backup(self, memento: EditorMemento) -> None:
        self._history.append(memento)

    def undo(self) -> Optional[EditorMemento]:
        """Take back the most recent snapshot.

        Returns:
            The snapshot, or None when the history is empty
        """
        if not self._history:
            return None
        return self._history.pop()

    def show_history(self) -> None:
        print(f"History has {len(self._history)} saved states")


@demo(
    name="memento",
    category=PatternCategory.BEHAVIORAL,
    description="Editor snapshots are stacked and restored for undo.",
)
def main() -> None:
    """Write four times, saving after the first three, then undo three times."""
    editor = TextEditor()
    history = EditorHistory()

    print("--- Writing and saving states ---")
    for text in ("Hello ", "World!", " This is a test."):
        editor.write(text)
        editor.print_content()
        history.backup(editor.save())

    editor.write(" More text here.")
    editor.print_content()

    print("\n--- Undoing changes ---")
    history.show_history()

    for _ in range(3):
        memento = history.undo()
        if memento is not None:
            editor.restore(memento)
            editor.print_content()

    history.show_history()


if __name__ == "__main__":
    main()
