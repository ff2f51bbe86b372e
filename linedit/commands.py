"""Undoable edits applied to a text buffer."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .buffer import TextBuffer


class Command(ABC):
    """An edit that can be applied and reverted."""

    @abstractmethod
    def execute(self) -> None:
        """Apply the edit."""

    @abstractmethod
    def undo(self) -> None:
        """Revert the edit."""


class InsertCommand(Command):
    """Insert a line at a position."""

    def __init__(self, buffer: TextBuffer, index: int, sentence: str) -> None:
        self.buffer = buffer
        self.index = index
        self.sentence = sentence

    def execute(self) -> None:
        if not self.sentence:
            raise ValueError("empty insert command")
        self.buffer.insert(self.sentence, self.index)

    def undo(self) -> None:
        self.buffer.delete(self.index)


class DeleteCommand(Command):
    """Delete the line at a position; an index outside the buffer does nothing."""

    def __init__(self, buffer: TextBuffer, index: int) -> None:
        self.buffer = buffer
        self.index = index
        self._deleted: str | None = None

    def execute(self) -> None:
        if not 0 <= self.index < len(self.buffer):
            self._deleted = None
            return
        self._deleted = self.buffer.delete(self.index)

    def undo(self) -> None:
        if self._deleted is not None:
            self.buffer.insert(self._deleted, self.index)


class UpdateCommand(Command):
    """Replace the line at a position, remembering the text it had."""

    def __init__(self, buffer: TextBuffer, index: int, new_text: str) -> None:
        self.buffer = buffer
        self.index = index
        self.new_text = new_text
        self._old_text = buffer.line_at(index) if 0 <= index < len(buffer) else ""

    def execute(self) -> None:
        self.buffer.update(self.index, self.new_text)

    def undo(self) -> None:
        self.buffer.update(self.index, self._old_text)