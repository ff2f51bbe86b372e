"""An editor that keeps undo and redo history over a text buffer."""

from __future__ import annotations

from os import PathLike

from .buffer import TextBuffer
from .commands import Command
from .stack import BoundedStack


class NothingToUndoError(LookupError):
    """Raised when undo is asked for with an empty history."""


class NothingToRedoError(LookupError):
    """Raised when redo is asked for with nothing undone."""


class Editor:
    """Applies commands to its buffer and records them for undo and redo."""

    def __init__(self, history_size: int = 100) -> None:
        self.buffer = TextBuffer()
        self._undo: BoundedStack[Command] = BoundedStack(history_size)
        self._redo: BoundedStack[Command] = BoundedStack(history_size)

    def perform(self, command: Command) -> None:
        """Apply a command, record it for undo and forget anything undone."""
        command.execute()
        self._redo.clear()
        self._undo.push(command)

    def undo(self) -> None:
        """Revert the most recent command."""
        if not self._undo:
            raise NothingToUndoError("Nothing to undo!")
        command = self._undo.pop()
        command.undo()
        self._redo.push(command)

    def redo(self) -> None:
        """Reapply the most recently undone command."""
        if not self._redo:
            raise NothingToRedoError("Nothing to redo!")
        command = self._redo.pop()
        command.execute()
        self._undo.push(command)

    def save(self, path: str | PathLike[str]) -> None:
        """Write the buffer to a file."""
        self.buffer.save(path)

    def load(self, path: str | PathLike[str]) -> None:
        """Replace the buffer with a file's lines and drop all history."""
        self.buffer.load(path)
        self._undo.clear()
        self._redo.clear()

    def render(self) -> str:
        """Return the buffer's numbered listing."""
        return self.buffer.render()