"""An ordered buffer of text lines."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike


class BufferIndexError(IndexError):
    """Raised when a line index lies outside the buffer."""


class TextBuffer:
    """A sequence of text lines that can be edited by position."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self._lines: list[str] = list(lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._lines!r})"

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._lines):
            raise BufferIndexError("Invalid index")

    def insert_at_begin(self, sentence: str) -> None:
        """Put a line before all others."""
        self._lines.insert(0, sentence)

    def insert_at_end(self, sentence: str) -> None:
        """Put a line after all others."""
        self._lines.append(sentence)

    def insert(self, sentence: str, index: int) -> None:
        """Insert a line so that it ends up at ``index`` (0 to len inclusive)."""
        if not 0 <= index <= len(self._lines):
            raise BufferIndexError("Invalid index")
        self._lines.insert(index, sentence)

    def delete_at_begin(self) -> str:
        """Remove and return the first line."""
        if not self._lines:
            raise BufferIndexError("Buffer is empty")
        return self._lines.pop(0)

    def delete_at_end(self) -> str:
        """Remove and return the last line."""
        if not self._lines:
            raise BufferIndexError("Buffer is empty")
        return self._lines.pop()

    def delete(self, index: int) -> str:
        """Remove and return the line at ``index``."""
        self._check_index(index)
        return self._lines.pop(index)

    def update(self, index: int, text: str) -> None:
        """Replace the line at ``index``."""
        self._check_index(index)
        self._lines[index] = text

    def line_at(self, index: int) -> str:
        """Return the line at ``index``."""
        self._check_index(index)
        return self._lines[index]

    def clear(self) -> None:
        """Remove every line."""
        self._lines.clear()

    def save(self, path: str | PathLike[str]) -> None:
        """Write every line, each followed by a newline, to ``path``."""
        with open(path, "w", encoding="utf-8", newline="") as handle:
            handle.writelines(f"{line}\n" for line in self._lines)

    def load(self, path: str | PathLike[str]) -> None:
        """Replace the contents with the lines read from ``path``."""
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        self._lines = lines

    def render(self) -> str:
        """Return the numbered listing shown to the user."""
        if not self._lines:
            return "Buffer is empty.\n"
        return "".join(
            f"{number}: {line}\n" for number, line in enumerate(self._lines, start=1)
        )