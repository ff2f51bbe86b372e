"""Interactive menu for editing a text buffer."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from .buffer import BufferIndexError
from .commands import DeleteCommand, InsertCommand, UpdateCommand
from .editor import Editor, NothingToRedoError, NothingToUndoError
from .stack import StackOverflowError

_MENU = (
    "\n----- Mini Text Editor Menu -----\n"
    "1. Insert a line\n"
    "2. Delete a line\n"
    "3. Update a line\n"
    "4. Undo last operation\n"
    "5. Redo last undone operation\n"
    "6. Display text buffer\n"
    "7. Save buffer to file\n"
    "8. Load buffer from file\n"
    "0. Exit\n"
)


def _parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def run(editor: Editor, stdin: TextIO, stdout: TextIO) -> int:
    """Drive the editor from menu choices read from ``stdin`` until exit or end of input."""

    def read_line() -> str:
        line = stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def ask(prompt: str) -> str:
        stdout.write(prompt)
        return read_line()

    def ask_index(prompt: str) -> int | None:
        index = _parse_int(ask(prompt))
        if index is None:
            stdout.write("Invalid index\n")
        return index

    def ask_filename(prompt: str) -> str:
        stdout.write(prompt)
        while not (name := read_line().lstrip()):
            pass
        return name

    def insert() -> None:
        index = ask_index("Enter index to insert at (0-based): ")
        if index is None:
            return
        text = ask("Enter text to insert: ")
        editor.perform(InsertCommand(editor.buffer, index, text))

    def delete() -> None:
        index = ask_index("Enter index to delete (0-based): ")
        if index is not None:
            editor.perform(DeleteCommand(editor.buffer, index))

    def update() -> None:
        index = ask_index("Enter index to update (0-based): ")
        if index is None:
            return
        text = ask("Enter new text: ")
        editor.perform(UpdateCommand(editor.buffer, index, text))

    def display() -> None:
        stdout.write(editor.render())

    def save() -> None:
        name = ask_filename("Enter filename to save to: ")
        try:
            editor.save(name)
        except OSError:
            stdout.write("Failed to open file for writing.\n")
        else:
            stdout.write("File saved successfully.\n")

    def load() -> None:
        name = ask_filename("Enter filename to load from: ")
        try:
            editor.load(name)
        except OSError:
            stdout.write("Failed to open file for reading.\n")
        else:
            stdout.write("File loaded successfully.\n")

    actions: dict[int, Callable[[], None]] = {
        1: insert,
        2: delete,
        3: update,
        4: editor.undo,
        5: editor.redo,
        6: display,
        7: save,
        8: load,
    }

    try:
        while True:
            stdout.write(_MENU)
            choice = _parse_int(ask("Enter your choice: "))
            if choice == 0:
                stdout.write("Exiting editor. Goodbye!\n")
                break
            action = actions.get(choice) if choice is not None else None
            if action is None:
                stdout.write("Invalid choice! Try again.\n")
                continue
            try:
                action()
            except (
                BufferIndexError,
                NothingToUndoError,
                NothingToRedoError,
                StackOverflowError,
            ) as exc:
                stdout.write(f"{exc.args[0]}\n")
            except ValueError:
                stdout.write("Warning: Empty insert command.\n")
    except EOFError:
        pass
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive editor on standard input and output."""
    return run(Editor(), sys.stdin, sys.stdout)


if __name__ == "__main__":
    raise SystemExit(main())