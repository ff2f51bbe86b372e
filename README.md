# linedit

A small, menu-driven editor that works on a buffer of text lines. You can
insert, delete and update lines by index, and undo and redo every change. You
can also save the buffer to a plain text file and load it back.

## Installing

```
pip install .
```

## Using the editor

Start it with:

```
linedit
```

Before each action the editor shows this menu:

```
----- Mini Text Editor Menu -----
1. Insert a line
2. Delete a line
3. Update a line
4. Undo last operation
5. Redo last undone operation
6. Display text buffer
7. Save buffer to file
8. Load buffer from file
0. Exit
```

Things to know when using it:

- Indices are 0-based. The display numbers lines from 1.
- You can insert at any index from 0 up to the number of lines. Any other index
  prints `Invalid index`. If you insert empty text, the editor prints
  `Warning: Empty insert command.` and nothing changes.
- If you delete at an index outside the buffer, nothing happens. The delete is
  still recorded, so undoing it does nothing either.
- If you update at an index outside the buffer, the editor prints
  `Invalid index`.
- Undo and redo print `Nothing to undo!` or `Nothing to redo!` when there is
  nothing left to undo or redo. Any new change clears the redo history.
- Saving writes each line followed by a newline, in UTF-8. Loading reads the
  lines of a file, replaces the buffer with them and clears the undo and redo
  history.
- The undo history holds at most 100 commands. After that, a further change is
  still applied, but it is not recorded and the editor prints `Stack Overflow`.
- The editor stops when you choose `0` or when its input ends.

## Using it as a library

```python
from linedit.commands import InsertCommand, UpdateCommand
from linedit.editor import Editor

editor = Editor()
editor.perform(InsertCommand(editor.buffer, 0, "first line"))
editor.perform(UpdateCommand(editor.buffer, 0, "changed"))
editor.undo()
print(editor.render(), end="")   # 1: first line
editor.redo()
editor.save("notes.txt")
```

The modules:

- `linedit.buffer` contains `TextBuffer`, an ordered list of lines. It provides:
  - `insert`, `insert_at_begin` and `insert_at_end` to add lines;
  - `delete`, `delete_at_begin` and `delete_at_end` to remove lines, each of
    which returns the removed line;
  - `update`, `line_at` and `clear`;
  - `save`, `load` and `render`;
  - `len()` and iteration over its lines.

  An index out of range raises `BufferIndexError`, which is a subclass of
  `IndexError`.
- `linedit.commands` contains the abstract `Command` and the concrete
  `InsertCommand`, `DeleteCommand` and `UpdateCommand`. Each one has `execute()`
  and `undo()`.
- `linedit.editor` contains `Editor`. It has:
  - `perform`, `undo` and `redo`;
  - `save`, `load` and `render`;
  - a `buffer` attribute.

  `Editor(history_size=100)` sets the capacity of each history. Undo and redo
  raise `NothingToUndoError` and `NothingToRedoError` when there is nothing to
  undo or redo.
- `linedit.stack` contains `BoundedStack`, a stack with a fixed capacity. It
  raises `StackOverflowError` when full and `StackUnderflowError` when empty.
- `linedit.cli` contains `run(editor, stdin, stdout)`, which runs the menu over
  any text streams, and `main()`, which runs it on the terminal.

## What it does not do

This is not a full-screen or cursor-based editor. It edits whole lines only.
It keeps no history across sessions, and it has no search, no ranges and no
syntax highlighting.

## Running the tests

```
pip install .[test]
pytest
```