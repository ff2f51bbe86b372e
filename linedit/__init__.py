"""A menu-driven line editor: a text buffer, undoable commands and an editor with history."""

__version__ = "0.1.0"
__all__ = ["buffer", "stack", "commands", "editor", "cli"]