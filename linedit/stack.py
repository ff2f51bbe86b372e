"""A stack with a fixed capacity."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflowError(IndexError):
    """Raised when popping from an empty stack."""


class BoundedStack(Generic[T]):
    """Last-in first-out storage that holds at most ``capacity`` items."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._items: list[T] = []

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def push(self, item: T) -> None:
        """Add an item on top."""
        if len(self._items) >= self.capacity:
            raise StackOverflowError("Stack Overflow")
        self._items.append(item)

    def pop(self) -> T:
        """Remove and return the top item."""
        if not self._items:
            raise StackUnderflowError("Stack Underflow")
        return self._items.pop()

    def peek(self) -> T | None:
        """Return the top item, or None when the stack is empty."""
        return self._items[-1] if self._items else None

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()