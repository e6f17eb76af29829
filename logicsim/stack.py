"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A LIFO stack backed by a list."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, item: T) -> None:
        """Put an item on top of the stack."""
        self._items.append(item)

    def pop(self) -> None:
        """Remove the top item; raises IndexError if the stack is empty."""
        if not self._items:
            raise IndexError("Popping an empty stack")
        self._items.pop()

    def top(self) -> T:
        """Return the top item; raises IndexError if the stack is empty."""
        if not self._items:
            raise IndexError("Stack is empty")
        return self._items[-1]

    def empty(self) -> bool:
        """Return True if the stack holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)