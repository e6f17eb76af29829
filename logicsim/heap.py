"""An m-ary heap ordered by a caller-supplied "has priority over" predicate."""

from __future__ import annotations

import operator
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class Heap(Generic[T]):
    """An m-ary heap; ``less(a, b)`` is true when ``a`` has priority over ``b``.

    With the default predicate (``<``) this is a min-heap.
    """

    def __init__(
        self,
        m: int = 2,
        less: Callable[[T, T], bool] = operator.lt,
    ) -> None:
        if m < 1:
            raise ValueError(f"heap arity must be at least 1, got {m}")
        self._m = m
        self._less = less
        self._data: list[T] = []

    def push(self, item: T) -> None:
        """Add an item, sifting it up towards the root."""
        data = self._data
        data.append(item)
        idx = len(data) - 1
        while idx:
            parent = (idx - 1) // self._m
            if not self._less(data[idx], data[parent]):
                break
            data[idx], data[parent] = data[parent], data[idx]
            idx = parent

    def top(self) -> T:
        """Return the highest-priority item.

        Raises IndexError if the heap is empty.
        """
        if not self._data:
            raise IndexError("Empty Heap")
        return self._data[0]

    def pop(self) -> None:
        """Remove the highest-priority item.

        Raises IndexError if the heap is empty.
        """
        data = self._data
        if not data:
            raise IndexError("Empty Heap")
        last = data.pop()
        if not data:
            return
        data[0] = last
        n = len(data)
        idx = 0
        while True:
            first = idx * self._m + 1
            if first >= n:
                break
            best = first
            for child in range(first + 1, min(first + self._m, n)):
                if self._less(data[child], data[best]):
                    best = child
            if not self._less(data[best], data[idx]):
                break
            data[idx], data[best] = data[best], data[idx]
            idx = best

    def empty(self) -> bool:
        """Return True if the heap holds no items."""
        return not self._data

    def __len__(self) -> int:
        return len(self._data)