"""Singly linked list of integers with pivot-partition and filter operations."""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path


@dataclass(eq=False)
class Node:
    """A linked-list node holding an integer."""

    val: int
    next: Node | None = None


def from_iterable(values: Iterable[int]) -> Node | None:
    """Build a linked list from values, returning its head (None if empty)."""
    head: Node | None = None
    tail: Node | None = None
    for v in values:
        node = Node(v)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def iter_values(head: Node | None) -> Iterator[int]:
    """Yield the values of a linked list in order."""
    while head is not None:
        yield head.val
        head = head.next


def llpivot(head: Node | None, pivot: int) -> tuple[Node | None, Node | None]:
    """Split a list into nodes ``<= pivot`` and nodes ``> pivot``.

    Nodes are moved, not copied, and keep their relative order.
    Returns ``(smaller, larger)``.
    """
    small_head: Node | None = None
    small_tail: Node | None = None
    large_head: Node | None = None
    large_tail: Node | None = None
    while head is not None:
        node, head = head, head.next
        node.next = None
        if node.val <= pivot:
            if small_tail is None:
                small_head = node
            else:
                small_tail.next = node
            small_tail = node
        else:
            if large_tail is None:
                large_head = node
            else:
                large_tail.next = node
            large_tail = node
    return small_head, large_head


def llfilter(head: Node | None, pred: Callable[[int], bool]) -> Node | None:
    """Remove nodes whose value satisfies ``pred``; return the new head."""
    new_head: Node | None = None
    tail: Node | None = None
    while head is not None:
        node, head = head, head.next
        if pred(node.val):
            node.next = None
            continue
        if tail is None:
            new_head = node
        else:
            tail.next = node
        tail = node
    if tail is not None:
        tail.next = None
    return new_head


def read_list(path: str | Path) -> Node | None:
    """Read whitespace-separated integers from a file into a linked list.

    Reading stops at the first token that is not an integer. Returns None
    if the file cannot be opened or holds no leading integers.
    """
    try:
        text = Path(path).read_text()
    except OSError:
        return None

    def values() -> Iterator[int]:
        for token in text.split():
            try:
                yield int(token)
            except ValueError:
                return

    return from_iterable(values())


def _format(head: Node | None) -> str:
    return "".join(f"{v} " for v in iter_values(head))


def main(argv: list[str] | None = None) -> int:
    """Read a list from the file named first in argv and partition it around 10."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Please provide an input file")
        return 1
    head = read_list(args[0])
    print("Original list: " + _format(head))
    pivot = 10
    smaller, larger = llpivot(head, pivot)
    print(f"After llpivot (pivot = {pivot}):")
    print("smaller (<= pivot): " + _format(smaller))
    print("larger (>pivot): " + _format(larger))
    return 0


if __name__ == "__main__":
    sys.exit(main())