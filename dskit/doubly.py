"""A doubly linked list that can be walked and reversed in both directions."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, eq=False)
class DoublyNode:
    """One link of a doubly linked list."""

    value: Any
    prev: DoublyNode | None = None
    next: DoublyNode | None = None


class DoublyLinkedList:
    """A doubly linked list with pointers to both ends."""

    def __init__(self, values=()):
        self.head: DoublyNode | None = None
        self.tail: DoublyNode | None = None
        self._length = 0
        for value in values:
            self.insert(self._length, value)

    @staticmethod
    def _walk(start: DoublyNode | None, direction: str) -> Iterator[Any]:
        while start is not None:
            yield start.value
            start = getattr(start, direction)

    def _node_at(self, index: int) -> DoublyNode:
        node = self.head
        for _ in range(index):
            node = node.next
        return node

    def _check(self, index: int, upper: int, action: str) -> None:
        if not 0 <= index <= upper:
            raise IndexError(f"{action} position {index} outside 0..{upper}")

    def __iter__(self):
        return self._walk(self.head, "next")

    def __reversed__(self):
        return self._walk(self.tail, "prev")

    def __len__(self):
        return self._length

    def insert(self, index, value):
        """Insert ``value`` so that it ends up at position ``index`` (0-based)."""
        self._check(index, self._length, "insert")
        successor = self._node_at(index) if index < self._length else None
        predecessor = successor.prev if successor is not None else self.tail
        node = DoublyNode(value, predecessor, successor)
        if predecessor is None:
            self.head = node
        else:
            predecessor.next = node
        if successor is None:
            self.tail = node
        else:
            successor.prev = node
        self._length += 1

    def remove(self, index):
        """Remove the node at ``index`` (0-based) and return its value."""
        self._check(index, self._length - 1, "remove")
        node = self._node_at(index)
        if node.prev is None:
            self.head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self.tail = node.prev
        else:
            node.next.prev = node.prev
        self._length -= 1
        return node.value

    def reverse(self):
        """Reverse the list in place by swapping every node's links."""
        node = self.head
        while node is not None:
            node.prev, node.next = node.next, node.prev
            node = node.prev
        self.head, self.tail = self.tail, self.head