"""Circular linked lists, singly and doubly linked."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, eq=False)
class _Node:
    value: Any
    next: _Node | None = None


@dataclass(slots=True, eq=False)
class _DoubleNode:
    value: Any
    prev: _DoubleNode | None = None
    next: _DoubleNode | None = None


class CircularLinkedList:
    """A singly linked list whose last node points back to the head."""

    def __init__(self, values=()):
        self.head: _Node | None = None
        self._tail: _Node | None = None
        self._length = 0
        for value in values:
            self.insert(self._length, value)

    def __iter__(self) -> Iterator[Any]:
        if self.head is None:
            return
        node = self.head
        while True:
            yield node.value
            node = node.next
            if node is self.head:
                break

    def __len__(self):
        return self._length

    def __repr__(self) -> str:
        return f"CircularLinkedList({list(self)!r})"

    def insert(self, index, value):
        """Insert ``value`` at position ``index``; 0 makes it the new head."""
        if not 0 <= index <= self._length:
            raise IndexError(f"insert position {index} outside 0..{self._length}")
        node = _Node(value)
        if self.head is None:
            node.next = node
            self.head = self._tail = node
        elif index == 0:
            node.next = self.head
            self._tail.next = node
            self.head = node
        else:
            previous = self.head
            for _ in range(index - 1):
                previous = previous.next
            node.next = previous.next
            previous.next = node
            if previous is self._tail:
                self._tail = node
        self._length += 1

    def remove(self, index):
        """Remove the node at ``index`` and return its value."""
        if not 0 <= index < self._length:
            raise IndexError(f"remove position {index} outside 0..{self._length - 1}")
        previous = self._tail
        for _ in range(index):
            previous = previous.next
        node = previous.next
        if self._length == 1:
            self.head = self._tail = None
        else:
            previous.next = node.next
            if node is self.head:
                self.head = node.next
            if node is self._tail:
                self._tail = previous
        self._length -= 1
        return node.value


class CircularDoublyLinkedList:
    """A doubly linked ring: the head's ``prev`` is the last node."""

    def __init__(self, values=()):
        self.head: _DoubleNode | None = None
        self._length = 0
        for value in values:
            self.insert(self._length, value)

    def __iter__(self) -> Iterator[Any]:
        if self.head is None:
            return
        node = self.head
        while True:
            yield node.value
            node = node.next
            if node is self.head:
                break

    def __len__(self):
        return self._length

    def __repr__(self) -> str:
        return f"CircularDoublyLinkedList({list(self)!r})"

    def insert(self, index, value):
        """Insert ``value`` at position ``index``; 0 makes it the new head."""
        if not 0 <= index <= self._length:
            raise IndexError(f"insert position {index} outside 0..{self._length}")
        node = _DoubleNode(value)
        if self.head is None:
            node.prev = node.next = node
            self.head = node
        else:
            previous = self.head.prev if index == 0 else self.head
            for _ in range(index - 1):
                previous = previous.next
            following = previous.next
            node.prev, node.next = previous, following
            previous.next = node
            following.prev = node
            if index == 0:
                self.head = node
        self._length += 1

    def remove(self, index):
        """Remove the node at ``index`` and return its value."""
        if not 0 <= index < self._length:
            raise IndexError(f"remove position {index} outside 0..{self._length - 1}")
        node = self.head
        for _ in range(index):
            node = node.next
        if self._length == 1:
            self.head = None
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self.head:
                self.head = node.next
        self._length -= 1
        return node.value

    def middle(self):
        """Middle value, found by walking inward from both ends.

        Raises ValueError when the list is empty or has an even length.
        """
        if self.head is None:
            raise ValueError("middle of an empty list")
        forward = self.head
        backward = self.head.prev
        while True:
            forward = forward.next
            backward = backward.prev
            if forward is backward:
                return forward.value
            if forward is self.head:
                raise ValueError("an even number of nodes has no middle element")