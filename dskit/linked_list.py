"""A singly linked list with the classic iterative and recursive operations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, eq=False)
class Node:
    """One link of a singly linked list."""

    value: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list that keeps a pointer to its last node."""

    def __init__(self, values=()):
        self.head: Node | None = None
        self._tail: Node | None = None
        self._length = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _link_after(self, previous: Node | None, value: Any) -> None:
        """Place a new node after ``previous``, or at the head when it is None."""
        if previous is None:
            node = Node(value, self.head)
            self.head = node
        else:
            node = Node(value, previous.next)
            previous.next = node
        if node.next is None:
            self._tail = node
        self._length += 1

    def __iter__(self):
        return (node.value for node in self._nodes())

    def __len__(self):
        return self._length

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def append(self, value):
        """Add ``value`` after the last node."""
        self._link_after(self._tail, value)

    def insert(self, index, value):
        """Insert ``value`` so that it ends up at position ``index`` (0-based)."""
        if not 0 <= index <= self._length:
            raise IndexError(f"insert position {index} outside 0..{self._length}")
        previous = None
        for position, node in enumerate(self._nodes(), start=1):
            if position > index:
                break
            previous = node
        self._link_after(previous, value)

    def insert_sorted(self, value):
        """Insert ``value`` before the first element that is not smaller."""
        previous: Node | None = None
        for node in self._nodes():
            if not node.value < value:
                break
            previous = node
        self._link_after(previous, value)

    def total(self):
        """Sum of all values."""
        return sum(self)

    def maximum(self):
        """Largest value in the list."""
        if self.head is None:
            raise ValueError("maximum of an empty list")
        return max(self)

    def search(self, value):
        """Return the first node holding ``value``, or None."""
        return next((node for node in self._nodes() if node.value == value), None)

    def search_move_to_front(self, value):
        """Find ``value`` and move its node to the head; return the node or None."""
        previous: Node | None = None
        for node in self._nodes():
            if node.value == value:
                if previous is not None:
                    previous.next = node.next
                    if node is self._tail:
                        self._tail = previous
                    node.next = self.head
                    self.head = node
                return node
            previous = node
        return None

    def middle(self):
        """Middle value; for an even length, the first of the two middle ones."""
        if self.head is None:
            raise ValueError("middle of an empty list")
        fast: Node | None = self.head
        slow = self.head
        while fast is not None:
            fast = fast.next
            if fast is not None:
                fast = fast.next
            if fast is not None:
                slow = slow.next
        return slow.value

    def reverse_recursive(self):
        """Reverse the links in place, walking the list recursively."""

        def relink(previous: Node | None, node: Node | None) -> None:
            if node is None:
                self.head = previous
                return
            relink(node, node.next)
            node.next = previous

        old_head = self.head
        relink(None, self.head)
        self._tail = old_head

    def render(self):
        """Values separated by single spaces."""
        return " ".join(map(str, self))