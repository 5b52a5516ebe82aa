"""Operations on singly linked lists: checks, merging, relinking and cleanup."""

from __future__ import annotations

import heapq

from dskit.linked_list import LinkedList, Node


def is_sorted(lst):
    """True if the values never decrease from head to tail."""
    previous: Node | None = None
    node = lst.head
    while node is not None:
        if previous is not None and node.value < previous.value:
            return False
        previous, node = node, node.next
    return True


def concatenate(first, second):
    """Append the values of ``second`` to ``first`` in place and return ``first``."""
    for value in list(second):
        first.append(value)
    return first


def remove_value(lst, value):
    """Unlink the first node holding ``value``; return whether one was found."""
    previous: Node | None = None
    node = lst.head
    while node is not None:
        if node.value == value:
            if previous is None:
                lst.head = node.next
            else:
                previous.next = node.next
            if node is lst._tail:
                lst._tail = previous
            lst._length -= 1
            return True
        previous, node = node, node.next
    return False


def create_loop(lst):
    """Point the last node back at the second one, closing a loop.

    With a single node there is no second node, so no loop forms. After a
    loop is made the list must not be iterated, as it never ends.
    """
    if lst.head is None:
        raise ValueError("cannot make a loop in an empty list")
    lst._tail.next = lst.head.next


def has_loop(lst):
    """True if following the links from the head never reaches an end."""
    slow = fast = lst.head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False


def merge_sorted(first, second):
    """Merge two sorted lists into a new one; on ties ``first`` goes first."""
    return LinkedList(heapq.merge(first, second))


def remove_duplicates(lst):
    """Drop values equal to the one just before them; return how many went."""
    removed = 0
    node = lst.head
    while node is not None and node.next is not None:
        if node.next.value == node.value:
            node.next = node.next.next
            lst._length -= 1
            removed += 1
        else:
            node = node.next
    lst._tail = node
    return removed


def reverse_values(lst):
    """Reverse the list by rewriting the values held in its nodes."""
    values = list(lst)
    node = lst.head
    for value in reversed(values):
        node.value = value
        node = node.next


def reverse_links(lst):
    """Reverse the list in place by turning every link around."""
    previous: Node | None = None
    node = lst.head
    lst._tail = node
    while node is not None:
        following = node.next
        node.next = previous
        previous, node = node, following
    lst.head = previous