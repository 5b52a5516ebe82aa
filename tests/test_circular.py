import pytest

from dskit.circular import CircularDoublyLinkedList, CircularLinkedList


def test_singly_created_and_iterates_once():
    lst = CircularLinkedList([1, 2, 3, 4, 5])
    assert list(lst) == [1, 2, 3, 4, 5]
    assert len(lst) == 5


def test_singly_source_sequence():
    lst = CircularLinkedList([1, 2, 3, 4, 5])
    lst.insert(0, 6)
    assert list(lst) == [6, 1, 2, 3, 4, 5]
    assert lst.remove(0) == 6
    assert list(lst) == [1, 2, 3, 4, 5]


def test_singly_insert_end_then_ring_closes():
    lst = CircularLinkedList([1, 2])
    lst.insert(2, 3)
    assert list(lst) == [1, 2, 3]
    lst.insert(0, 0)
    assert list(lst) == [0, 1, 2, 3]


def test_singly_remove_last_and_only():
    lst = CircularLinkedList([1, 2, 3])
    assert lst.remove(2) == 3
    lst.insert(2, 4)
    assert list(lst) == [1, 2, 4]
    single = CircularLinkedList([9])
    assert single.remove(0) == 9
    assert list(single) == []
    assert len(single) == 0


def test_singly_bad_positions():
    lst = CircularLinkedList([1, 2])
    with pytest.raises(IndexError):
        lst.insert(3, 1)
    with pytest.raises(IndexError):
        lst.remove(2)
    with pytest.raises(IndexError):
        CircularLinkedList().remove(0)


def test_doubly_source_sequence():
    lst = CircularDoublyLinkedList([10, 20, 30, 40, 50])
    lst.insert(0, 60)
    assert list(lst) == [60, 10, 20, 30, 40, 50]
    assert lst.remove(0) == 60
    assert list(lst) == [10, 20, 30, 40, 50]


def test_doubly_insert_middle_and_remove_middle():
    lst = CircularDoublyLinkedList([1, 3])
    lst.insert(1, 2)
    lst.insert(3, 4)
    assert list(lst) == [1, 2, 3, 4]
    assert lst.remove(1) == 2
    assert list(lst) == [1, 3, 4]
    assert len(lst) == 3


def test_doubly_remove_to_empty_and_refill():
    lst = CircularDoublyLinkedList([5])
    assert lst.remove(0) == 5
    assert list(lst) == []
    lst.insert(0, 6)
    assert list(lst) == [6]


def test_doubly_bad_positions():
    lst = CircularDoublyLinkedList([1])
    with pytest.raises(IndexError):
        lst.insert(2, 0)
    with pytest.raises(IndexError):
        lst.remove(1)


def test_middle_of_odd_lengths():
    assert CircularDoublyLinkedList([1, 2, 3, 4, 5]).middle() == 3
    assert CircularDoublyLinkedList([7]).middle() == 7
    assert CircularDoublyLinkedList([4, 8, 15]).middle() == 8


def test_middle_of_even_or_empty_raises():
    with pytest.raises(ValueError):
        CircularDoublyLinkedList([1, 2, 3, 4]).middle()
    with pytest.raises(ValueError):
        CircularDoublyLinkedList([1, 2]).middle()
    with pytest.raises(ValueError):
        CircularDoublyLinkedList().middle()