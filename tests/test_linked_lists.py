import pytest

from drills.linked_lists import CircularLinkedList, DoublyLinkedList


def _doubly(*values):
    linked = DoublyLinkedList()
    for value in values:
        linked.push_front(value)
    return linked


def _circular(*values):
    linked = CircularLinkedList()
    for value in values:
        linked.push(value)
    return linked


def test_doubly_push_front_order():
    linked = _doubly(40, 30, 20, 10, 5)
    assert list(linked) == [5, 10, 20, 30, 40]


def test_doubly_remove_in_between():
    linked = _doubly(40, 30, 20, 10, 5)
    linked.remove(30)
    assert list(linked) == [5, 10, 20, 40]
    assert list(reversed(linked)) == [40, 20, 10, 5]
    assert len(linked) == 4


@pytest.mark.parametrize("target", [5, 40])
def test_doubly_remove_ends_keeps_links(target):
    linked = _doubly(40, 30, 20, 10, 5)
    linked.remove(target)
    remaining = [v for v in [5, 10, 20, 30, 40] if v != target]
    assert list(linked) == remaining
    assert list(reversed(linked)) == remaining[::-1]


def test_doubly_remove_only_item():
    linked = _doubly(1)
    linked.remove(1)
    assert list(linked) == []
    linked.push_front(2)
    assert list(reversed(linked)) == [2]


def test_doubly_remove_missing_raises():
    linked = _doubly(1, 2)
    with pytest.raises(ValueError):
        linked.remove(3)
    assert list(linked) == [2, 1]


def test_circular_push_order():
    linked = _circular(2, 5, 7, 8, 10)
    assert list(linked) == [10, 8, 7, 5, 2]


def test_circular_remove_middle():
    linked = _circular(2, 5, 7, 8, 10)
    linked.remove(7)
    assert list(linked) == [10, 8, 5, 2]
    assert len(linked) == 4


def test_circular_remove_head_and_tail_then_push():
    linked = _circular(2, 5, 7, 8, 10)
    linked.remove(10)
    linked.remove(2)
    assert list(linked) == [8, 7, 5]
    linked.push(1)
    assert list(linked) == [1, 8, 7, 5]


def test_circular_remove_only_item():
    linked = _circular(4)
    linked.remove(4)
    assert list(linked) == []
    assert len(linked) == 0


def test_circular_remove_first_occurrence_only():
    linked = _circular(3, 9, 3)
    linked.remove(3)
    assert list(linked) == [9, 3]


def test_circular_remove_missing_raises():
    linked = _circular(1, 2)
    with pytest.raises(ValueError):
        linked.remove(42)
    with pytest.raises(ValueError):
        CircularLinkedList().remove(1)
    assert list(linked) == [2, 1]