"""Doubly linked and circular singly linked lists."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["CircularLinkedList", "DoublyLinkedList"]


class _DoubleNode:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _DoubleNode | None = None
        self.next: _DoubleNode | None = None


class DoublyLinkedList:
    """List with links in both directions, grown at the front."""

    def __init__(self) -> None:
        self._head: _DoubleNode | None = None
        self._tail: _DoubleNode | None = None
        self._size = 0

    def push_front(self, value: Any) -> None:
        """Insert ``value`` before the current head."""
        node = _DoubleNode(value)
        node.next = self._head
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def remove(self, value: Any) -> None:
        """Unlink the first node holding ``value``; raise ValueError if none does."""
        node = self._head
        while node is not None and node.value != value:
            node = node.next
        if node is None:
            raise ValueError(f"{value!r} not found in list")
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node = self


class CircularLinkedList:
    """Singly linked list whose last node links back to the head."""

    def __init__(self) -> None:
        self._last: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Insert ``value`` as the new head."""
        node = _Node(value)
        if self._last is None:
            self._last = node
        else:
            node.next = self._last.next
            self._last.next = node
        self._size += 1

    def remove(self, key: Any) -> None:
        """Unlink the first node, from the head, holding ``key``.

        Raises ValueError if no node holds it.
        """
        if self._last is None:
            raise ValueError(f"{key!r} not found in list")
        previous = self._last
        node = previous.next
        for _ in range(self._size):
            if node.value == key:
                if node is previous:
                    self._last = None
                else:
                    previous.next = node.next
                    if node is self._last:
                        self._last = previous
                self._size -= 1
                return
            previous, node = node, node.next
        raise ValueError(f"{key!r} not found in list")

    def __iter__(self) -> Iterator[Any]:
        if self._last is None:
            return
        node = self._last.next
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size