"""A singly linked list of integers and node-removal helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass
class _Node:
    value: int
    next: Optional["_Node"] = None


def _reverse(head: Optional[_Node]) -> Optional[_Node]:
    previous = None
    node = head
    while node is not None:
        following = node.next
        node.next = previous
        previous = node
        node = following
    return previous


class SinglyLinkedList:
    """A singly linked list supporting insertion and deletion by position."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            node = node.next
        return node

    def insert_first(self, value: int) -> None:
        """Insert a value at the beginning of the list."""
        self._head = _Node(value, self._head)
        self._size += 1

    def append(self, value: int) -> None:
        """Insert a value at the end of the list."""
        new = _Node(value)
        if self._head is None:
            self._head = new
        else:
            self._node_at(self._size - 1).next = new
        self._size += 1

    def insert_after(self, location: int, value: int) -> None:
        """Insert a value after the node at the zero-based ``location``."""
        if not 0 <= location < self._size:
            raise IndexError(f"can't insert after location {location}")
        node = self._node_at(location)
        node.next = _Node(value, node.next)
        self._size += 1

    def delete_first(self) -> int:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("list is empty")
        removed = self._head
        self._head = removed.next
        self._size -= 1
        return removed.value

    def delete_last(self) -> int:
        """Remove and return the last value."""
        if self._head is None:
            raise IndexError("list is empty")
        if self._head.next is None:
            value = self._head.value
            self._head = None
        else:
            previous = self._node_at(self._size - 2)
            value = previous.next.value
            previous.next = None
        self._size -= 1
        return value

    def delete_after(self, location: int) -> int:
        """Remove and return the node following the first ``location`` nodes.

        This is the node at zero-based index ``location``; at least one node
        must precede it.
        """
        if not 1 <= location < self._size:
            raise IndexError(f"can't delete after location {location}")
        previous = self._node_at(location - 1)
        removed = previous.next
        previous.next = removed.next
        self._size -= 1
        return removed.value

    def search(self, value: int) -> list[int]:
        """Return the one-based positions at which ``value`` occurs."""
        return [position for position, item in enumerate(self, start=1) if item == value]

    def remove_smaller_than_right(self) -> None:
        """Remove every node that has a strictly greater value after it."""
        if self._head is None:
            return
        head = _reverse(self._head)
        best = head.value
        last = head
        node = head.next
        while node is not None:
            if node.value < best:
                last.next = node.next
                self._size -= 1
            else:
                best = node.value
                last = node
            node = node.next
        self._head = _reverse(head)


def remove_nodes_with_greater_right(values: Iterable[int]) -> list[int]:
    """Return the values that have no strictly greater value to their right."""
    linked = SinglyLinkedList(values)
    linked.remove_smaller_than_right()
    return list(linked)