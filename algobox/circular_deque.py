"""A fixed-capacity double-ended queue on a circular array."""

from __future__ import annotations

from typing import Iterator

MAX_CAPACITY = 100


class CircularDeque:
    """A bounded deque stored in a circular array."""

    def __init__(self, capacity: int) -> None:
        if not 1 <= capacity <= MAX_CAPACITY:
            raise ValueError(f"capacity must be between 1 and {MAX_CAPACITY}")
        self._items: list[int] = [0] * capacity
        self._capacity = capacity
        self._front = -1
        self._rear = 0

    def is_full(self) -> bool:
        """Return whether no more elements fit."""
        return (
            self._front == 0 and self._rear == self._capacity - 1
        ) or self._front == self._rear + 1

    def is_empty(self) -> bool:
        """Return whether the deque holds no elements."""
        return self._front == -1

    def insert_front(self, value: int) -> None:
        """Add a value at the front."""
        if self.is_full():
            raise OverflowError("deque overflow")
        if self._front == -1:
            self._front = self._rear = 0
        elif self._front == 0:
            self._front = self._capacity - 1
        else:
            self._front -= 1
        self._items[self._front] = value

    def insert_rear(self, value: int) -> None:
        """Add a value at the rear."""
        if self.is_full():
            raise OverflowError("deque overflow")
        if self._front == -1:
            self._front = self._rear = 0
        elif self._rear == self._capacity - 1:
            self._rear = 0
        else:
            self._rear += 1
        self._items[self._rear] = value

    def delete_front(self) -> int:
        """Remove and return the front value."""
        if self.is_empty():
            raise IndexError("deque underflow")
        value = self._items[self._front]
        if self._front == self._rear:
            self._front = self._rear = -1
        elif self._front == self._capacity - 1:
            self._front = 0
        else:
            self._front += 1
        return value

    def delete_rear(self) -> int:
        """Remove and return the rear value."""
        if self.is_empty():
            raise IndexError("deque underflow")
        value = self._items[self._rear]
        if self._front == self._rear:
            self._front = self._rear = -1
        elif self._rear == 0:
            self._rear = self._capacity - 1
        else:
            self._rear -= 1
        return value

    def front(self) -> int:
        """Return the front value without removing it."""
        if self.is_empty():
            raise IndexError("deque underflow")
        return self._items[self._front]

    def rear(self) -> int:
        """Return the rear value without removing it."""
        if self.is_empty() or self._rear < 0:
            raise IndexError("deque underflow")
        return self._items[self._rear]

    def __iter__(self) -> Iterator[int]:
        if self.is_empty():
            return
        if self._rear >= self._front:
            yield from self._items[self._front : self._rear + 1]
        else:
            yield from self._items[self._front :]
            yield from self._items[: self._rear + 1]

    def __len__(self) -> int:
        if self.is_empty():
            return 0
        if self._rear >= self._front:
            return self._rear - self._front + 1
        return self._capacity - self._front + self._rear + 1

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self._capacity})"