"""Queues: a circular buffer, a fixed-slot linear buffer and a linked queue."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueFullError(OverflowError):
    """Raised when enqueuing onto a queue that has no free slot."""


class QueueEmptyError(IndexError):
    """Raised when dequeuing from an empty queue."""


def _check_capacity(capacity: int) -> None:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")


class CircularQueue(Generic[T]):
    """A bounded FIFO queue whose slots wrap around and are reused."""

    def __init__(self, capacity: int = 5) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[T | None] = [None] * capacity
        self._front = 0
        self._size = 0

    def enqueue(self, value: T) -> None:
        """Add value at the rear; raise QueueFullError when every slot is taken."""
        if self._size == self.capacity:
            raise QueueFullError("queue is full")
        rear = (self._front + self._size) % self.capacity
        self._slots[rear] = value
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the value at the front."""
        if self._size == 0:
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._size -= 1
        self._front = 0 if self._size == 0 else (self._front + 1) % self.capacity
        return value  # type: ignore[return-value]

    def __iter__(self) -> Iterator[T]:
        """Yield values from front to rear."""
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % self.capacity]  # type: ignore[misc]

    def __len__(self) -> int:
        return self._size


class LinearQueue(Generic[T]):
    """A bounded FIFO queue over a fixed row of slots.

    Slots freed at the front are not reused: once the rear reaches the last
    slot the queue stays full until it has been emptied completely.
    """

    def __init__(self, capacity: int = 5) -> None:
        _check_capacity(capacity)
        self.capacity = capacity
        self._slots: list[T | None] = [None] * capacity
        self._front = -1
        self._rear = -1

    def enqueue(self, value: T) -> None:
        """Add value at the rear; raise QueueFullError when the rear is at the end."""
        if self._rear == self.capacity - 1:
            raise QueueFullError("queue is full")
        if self._front == -1:
            self._front = 0
        self._rear += 1
        self._slots[self._rear] = value

    def dequeue(self) -> T:
        """Remove and return the value at the front."""
        if self._front == -1:
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        if self._front == self._rear:
            self._front = self._rear = -1
        else:
            self._front += 1
        return value  # type: ignore[return-value]

    def __iter__(self) -> Iterator[T]:
        """Yield values from front to rear."""
        if self._front == -1:
            return
        for value in self._slots[self._front : self._rear + 1]:
            yield value  # type: ignore[misc]

    def __len__(self) -> int:
        return 0 if self._front == -1 else self._rear - self._front + 1


@dataclass(slots=True)
class _Node(Generic[T]):
    value: T
    next: _Node[T] | None = None


class LinkedQueue(Generic[T]):
    """An unbounded FIFO queue built from singly linked nodes."""

    def __init__(self) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._size = 0

    def enqueue(self, value: T) -> None:
        """Add value at the rear."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def dequeue(self) -> T:
        """Remove and return the value at the front."""
        if self._head is None:
            raise QueueEmptyError("queue is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[T]:
        """Yield values from front to rear."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size