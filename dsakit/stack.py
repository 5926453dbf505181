"""Stacks: an unbounded linked stack and a bounded stack of student records."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that has reached its capacity."""


class StackEmptyError(IndexError):
    """Raised when popping or peeking an empty stack."""


@dataclass(slots=True)
class _Node(Generic[T]):
    value: T
    below: _Node[T] | None


class LinkedStack(Generic[T]):
    """An unbounded LIFO stack built from singly linked nodes."""

    def __init__(self) -> None:
        self._top: _Node[T] | None = None
        self._size = 0

    def push(self, value: T) -> None:
        """Place value on top of the stack."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> T:
        """Remove and return the top value."""
        if self._top is None:
            raise StackEmptyError("pop from empty stack")
        node = self._top
        self._top = node.below
        self._size -= 1
        return node.value

    def peek(self) -> T:
        """Return the top value without removing it."""
        if self._top is None:
            raise StackEmptyError("peek at empty stack")
        return self._top.value

    def __iter__(self) -> Iterator[T]:
        """Yield values from top to bottom."""
        node = self._top
        while node is not None:
            yield node.value
            node = node.below

    def __len__(self) -> int:
        return self._size


@dataclass
class Student:
    """A student record with marks in two subjects."""

    roll: int
    name: str
    eng: int
    math: int

    def total(self) -> int:
        """Return the sum of the English and maths marks."""
        return self.eng + self.math


class StudentStack:
    """A bounded stack of Student records."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._items: list[Student] = []

    def push(self, student: Student) -> None:
        """Place student on top; raise StackFullError when at capacity."""
        if len(self._items) == self.capacity:
            raise StackFullError("stack is full")
        self._items.append(student)

    def pop(self) -> Student:
        """Remove and return the top student."""
        if not self._items:
            raise StackEmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Student:
        """Return the top student without removing it."""
        if not self._items:
            raise StackEmptyError("stack underflow")
        return self._items[-1]

    def sort_by_marks(self) -> None:
        """Reorder the stack so total marks ascend from bottom to top."""
        self._items.sort(key=Student.total)

    def __iter__(self) -> Iterator[Student]:
        """Yield students from top to bottom."""
        return reversed(self._items)

    def __len__(self) -> int:
        return len(self._items)


def reverse_string(text: str) -> str:
    """Return text reversed by pushing its characters onto a stack."""
    stack: LinkedStack[Any] = LinkedStack()
    for char in text:
        stack.push(char)
    return "".join(stack)