"""A singly linked list of arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")
U = TypeVar("U")

Deleter = Optional[Callable[[Any], Any]]


@dataclass
class _Node(Generic[T]):
    value: T
    next: Optional["_Node[T]"] = None


class LinkedList(Generic[T]):
    """Singly linked list supporting insertion at both ends."""

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0
        for value in values or ():
            self.push_back(value)

    def push_front(self, value: T) -> None:
        """Insert ``value`` before the first element."""
        node = _Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: T) -> None:
        """Append ``value`` after the last element."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def pop_front(self, delete: Deleter = None) -> T:
        """Remove the first element, pass it to ``delete`` if given, and return it."""
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        if delete is not None:
            delete(node.value)
        return node.value

    def last(self) -> Optional[T]:
        """The last element, or None when the list is empty."""
        return None if self._tail is None else self._tail.value

    def clear(self, delete: Deleter = None) -> None:
        """Remove every element, passing each to ``delete`` in order if given."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            if delete is not None:
                delete(node.value)
            node = node.next

    def for_each(self, f: Callable[[T], Any]) -> None:
        """Call ``f`` on every element in order."""
        for value in self:
            f(value)

    def map(self, f: Callable[[T], Optional[U]], delete: Deleter = None) -> "LinkedList[U]":
        """New list of ``f(value)`` for every element.

        If ``f`` returns None for any element, the values built so far are
        passed to ``delete`` and ValueError is raised.
        """
        result: LinkedList[U] = LinkedList()
        for value in self:
            mapped = f(value)
            if mapped is None:
                result.clear(delete)
                raise ValueError("mapping function produced no value")
            result.push_back(mapped)
        return result

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"