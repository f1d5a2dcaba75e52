"""A doubly linked list of strings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


class ListError(Exception):
    """Base class for list errors."""


class EmptyListError(ListError):
    """Raised when an operation needs a non-empty list."""

    def __init__(self, message: str = "list is empty") -> None:
        super().__init__(message)


class InvalidPivotError(ListError):
    """Raised when no pivot is given for a non-empty list."""

    def __init__(
        self, message: str = "the pivot may only be None when inserting the first element"
    ) -> None:
        super().__init__(message)


class ElementNotFoundError(ListError, LookupError):
    """Raised when a value or node is not in the list."""

    def __init__(self, message: str = "element not found") -> None:
        super().__init__(message)


@dataclass(eq=False)
class Node:
    """A list node holding one value."""

    value: str
    prev: Optional[Node] = field(default=None, repr=False)
    next: Optional[Node] = field(default=None, repr=False)


class LinkedList:
    """Doubly linked list with insertion after a pivot node."""

    def __init__(self, values: Iterable[str] = ()) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def is_empty(self) -> bool:
        return self._size == 0

    def insert_after(self, pivot: Optional[Node], value: str) -> Node:
        """Insert ``value`` after ``pivot`` and return the new node.

        ``pivot`` must be None exactly when the list is empty.
        """
        if pivot is None and not self.is_empty():
            raise InvalidPivotError()
        node = Node(value)
        if self.is_empty():
            self.head = node
            self.tail = node
        else:
            assert pivot is not None
            node.next = pivot.next
            node.prev = pivot
            if pivot.next is None:
                self.tail = node
            else:
                pivot.next.prev = node
            pivot.next = node
        self._size += 1
        return node

    def append(self, value: str) -> Node:
        return self.insert_after(self.tail, value)

    def remove(self, node: Optional[Node]) -> str:
        """Unlink ``node`` and return its value."""
        if self.is_empty():
            raise EmptyListError()
        if node is None:
            raise ElementNotFoundError()
        if node is self.head:
            self.head = node.next
            if self.head is None:
                self.tail = None
            else:
                self.head.prev = None
        else:
            assert node.prev is not None
            node.prev.next = node.next
            if node.next is None:
                self.tail = node.prev
            else:
                node.next.prev = node.prev
        self._size -= 1
        node.prev = None
        node.next = None
        return node.value

    def nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def __iter__(self) -> Iterator[str]:
        return (node.value for node in self.nodes())

    def __reversed__(self) -> Iterator[str]:
        node = self.tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: object) -> bool:
        return any(item == value for item in self)

    def find(self, value: str) -> Node:
        """Return the first node holding ``value``."""
        for node in self.nodes():
            if node.value == value:
                return node
        raise ElementNotFoundError()

    def position(self, node: Node) -> int:
        """Return the 1-based position of ``node``."""
        for index, candidate in enumerate(self.nodes(), start=1):
            if candidate is node:
                return index
        raise ElementNotFoundError()