"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False)
class Node:
    """One cell of a linked list."""

    content: Any
    next: Node | None = None


class LinkedList:
    """A singly linked list that keeps its contents in insertion order."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert content before the first element and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append content after the last element and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def last(self) -> Node | None:
        """Return the last node, or None when the list is empty."""
        return self._tail

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every element, passing each content to delete first if given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None
        self._tail = None
        self._size = 0

    def iterate(self, f: Callable[[Any], Any]) -> None:
        """Call f on each content, in order."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding f applied to each content."""
        return LinkedList(f(content) for content in self)