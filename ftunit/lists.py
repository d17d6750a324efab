"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Node | None = None
        for item in items:
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self._head)
        self._head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the back and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self._head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """Return the last node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def pop_front(self, delete: Callable[[Any], None] | None = None) -> Any:
        """Remove the first node, pass its content to ``delete`` and return it.

        Raises IndexError on an empty list.
        """
        if self._head is None:
            raise IndexError("pop from an empty list")
        node = self._head
        self._head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def for_each(self, f: Callable[[Any], None]) -> None:
        """Call ``f`` on every content, front to back."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Callable[[Any], None] | None = None,
    ) -> "LinkedList":
        """Return a new list holding ``f(content)`` for every content.

        If ``f`` raises, the contents built so far are handed to ``delete``
        before the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.push_back(f(content))
        except Exception:
            result.clear(delete)
            raise
        return result

    def clear(self, delete: Callable[[Any], None] | None = None) -> None:
        """Remove every node, front to back, passing each content to ``delete``."""
        while self._head is not None:
            self.pop_front(delete)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"