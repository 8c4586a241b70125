"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

Deleter = Optional[Callable[[Any], Any]]


@dataclass(eq=False)
class ListNode:
    """One link: a piece of content and the node after it."""

    content: Any
    next: Optional["ListNode"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, contents: Iterable[Any] | None = None) -> None:
        self.head: ListNode | None = None
        self._tail: ListNode | None = None
        self._size = 0
        for content in contents or ():
            self.add_back(content)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, content: Any) -> ListNode:
        """Insert ``content`` before the first node and return its node."""
        node = ListNode(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def add_back(self, content: Any) -> ListNode:
        """Append ``content`` after the last node and return its node."""
        node = ListNode(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Any:
        """Content of the last node, or None when the list is empty."""
        return None if self._tail is None else self._tail.content

    def remove_front(self, delete: Deleter = None) -> Any:
        """Detach the first node, pass its content to ``delete`` and return it."""
        if self.head is None:
            raise IndexError("remove from an empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every node in order, passing each content to ``delete``."""
        while self.head is not None:
            self.remove_front(delete)

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content in order."""
        for content in self:
            func(content)

    def map(
        self, func: Callable[[Any], Any], delete: Deleter = None
    ) -> "LinkedList":
        """A new list of ``func(content)`` for every content.

        If ``func`` fails part way, the contents already made are passed to
        ``delete`` before the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.add_back(func(content))
        except Exception:
            result.clear(delete)
            raise
        return result