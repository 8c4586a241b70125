"""The two stacks of the puzzle and the operations that move numbers between them."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Optional, TextIO

from pushswap.output import put_endl


@dataclass(eq=False)
class Node:
    """One number on a stack, with the fields the sorting algorithm works on."""

    value: int
    index: int = 0
    cost: int = 0
    lis: int = 0
    lis_prev: Optional["Node"] = field(default=None, repr=False)
    prev: Optional["Node"] = field(default=None, repr=False)
    next: Optional["Node"] = field(default=None, repr=False)


class Stack:
    """A doubly linked stack; iteration runs from the top to the bottom."""

    def __init__(self, values: Iterable[int] | None = None) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values or ():
            self.add_bottom(Node(value))

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __repr__(self) -> str:
        return f"Stack({self.values()!r})"

    def values(self) -> list[int]:
        """The numbers from top to bottom."""
        return [node.value for node in self]

    def add_top(self, node: Node) -> None:
        """Place ``node`` on top of the stack."""
        node.prev = None
        node.next = self.head
        if self.head is None:
            self._tail = node
        else:
            self.head.prev = node
        self.head = node
        self._size += 1

    def add_bottom(self, node: Node) -> None:
        """Place ``node`` at the bottom of the stack."""
        node.next = None
        node.prev = self._tail
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Node | None:
        """The bottom node, or None when the stack is empty."""
        return self._tail

    def clear(self) -> None:
        """Remove every node."""
        node = self.head
        while node is not None:
            following = node.next
            node.prev = None
            node.next = None
            node = following
        self.head = None
        self._tail = None
        self._size = 0

    def _pop_top(self) -> Node | None:
        node = self.head
        if node is None:
            return None
        self.head = node.next
        if self.head is None:
            self._tail = None
        else:
            self.head.prev = None
        node.next = None
        node.prev = None
        self._size -= 1
        return node

    def swap(self) -> None:
        """Exchange the top two nodes; does nothing with fewer than two."""
        if self._size < 2:
            return
        first = self.head
        second = first.next
        first.next = second.next
        if second.next is None:
            self._tail = first
        else:
            second.next.prev = first
        first.prev = second
        second.next = first
        second.prev = None
        self.head = second

    def rotate(self) -> None:
        """Move the top node to the bottom; does nothing with fewer than two."""
        if self._size < 2:
            return
        first = self.head
        self.head = first.next
        self.head.prev = None
        first.next = None
        first.prev = self._tail
        self._tail.next = first
        self._tail = first

    def reverse_rotate(self) -> None:
        """Move the bottom node to the top; does nothing with fewer than two."""
        if self._size < 2:
            return
        bottom = self._tail
        self._tail = bottom.prev
        self._tail.next = None
        bottom.prev = None
        bottom.next = self.head
        self.head.prev = bottom
        self.head = bottom

    def push_from(self, other: "Stack") -> Node | None:
        """Move the top node of ``other`` onto this stack and return it.

        Does nothing and returns None when ``other`` is empty.
        """
        node = other._pop_top()
        if node is None:
            return None
        self.add_top(node)
        return node


class Machine:
    """Stacks a and b with the named operations, each printed as it is done."""

    def __init__(self, values: Iterable[int] | None = None, out: TextIO | None = None) -> None:
        self.a = Stack(values)
        self.b = Stack()
        self.out = out

    def _emit(self, name: str) -> None:
        put_endl(name, self.out if self.out is not None else sys.stdout)

    def sa(self) -> None:
        """Swap the top two of a."""
        self.a.swap()
        self._emit("sa")

    def sb(self) -> None:
        """Swap the top two of b."""
        self.b.swap()
        self._emit("sb")

    def ss(self) -> None:
        """Swap the top two of both stacks."""
        self.a.swap()
        self.b.swap()
        self._emit("ss")

    def ra(self) -> None:
        """Rotate a upwards."""
        self.a.rotate()
        self._emit("ra")

    def rb(self) -> None:
        """Rotate b upwards."""
        self.b.rotate()
        self._emit("rb")

    def rr(self) -> None:
        """Rotate both stacks upwards."""
        self.a.rotate()
        self.b.rotate()
        self._emit("rr")

    def rra(self) -> None:
        """Rotate a downwards."""
        self.a.reverse_rotate()
        self._emit("rra")

    def rrb(self) -> None:
        """Rotate b downwards."""
        self.b.reverse_rotate()
        self._emit("rrb")

    def rrr(self) -> None:
        """Rotate both stacks downwards."""
        self.a.reverse_rotate()
        self.b.reverse_rotate()
        self._emit("rrr")

    def pa(self) -> None:
        """Move the top of b onto a."""
        self.a.push_from(self.b)
        self._emit("pa")

    def pb(self) -> None:
        """Move the top of a onto b."""
        self.b.push_from(self.a)
        self._emit("pb")