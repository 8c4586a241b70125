"""Sorting stack a: the small cases directly, larger ones by their longest increasing run."""

from __future__ import annotations

import sys
from typing import TextIO

from pushswap.stack import Machine, Node, Stack

_MIN_KEPT = 3


def is_sorted(stack: Stack) -> bool:
    """True if the values never decrease from top to bottom; an empty stack is sorted."""
    values = stack.values()
    return all(upper <= lower for upper, lower in zip(values, values[1:]))


def sort_three(machine: Machine) -> None:
    """Sort a stack a of exactly three numbers in at most two operations."""
    if len(machine.a) != 3:
        raise ValueError(f"sort_three needs exactly 3 numbers, got {len(machine.a)}")
    first, second, third = machine.a.values()
    if first < third < second:
        machine.rra()
        machine.sa()
    elif second < first < third:
        machine.sa()
    elif third < first < second:
        machine.rra()
    elif second < third < first:
        machine.ra()
    elif third < second < first:
        machine.ra()
        machine.sa()


def binary_search_lis(tail_values: list[int], left: int, right: int, value: int) -> int:
    """Smallest index in ``left..right`` whose tail value is at least ``value``.

    Returns ``right + 1`` when there is none. ``tail_values`` must be increasing
    over that range.
    """
    result = right + 1
    while left <= right:
        mid = (left + right) // 2
        if tail_values[mid] >= value:
            result = mid
            right = mid - 1
        else:
            left = mid + 1
    return result


def mark_lis(tail: Node, lis_size: int) -> None:
    """Mark the run ending at ``tail`` through ``lis_prev`` links.

    If that run is shorter than three, further unmarked nodes above ``tail``
    are marked until three are marked or the top is reached.
    """
    node: Node | None = tail
    while node is not None:
        node.lis = 1
        node = node.lis_prev
    node = tail
    while lis_size < _MIN_KEPT and node is not None:
        if node.lis == 0:
            node.lis = 1
            lis_size += 1
        node = node.prev


def find_lis(stack: Stack) -> int:
    """Mark a longest strictly increasing subsequence of ``stack`` and return its length."""
    if len(stack) == 0:
        return 0
    tails: list[Node | None] = [None] * (len(stack) + 1)
    tail_values: list[int] = [0] * (len(stack) + 1)
    lis_size = 0
    for node in stack:
        length = binary_search_lis(tail_values, 1, lis_size, node.value)
        if length > 1:
            node.lis_prev = tails[length - 1]
        tails[length] = node
        tail_values[length] = node.value
        lis_size = max(lis_size, length)
    mark_lis(tails[lis_size], lis_size)
    return lis_size


def _stream(machine: Machine, out: TextIO | None) -> TextIO:
    if out is not None:
        return out
    return machine.out if machine.out is not None else sys.stdout


def sort_big(machine: Machine, out: TextIO | None = None) -> None:
    """Find and report the increasing run that stays on a while the rest is sorted.

    Writes each kept value from top to bottom, then the run's length.
    """
    stream = _stream(machine, out)
    lis_size = find_lis(machine.a)
    machine.b.clear()
    for node in machine.a:
        if node.lis != 0:
            stream.write(f"{node.value}\n")
    stream.write(f"size: {lis_size}\n")


def sort(machine: Machine, out: TextIO | None = None) -> None:
    """Sort stack a, choosing the method by its size; a sorted stack is left alone."""
    size = len(machine.a)
    if size <= 1 or is_sorted(machine.a):
        return
    if size == 2:
        machine.ra()
    elif size == 3:
        sort_three(machine)
    else:
        sort_big(machine, out)