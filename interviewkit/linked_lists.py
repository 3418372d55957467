"""Singly linked lists: digit addition, stable partition and random-pointer cloning."""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import zip_longest
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: Optional["ListNode"] = field(default=None, repr=False)


@dataclass(eq=False)
class RandomListNode:
    """A list node that also carries an arbitrary ``random`` link."""

    data: int
    next: Optional["RandomListNode"] = field(default=None, repr=False)
    random: Optional["RandomListNode"] = field(default=None, repr=False)


def _walk(head):
    node = head
    while node is not None:
        yield node
        node = node.next


def from_values(values: Iterable[int]) -> Optional[ListNode]:
    """Build a linked list holding ``values`` in order; empty input gives None."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head


def to_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return [node.val for node in _walk(head)]


def add_two_numbers(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Add two numbers stored most-significant digit first; return a new list."""
    first = to_values(l1)
    second = to_values(l2)
    digits: list[int] = []
    carry = 0
    for a, b in zip_longest(reversed(first), reversed(second), fillvalue=0):
        carry += a + b
        digits.append(carry % 10)
        carry //= 10
    while carry > 0:
        digits.append(carry % 10)
        carry //= 10
    return from_values(reversed(digits))


def partition(head: Optional[ListNode], x: int) -> Optional[ListNode]:
    """Relink nodes so those below ``x`` come first, keeping relative order."""
    low_head = low_tail = None
    high_head = high_tail = None
    node = head
    while node is not None:
        following = node.next
        if node.val < x:
            if low_tail is None:
                low_head = node
            else:
                low_tail.next = node
            low_tail = node
        else:
            if high_tail is None:
                high_head = node
            else:
                high_tail.next = node
            high_tail = node
        node = following
    if high_tail is not None:
        high_tail.next = None
    if low_tail is None:
        return high_head
    low_tail.next = high_head
    return low_head


def clone_random_list(head: Optional[RandomListNode]) -> Optional[RandomListNode]:
    """Deep-copy a list whose nodes have ``next`` and ``random`` links."""
    copies = {node: RandomListNode(node.data) for node in _walk(head)}
    for original, copy in copies.items():
        copy.next = copies.get(original.next)
        copy.random = copies.get(original.random)
    return copies.get(head)


def iter_values(head: Optional[ListNode]) -> Iterator[int]:
    """Yield the values of a linked list lazily."""
    for node in _walk(head):
        yield node.val