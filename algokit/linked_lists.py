"""Singly linked lists and in-place rearrangements of them."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list; nodes compare by identity."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[ListNode]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node
            node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Link ``values`` into a list and return its head, or ``None`` if empty."""
    head: Optional[ListNode] = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def list_values(head: Optional[ListNode]) -> list[int]:
    """Return the values of the list starting at ``head``, in order."""
    return [] if head is None else [node.val for node in head]


def odd_even_list(head: Optional[ListNode]) -> Optional[ListNode]:
    """Relink the list so nodes at odd positions precede those at even ones.

    Positions count from 1 and the relative order inside each half is kept.
    The nodes are reused; the original head is returned.
    """
    if head is None or head.next is None:
        return head
    odd = head
    even_head = even = head.next
    while even is not None and even.next is not None:
        odd.next = even.next
        odd = odd.next
        even.next = odd.next
        even = even.next
    odd.next = even_head
    return head


def delete_middle(head: Optional[ListNode]) -> Optional[ListNode]:
    """Unlink the node at index ``len // 2`` and return the head.

    A list of fewer than two nodes becomes empty, so ``None`` is returned.
    """
    if head is None or head.next is None:
        return None
    prev = head
    slow = head.next
    fast = head.next.next
    while fast is not None and fast.next is not None:
        prev = slow
        slow = slow.next  # type: ignore[assignment]
        fast = fast.next.next
    prev.next = slow.next
    return head