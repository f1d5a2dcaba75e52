"""In-place quicksort over linked list nodes."""

from __future__ import annotations

from typing import Optional

from hashbuckets.bucket_table import BucketTable
from hashbuckets.linked_list import LinkedList, Node


def _swap(a: Node, b: Node) -> None:
    a.value, b.value = b.value, a.value


def partition(start: Node, end: Node) -> Node:
    """Partition the nodes ``start .. end`` around ``end``'s value.

    Values are swapped between nodes; the node that ends up holding the
    pivot value is returned.
    """
    pivot = end.value
    slot = start.prev
    current = start
    while current is not end:
        assert current is not None
        if current.value < pivot:
            slot = start if slot is None else slot.next
            assert slot is not None
            _swap(slot, current)
        current = current.next
    slot = start if slot is None else slot.next
    assert slot is not None
    _swap(slot, end)
    return slot


def quicksort(start: Optional[Node], end: Optional[Node]) -> None:
    """Sort the values held by the nodes ``start .. end`` in place."""
    if end is not None and start is not end and start is not end.next:
        assert start is not None
        pivot = partition(start, end)
        quicksort(start, pivot.prev)
        quicksort(pivot.next, end)


def sort_list(linked_list: LinkedList) -> None:
    quicksort(linked_list.head, linked_list.tail)


def sort_buckets(table: BucketTable) -> None:
    for bucket in table:
        sort_list(bucket.items)