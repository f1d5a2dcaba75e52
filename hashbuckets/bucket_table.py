"""A hash table made of a list of buckets, each a linked list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional

from hashbuckets.hashing import DEFAULT_MODULUS, compute_hash
from hashbuckets.linked_list import EmptyListError, LinkedList


@dataclass
class Bucket:
    """One hash value and the values that hash to it."""

    hash: int
    items: LinkedList = field(default_factory=LinkedList)


class BucketTable:
    """Buckets numbered ``0 .. size - 1``, filled by ``compute_hash``."""

    def __init__(self, size: int = DEFAULT_MODULUS) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._buckets: list[Bucket] = [Bucket(h) for h in range(size)]

    def is_empty(self) -> bool:
        return not self._buckets

    def add(self, value: str) -> None:
        """Append ``value`` to the bucket for its hash."""
        self.bucket(compute_hash(value)).items.append(value)

    def bucket(self, hash_value: int) -> Bucket:
        for bucket in self._buckets:
            if bucket.hash == hash_value:
                return bucket
        raise KeyError(hash_value)

    def hash_of(self, value: str) -> Optional[int]:
        """Return the hash of the bucket holding ``value``, or None."""
        for bucket in self._buckets:
            if value in bucket.items:
                return bucket.hash
        return None

    def bucket_size(self, hash_value: int) -> int:
        return len(self.bucket(hash_value).items)

    def clear(self) -> None:
        """Remove every value and then every bucket."""
        if self.is_empty():
            raise EmptyListError()
        for bucket in self._buckets:
            for node in bucket.items.nodes():
                bucket.items.remove(node)
        self._buckets.clear()

    def __iter__(self) -> Iterator[Bucket]:
        return iter(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)