import random

import pytest

from hashbuckets.bucket_table import BucketTable
from hashbuckets.linked_list import LinkedList
from hashbuckets.sorting import partition, quicksort, sort_buckets, sort_list


@pytest.mark.parametrize(
    "values",
    [
        [],
        ["a"],
        ["b", "a"],
        ["c", "a", "b"],
        ["a", "b", "c", "d"],
        ["d", "c", "b", "a"],
        ["x", "x", "a", "x"],
    ],
)
def test_sort_list(values):
    lst = LinkedList(values)
    sort_list(lst)
    assert list(lst) == sorted(values)
    assert list(reversed(lst)) == sorted(values, reverse=True)


def test_sort_random_lists():
    rng = random.Random(1234)
    for _ in range(50):
        values = ["".join(rng.choice("abcde") for _ in range(3)) for _ in range(rng.randint(0, 30))]
        lst = LinkedList(values)
        sort_list(lst)
        assert list(lst) == sorted(values)


def test_partition_invariant():
    lst = LinkedList(["m", "z", "a", "q", "b", "k"])
    pivot = partition(lst.head, lst.tail)
    values = list(lst)
    index = lst.position(pivot) - 1
    assert pivot.value == "k"
    assert all(v < pivot.value for v in values[:index])
    assert all(v >= pivot.value for v in values[index + 1:])


def test_quicksort_sub_range_leaves_rest_alone():
    lst = LinkedList(["z", "c", "b", "a", "y"])
    nodes = list(lst.nodes())
    quicksort(nodes[1], nodes[3])
    assert list(lst) == ["z", "a", "b", "c", "y"]


def test_sort_buckets():
    table = BucketTable()
    names = ["Maria", "Joao", "Ana", "Pedro", "Lucas", "Bia", "Caio", "Rita"] * 3
    for name in reversed(names):
        table.add(name)
    sort_buckets(table)
    for bucket in table:
        assert list(bucket.items) == sorted(bucket.items)
    assert sorted(v for b in table for v in b.items) == sorted(names)