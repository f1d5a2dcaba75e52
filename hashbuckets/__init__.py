"""Hash buckets of doubly linked lists, sorted with quicksort, with a report writer."""

__version__ = "0.1.0"