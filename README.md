# hashbuckets

`hashbuckets` reads a file of names, places each name into a hash bucket,
sorts every bucket with quicksort and writes a plain-text report showing how
many names landed in each bucket and which names they were.

Each bucket is a doubly linked list of strings. The table holds one bucket
per hash value, numbered `0` to `size - 1` (53 buckets by default).

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

Installing the package provides the `hashbuckets` command:

```
hashbuckets --input names.txt --output report.txt
```

- `--input` is a file with one name per line; empty lines are skipped.
  Default: `../nomes.txt`.
- `--output` is the report file to write. Default: `ArqGrav.txt`.

The command uses a table of 53 buckets, sorts every bucket and writes the
report. If the input file cannot be opened or the output file cannot be
created, it prints a message to standard error and exits with status 1.

The report starts with the heading `***PROJETO FINAL DE ESTRUTURA DE DADOS I***`,
then a section `QUANTIDADE DE ELEMENTOS POR HASH:` with one line
`Hash <n>: <count>` per bucket, and then a section `ELEMENTOS EM CADA HASH:`
listing, under `HASH <n>:`, the names in each bucket in their sorted order.

## Library use

```python
from hashbuckets.bucket_table import BucketTable
from hashbuckets.sorting import sort_buckets
from hashbuckets.cli import format_report

table = BucketTable()
for name in ["Maria", "Ana", "Joao", "Pedro"]:
    table.add(name)

sort_buckets(table)

bucket_number = table.hash_of("Ana")   # None if the name is not in the table
print(table.bucket_size(bucket_number))
print(format_report(table))
```

### Modules

- `hashbuckets.hashing.compute_hash(text, modulus=53)` folds each UTF-8 byte
  of `text` into `hash = (13 * hash + byte) % modulus`. A modulus that is not
  positive raises `ValueError`.
- `hashbuckets.linked_list.LinkedList` is a doubly linked list of strings
  built from `Node` objects (`value`, `prev`, `next`). It offers `append`,
  `insert_after(pivot, value)`, `remove(node)` (returns the removed value),
  `find(value)` (first matching node), `position(node)` (1-based),
  `nodes()`, `is_empty()`, iteration forwards and with `reversed()`, `len()`
  and `in`. Misuse raises `EmptyListError`, `InvalidPivotError` or
  `ElementNotFoundError`, all subclasses of `ListError`.
- `hashbuckets.bucket_table.BucketTable(size=53)` holds `Bucket` objects
  (`hash`, `items`). It offers `add(value)`, `bucket(hash_value)` (raises
  `KeyError` for a missing bucket), `bucket_size(hash_value)`,
  `hash_of(value)`, `is_empty()`, `clear()`, iteration over buckets and
  `len()` (the number of buckets). `clear()` empties every bucket and then
  removes all buckets; on a table with no buckets it raises `EmptyListError`.
- `hashbuckets.sorting` provides `sort_list(linked_list)` and
  `sort_buckets(table)`, plus the underlying `quicksort(start, end)` and
  `partition(start, end)`, which work on nodes and sort by swapping values.
- `hashbuckets.cli` provides `read_names(table, path)`,
  `format_report(table)`, `write_report(table, path)` and `main(argv=None)`.

## Limitations

`BucketTable.add` always hashes with the default modulus of 53, whatever
size the table was created with. A table with fewer than 53 buckets
therefore raises `KeyError` for names whose hash has no bucket, and a
larger table leaves its buckets above 52 empty. Data lives in memory only;
nothing is stored apart from the report file that is written.