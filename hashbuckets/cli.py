"""Command that hashes names from a file and writes a bucket report."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from hashbuckets.bucket_table import BucketTable
from hashbuckets.sorting import sort_buckets

DEFAULT_INPUT = "../nomes.txt"
DEFAULT_OUTPUT = "ArqGrav.txt"


def read_names(table: BucketTable, path: str | Path) -> None:
    """Add each non-empty line of ``path`` to ``table``."""
    with open(path, encoding="utf-8") as handle:
        for line in handle:
            name = line.rstrip("\n")
            if name:
                table.add(name)


def format_report(table: BucketTable) -> str:
    """Return the report listing bucket sizes and bucket contents."""
    parts = [
        "***PROJETO FINAL DE ESTRUTURA DE DADOS I***",
        "\n\nQUANTIDADE DE ELEMENTOS POR HASH:",
    ]
    parts.extend(f"\n\tHash {b.hash}: {table.bucket_size(b.hash)}" for b in table)
    parts.append("\n\n*******************************************")
    parts.append("\n\nELEMENTOS EM CADA HASH:")
    for bucket in table:
        parts.append(f"\n\nHASH {bucket.hash}:")
        parts.extend(f"\n\t{value}" for value in bucket.items)
    return "".join(parts)


def write_report(table: BucketTable, path: str | Path) -> None:
    Path(path).write_text(format_report(table), encoding="utf-8")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="hashbuckets",
        description="Distribute names into hash buckets and write a sorted report.",
    )
    parser.add_argument("--input", default=DEFAULT_INPUT, help="file with one name per line")
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="report file to write")
    args = parser.parse_args(argv)

    table = BucketTable()
    try:
        read_names(table, args.input)
    except OSError as exc:
        print(f"could not open input file: {exc}", file=sys.stderr)
        return 1
    sort_buckets(table)
    try:
        write_report(table, args.output)
    except OSError as exc:
        print(f"could not create output file: {exc}", file=sys.stderr)
        return 1
    table.clear()
    return 0


if __name__ == "__main__":
    sys.exit(main())