"""Command line interface for describing the content of a file.

The file is loaded in a :class:`rowframe.table.Table` by the
:mod:`rowframe.io` codecs and the summary is printed to the
console in a tabular format using the :mod:`rowframe.utils.tabulate` module.
"""

import argparse
import logging
import os
from typing import Any

import pyarrow as pa

from rowframe.compute.dtypes import NUMBER
from rowframe.errors import TableError
from rowframe.io import read_delimited, read_records
from rowframe.table import Table
from rowframe.utils import tabulate

READERS = {"csv": read_delimited, "json": read_records}


def main(argv: list[str] | None = None) -> int:
    """Parse the command line arguments and describe the file."""
    parser = argparse.ArgumentParser(description="Describe the content of a file.")
    parser.add_argument(
        "filename", type=str, help="The CSV or JSON file to describe."
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=sorted(READERS),
        help="The format of the file, guessed from the extension by default.",
    )
    parser.add_argument(
        "-n", "--head", type=int, default=5, help="How many rows to display."
    )
    parser.add_argument(
        "-s",
        "--sort",
        action="append",
        help="Sort rows by this column. Can be provided multiple times.",
    )
    parser.add_argument(
        "--descending", action="store_true", help="Sort in descending order."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    extension = os.path.splitext(args.filename)[1].lstrip(".").lower()
    file_format = args.format or extension
    if file_format not in READERS:
        parser.error(f"Unable to detect the format of {args.filename}, use --format")

    try:
        table = READERS[file_format](args.filename)
        if args.sort:
            table = table.sort_by(args.sort, ascending=not args.descending)
    except (OSError, ValueError, pa.ArrowInvalid, TableError) as e:
        print(f"Unable to describe {args.filename}, {e}")
        return 1

    print(f"Shape: {table.shape}")
    print(
        tabulate.tabulate(
            ["column", "dtype"],
            [{"column": c, "dtype": t} for c, t in table.dtypes.items()],
        )
    )
    print()
    table.head(args.head)

    numeric_columns = [c for c in table.columns if table.dtypes[c] == NUMBER]
    if numeric_columns:
        print()
        stats = describe(table, numeric_columns)
        print(tabulate.tabulate(["column", "mean", "median", "std"], stats))
    return 0


def describe(table: Table, columns: list[str]) -> list[dict[str, Any]]:
    """Compute the summary statistics of numeric columns."""
    return [
        {
            "column": column,
            "mean": table.mean(column),
            "median": table.median(column),
            "std": table.std(column),
        }
        for column in columns
    ]


if __name__ == "__main__":
    raise SystemExit(main())
