"""Async variants of the file codecs.

Each function runs the corresponding codec in a worker thread
and completes once, with the loaded table or with the error
raised by the codec.

The table being saved is read from the worker thread without any
locking, modifying it while the save is in progress has undefined results.
"""

import asyncio

from ..table import Table
from .codecs import read_delimited, read_records, write_delimited, write_records


async def from_delimited_text(filename: str) -> Table:
    """Load a table from a CSV file with a header row."""
    return await asyncio.to_thread(read_delimited, filename)


async def to_delimited_text(table: Table, filename: str) -> None:
    """Save a table to a CSV file with a header row."""
    await asyncio.to_thread(write_delimited, table, filename)


async def from_structured_records(filename: str) -> Table:
    """Load a table from a JSON file containing a list of objects."""
    return await asyncio.to_thread(read_records, filename)


async def to_structured_records(table: Table, filename: str) -> None:
    """Save the records of a table to a JSON file."""
    await asyncio.to_thread(write_records, table, filename)
