"""Load and save tables from files.

Tables live in memory, the functions in this package
move their content from and to files:

* Delimited text files (CSV) with a header row, through :mod:`pyarrow.csv`.
* Structured records files (JSON), containing a list of objects.

Each format can be read and written synchronously::

    table = read_delimited("users.csv")
    write_records(table, "users.json")

or from async code, in which case the file is accessed in
a worker thread to avoid blocking the event loop::

    table = await from_delimited_text("users.csv")
    await to_structured_records(table, "users.json")

Any error reading, writing or decoding the files is
propagated unchanged to the caller.
"""

from .aio import (
    from_delimited_text,
    from_structured_records,
    to_delimited_text,
    to_structured_records,
)
from .codecs import read_delimited, read_records, write_delimited, write_records

__all__ = (
    "read_delimited",
    "write_delimited",
    "read_records",
    "write_records",
    "from_delimited_text",
    "to_delimited_text",
    "from_structured_records",
    "to_structured_records",
)
