"""Convert tables from and to row oriented file formats.

Delimited text files are read and written through :mod:`pyarrow.csv`,
which takes care of detecting the type of each column when reading.
This means that numbers and booleans written to a CSV file come
back as numbers and booleans when the file is read again.

As pyarrow requires all the values of a column to be of the same type,
columns with values of different types or values that are not
primitive types are written as text.

Structured records files are JSON files containing
a list of objects, one for each row of the table.
"""

import json
import logging
from typing import Any

import pyarrow as pa
import pyarrow.csv

from ..compute.dtypes import BOOLEAN, NUMBER, STRING
from ..table import Table

logger = logging.getLogger(__name__)


def read_delimited(filename: str, table_class: type[Table] = Table) -> Table:
    """Read a CSV file with a header row into a table.

    :param filename: The path of the local CSV file.
    :param table_class: The class of the table to create.
    """
    logger.debug("Reading delimited text from %s", filename)
    data = pa.csv.read_csv(filename)
    return table_class(data.to_pylist(), data.column_names)


def write_delimited(table: Table, filename: str) -> None:
    """Write a table to a CSV file with a header row.

    :param table: The table to write.
    :param filename: The path of the local CSV file, it will be overwritten.
    """
    logger.debug("Writing %s delimited text rows to %s", len(table), filename)
    arrays = [
        column_array(table.get(column), table.dtypes[column])
        for column in table.columns
    ]
    pa.csv.write_csv(pa.table(arrays, names=table.columns), filename)


def column_array(values: list[Any], dtype: str) -> pa.Array:
    """Convert the values of a column to a :class:`pyarrow.Array`.

    Columns of primitive values keep their type,
    any other column is converted to text.

    >>> column_array([1, 2.5], "number").type
    DataType(double)
    >>> column_array([1, "a", None], "mixed").to_pylist()
    ['1', 'a', None]
    """
    if dtype in (NUMBER, STRING, BOOLEAN):
        return pa.array(values)
    return pa.array([_as_text(value) for value in values], type=pa.string())


def _as_text(value: Any) -> str | None:
    if value is None:
        return None
    elif isinstance(value, (dict, list)):
        return json.dumps(value)
    return str(value)


def read_records(filename: str, table_class: type[Table] = Table) -> Table:
    """Read a JSON file containing a list of objects into a table.

    The columns of the table are the keys of the first object.

    :param filename: The path of the local JSON file.
    :param table_class: The class of the table to create.
    """
    logger.debug("Reading structured records from %s", filename)
    with open(filename, encoding="utf-8") as f:
        records = json.load(f)
    return table_class(records)


def write_records(table: Table, filename: str) -> None:
    """Write the records of a table to a JSON file as a list of objects.

    :param table: The table to write.
    :param filename: The path of the local JSON file, it will be overwritten.
                     The file is left untouched when the records can't be serialized.
    """
    logger.debug("Writing %s structured records to %s", len(table), filename)
    text = json.dumps(table.get_dataframe(), indent=2)
    with open(filename, "w", encoding="utf-8") as f:
        f.write(text)
