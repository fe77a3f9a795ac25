"""rowframe

In-memory tables of named columns and ordered row records.

The package is constituted by multiple components,
each isolated within its own package:

* The Table, in charge of holding the data and performing analyses on it.
* The Compute functions, implementing sorting, grouping,
  aggregations and statistics on lists of records.
* The IO functions, loading and saving tables from CSV and JSON files.

>>> from rowframe import Table
>>> table = Table([[1, "John", 25], [2, "Jane", 30], [3, "Sam", 28]],
...               ["ID", "Name", "Age"])
>>> table.sort_by("Age", ascending=False).get("Name")
['Jane', 'Sam', 'John']
>>> table.dtypes
{'ID': 'number', 'Name': 'string', 'Age': 'number'}
"""

import logging

from . import compute, errors
from .errors import (
    ColumnNotFoundError,
    IndexOutOfRangeError,
    InvalidAggregationFunctionError,
    InvalidInputFormatError,
    TableError,
)
from .table import Table

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    "compute",
    "errors",
    "Table",
    "TableError",
    "ColumnNotFoundError",
    "IndexOutOfRangeError",
    "InvalidAggregationFunctionError",
    "InvalidInputFormatError",
)
