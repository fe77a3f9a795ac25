"""Tables of named columns and ordered rows.

A table is a tool designed to handle and manipulate structured data,
in the form of rows and columns, entirely in memory.
It allows users to load data from CSV or JSON files,
explore it, apply transformations, and analyze it.

Tables provide an easy way to perform operations such as
selecting columns, filtering and sorting rows, grouping them
and computing aggregations and statistics.

Each row of a table is a record, a dictionary mapping
the column names to the values of the row. Values can be of any type,
the type of each column is detected by looking at its values
and is available in :attr:`Table.dtypes`.
"""

from .table import Record, Table

__all__ = ("Record", "Table")
