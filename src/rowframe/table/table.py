"""The Table object itself."""

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Iterable, Self

from .. import compute
from ..compute.dtypes import DType
from ..errors import (
    ColumnNotFoundError,
    IndexOutOfRangeError,
    InvalidInputFormatError,
)
from ..utils.inspect import get_qualname
from ..utils.tabulate import tabulate

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class Table:
    """Data structure that handles data in rows and columns.

    The Table object keeps in memory an ordered list of
    records, each one being a dictionary mapping
    the column names to the values of the row.

    A table can be built from a list of rows,
    in which case the column names can be provided:

    >>> table = Table([[1, "John", 25], [2, "Jane", 30]], ["ID", "Name", "Age"])
    >>> table.get_row(1)
    {'ID': 2, 'Name': 'Jane', 'Age': 30}

    or from a list of records, in which case the column names
    are taken from the first record:

    >>> table = Table([{"ID": 1, "Age": 25}, {"ID": 2, "Age": 30}])
    >>> table.columns
    ['ID', 'Age']
    >>> table.shape
    '(2, 2)'

    Operations that derive new data, like :meth:`select`, :meth:`filter`,
    :meth:`sort_by` and :meth:`group_by` return a new table and leave the
    original untouched. :meth:`rename_columns` and :meth:`drop_columns`
    instead modify the table in place.
    """

    AUTO_COLUMN_PREFIX = "column"

    def __init__(
        self,
        data: Sequence[Sequence[Any]] | Sequence[Mapping[str, Any]],
        columns: Sequence[str] | None = None,
    ) -> None:
        """
        :param data: A list of rows, each one a list of values,
                     or a list of records, each one a dictionary.
        :param columns: The names of the columns when ``data`` is a list of rows.
                        Ignored if its length doesn't match the rows,
                        in which case columns are named ``column1``, ``column2``, ...
                        Duplicate names raise :class:`ValueError`.
        """
        if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
            raise InvalidInputFormatError(
                "Invalid input data format, expected a list of rows or records, "
                f"got {type(data).__name__}"
            )

        if not data:
            self.columns: list[str] = _unique_columns(list(columns or []))
            self.rows: list[Record] = []
        elif _is_row(data[0]):
            self.columns = self._rows_columns(len(data[0]), columns)
            self.rows = [self._make_record(row) for row in data]
        elif isinstance(data[0], Mapping):
            if not all(isinstance(record, Mapping) for record in data):
                raise InvalidInputFormatError(
                    "Invalid input data format, all records must be mappings"
                )
            self.columns = list(data[0].keys())
            self.rows = data if isinstance(data, list) else list(data)
        else:
            raise InvalidInputFormatError(
                "Invalid input data format, rows must be lists or records, "
                f"got {type(data[0]).__name__}"
            )

        self.dtypes = self._detect_column_types()
        logger.debug("Created table with shape %s", self.shape)

    @classmethod
    def open_csv(cls, filename: str) -> Self:
        """Open a CSV file and create a Table out of its data.

        :param filename: The path to a local CSV file.
        """
        from ..io import read_delimited

        return read_delimited(filename, table_class=cls)

    @classmethod
    def open_json(cls, filename: str) -> Self:
        """Open a JSON file containing a list of records and create a Table out of it.

        :param filename: The path to a local JSON file.
        """
        from ..io import read_records

        return read_records(filename, table_class=cls)

    def to_csv(self, filename: str) -> None:
        """Write the table to a CSV file with a header row."""
        from ..io import write_delimited

        write_delimited(self, filename)

    def to_json(self, filename: str) -> None:
        """Write the records of the table to a JSON file."""
        from ..io import write_records

        write_records(self, filename)

    def _rows_columns(self, width: int, columns: Sequence[str] | None) -> list[str]:
        """The column names for a table built from rows of ``width`` values."""
        if (
            columns is not None
            and not isinstance(columns, str)
            and len(columns) == width
        ):
            return _unique_columns(list(columns))
        return [f"{self.AUTO_COLUMN_PREFIX}{i + 1}" for i in range(width)]

    def _make_record(self, row: Sequence[Any]) -> Record:
        if not _is_row(row):
            raise InvalidInputFormatError(
                "Invalid input data format, rows must be lists, "
                f"got {type(row).__name__}"
            )
        # Rows shorter than the first one have no value for the last columns.
        return {
            column: row[idx] if idx < len(row) else None
            for idx, column in enumerate(self.columns)
        }

    def _column(self, column: str) -> list[Any]:
        return [row.get(column) for row in self.rows]

    def _detect_column_types(self) -> dict[str, DType]:
        return {
            column: compute.detect_column_type(self._column(column))
            for column in self.columns
        }

    def _check_columns(self, columns: Iterable[str]) -> None:
        for column in columns:
            if column not in self.columns:
                raise ColumnNotFoundError(column)

    def __len__(self) -> int:
        return len(self.rows)

    def __repr__(self) -> str:
        return f"Table{self.shape}\n{tabulate(self.columns, self.rows)}"

    def get_dataframe(self) -> list[Record]:
        """The records of the table.

        The list is not a copy, it must be treated as read-only.
        """
        return self.rows

    def get_row(self, index: int) -> Record:
        """The record at the given position.

        >>> Table([[1], [2], [3]]).get_row(3)
        Traceback (most recent call last):
        ...
        rowframe.errors.IndexOutOfRangeError: Index out of range
        """
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(
                f"Row index must be an integer, got {type(index).__name__}"
            )
        if not 0 <= index < len(self.rows):
            raise IndexOutOfRangeError(index, len(self.rows))
        return self.rows[index]

    def head(self, n: int = 5) -> list[Record]:
        """Print and return the first ``n`` records."""
        head_data = self.rows[: max(n, 0)]
        print(tabulate(self.columns, head_data))
        return head_data

    def tail(self, n: int = 5) -> list[Record]:
        """Print and return the last ``n`` records."""
        tail_data = self.rows[max(len(self.rows) - n, 0) :] if n > 0 else []
        print(tabulate(self.columns, tail_data))
        return tail_data

    @property
    def shape(self) -> str:
        """The number of rows and columns, formatted as ``"(rows, columns)"``."""
        return f"({len(self.rows)}, {len(self.columns)})"

    def get(self, column: str) -> list[Any]:
        """All the values of a column, in the order of the rows.

        :param column: The name of the column.
        """
        self._check_columns([column])
        return self._column(column)

    def rename_columns(self, mapping: Mapping[str, str]) -> None:
        """Rename the columns of the table in place.

        Columns that don't appear in ``mapping`` keep their name
        and all columns keep their position.

        :param mapping: A dictionary of ``{old_name: new_name}``.
        """
        new_columns = [mapping.get(column, column) for column in self.columns]
        if len(set(new_columns)) != len(new_columns):
            raise ValueError(
                f"Renaming would lead to duplicate columns: {new_columns}"
            )

        self.rows = [
            {new: row.get(old) for old, new in zip(self.columns, new_columns)}
            for row in self.rows
        ]
        self.columns = new_columns
        self.dtypes = self._detect_column_types()
        logger.debug("Renamed columns to %s", new_columns)

    def drop_columns(self, columns: str | Iterable[str]) -> None:
        """Remove one or more columns from the table in place.

        Columns that are not part of the table are ignored.

        :param columns: The column name or the list of column names to drop.
        """
        to_drop = {columns} if isinstance(columns, str) else set(columns)
        self.columns = [column for column in self.columns if column not in to_drop]
        self.rows = [
            {column: row.get(column) for column in self.columns} for row in self.rows
        ]
        self.dtypes = self._detect_column_types()
        logger.debug("Dropped columns %s, remaining %s", sorted(to_drop), self.columns)

    def select(self, columns: str | Iterable[str]) -> Self:
        """Create a new table with only the requested columns.

        Columns are returned in the order they are requested,
        those that are not part of the table are skipped:

        >>> table = Table([[1, "John", 25]], ["ID", "Name", "Age"])
        >>> table.select(["Age", "ID", "Salary"]).columns
        ['Age', 'ID']

        :param columns: The column name or the list of column names to keep.
        """
        requested = [columns] if isinstance(columns, str) else list(columns)
        selected = [
            column
            for idx, column in enumerate(requested)
            if column in self.columns and column not in requested[:idx]
        ]
        rows = [{column: row.get(column) for column in selected} for row in self.rows]
        return self.__class__(rows, selected)

    def filter(self, predicate: Callable[[Record], Any]) -> Self:
        """Create a new table with only the rows matching the predicate.

        :param predicate: A function receiving a record and returning
                          ``True`` when the record must be preserved.
        """
        rows = [row for row in self.rows if predicate(row)]
        return self.__class__(rows, self.columns)

    def sort_by(self, columns: str | Sequence[str], ascending: bool = True) -> Self:
        """Create a new table with the rows sorted by one or more columns.

        The sorting is stable, rows that have the same value
        for all the columns keep their relative order.

        :param columns: The columns to sort by, the first one has priority.
        :param ascending: Sort in ascending or descending order.
        """
        keys = [columns] if isinstance(columns, str) else list(columns)
        self._check_columns(keys)
        sorted_rows = compute.sort_rows(self.rows, keys, ascending)
        return self.__class__(sorted_rows, self.columns)

    def group_by(self, columns: str | Sequence[str]) -> Self:
        """Group together the rows with the same values for the given columns.

        The resulting table has one row for each group,
        in the order each group was first found,
        and a single column containing the records of the group.

        The groups can then be aggregated separately:

        >>> table = Table([["Rome", 10], ["Milan", 5], ["Rome", 20]], ["city", "n"])
        >>> groups = table.group_by(["city"])
        >>> groups.shape
        '(2, 1)'
        >>> [Table(group).aggregate({"n": sum}) for group in groups.get("column1")]
        [{'n': 30}, {'n': 5}]

        :param columns: The columns whose values identify a group.
        """
        keys = [columns] if isinstance(columns, str) else list(columns)
        self._check_columns(keys)
        groups = compute.group_rows(self.rows, keys)
        return self.__class__(
            [[group] for group in groups], [f"{self.AUTO_COLUMN_PREFIX}1"]
        )

    def aggregate(
        self, aggregations: Mapping[str, compute.Reducer]
    ) -> dict[str, Any]:
        """Summarize columns with a reducer function.

        >>> table = Table([[1, 25], [2, 30], [3, 28]], ["ID", "Age"])
        >>> table.aggregate({"ID": lambda v: ",".join(map(str, v)), "Age": max})
        {'ID': '1,2,3', 'Age': 30}

        :param aggregations: The reducers in the form of ``{"column": reducer}``,
                             each reducer receives the list of values of the column.
        """
        result = {}
        for column, reducer in aggregations.items():
            reducer = compute.check_reducer(column, reducer)
            values = self.get(column)
            logger.debug(
                "Aggregating column %s with %s", column, get_qualname(reducer)
            )
            result[column] = reducer(values)
        return result

    def mean(self, column: str) -> float:
        """The arithmetic mean of a numeric column."""
        return compute.mean(self.get(column))

    def median(self, column: str) -> Any:
        """The median value of a column."""
        return compute.median(self.get(column))

    def mode(self, column: str) -> list[Any]:
        """The most frequent values of a column, all of them in case of ties."""
        return compute.mode(self.get(column))

    def std(self, column: str) -> float:
        """The population standard deviation of a numeric column."""
        return compute.std(self.get(column))


def _is_row(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, Mapping))


def _unique_columns(columns: list[str]) -> list[str]:
    if len(set(columns)) != len(columns):
        raise ValueError(f"Duplicate column names: {columns}")
    return columns
