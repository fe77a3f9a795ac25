"""Sort the rows of a table based on one or more columns.

Rows are sorted in memory with Python's own sort, which
is stable: rows that compare equal on all the keys keep
the order they had in the table. This is true also when
sorting in descending order, as ``reverse=True`` preserves
the original order of equal elements.

>>> rows = [{"name": "Jane", "age": 30}, {"name": "John", "age": 25},
...         {"name": "Sam", "age": 30}]
>>> [r["name"] for r in sort_rows(rows, ["age"])]
['John', 'Jane', 'Sam']
>>> [r["name"] for r in sort_rows(rows, ["age"], ascending=False)]
['Jane', 'Sam', 'John']
"""

from typing import Any, Iterable, Self

from .dtypes import BOOLEAN, NUMBER, OBJECT, STRING, dtype_of

# Values of different types are not comparable in Python,
# when two values don't share the type, the type decides the order.
TYPE_ORDER = {BOOLEAN: 0, NUMBER: 1, STRING: 2, OBJECT: 3}


def compare_values(v1: Any, v2: Any) -> int:
    """Compare two values returning -1, 0 or 1.

    Values of the same type are compared by their natural
    ordering. Values of different types are ordered by type
    (booleans, then numbers, then strings, then anything else).
    Values that can't be compared, like two dictionaries,
    are considered equal.

    >>> compare_values(1, 2), compare_values("b", "a"), compare_values(5, "a")
    (-1, 1, -1)
    >>> compare_values({"a": 1}, {"b": 2})
    0
    """
    t1, t2 = dtype_of(v1), dtype_of(v2)
    if t1 != t2:
        return -1 if TYPE_ORDER[t1] < TYPE_ORDER[t2] else 1

    try:
        if v1 < v2:
            return -1
        elif v1 > v2:
            return 1
    except TypeError:
        pass
    return 0


class RowSortKey:
    """Makes table rows sortable by Python functions.

    This implements the rich comparison methods to allow
    sorting of records based on the values of the
    columns in the order they are provided.
    """

    def __init__(self, row: dict[str, Any], keys: list[str]) -> None:
        """
        :param row: The record to compare.
        :param keys: The columns to use for comparison, in order of priority.
        """
        self.values = [row.get(key) for key in keys]

    def __lt__(self, other: Self) -> bool:
        for v1, v2 in zip(self.values, other.values):
            outcome = compare_values(v1, v2)
            if outcome == 0:
                continue
            return outcome < 0
        return False  # All keys are equal


def sort_rows(
    rows: Iterable[dict[str, Any]], keys: list[str], ascending: bool = True
) -> list[dict[str, Any]]:
    """Return a new list with the rows sorted by the given keys.

    :param rows: The records to sort, they are not modified.
    :param keys: The columns to sort by, the first one has priority.
    :param ascending: Apply ascending or descending order to all keys.
    """
    return sorted(
        rows, key=lambda row: RowSortKey(row, keys), reverse=not ascending
    )
