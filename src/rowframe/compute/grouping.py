"""Group rows that share the same values for a set of columns.

Rows are grouped when their values for the grouping columns
are structurally equal. Groups are emitted in the order their
key was first seen and the rows of each group keep
the order they had in the table:

>>> rows = [{"city": "Rome", "n": 1}, {"city": "Milan", "n": 2},
...         {"city": "Rome", "n": 3}]
>>> [[r["n"] for r in group] for group in group_rows(rows, ["city"])]
[[1, 3], [2]]

The grouping itself doesn't compute anything,
aggregations are applied by the caller on each group.
"""

from typing import Any, Hashable, Iterable

from .dtypes import dtype_of


def freeze(value: Any) -> Hashable:
    """Build a hashable key that identifies a value structurally.

    Lists, dictionaries and sets are converted recursively to
    their immutable counterpart, so that two structurally equal
    values produce the same key. Every value is tagged with its
    type to keep apart values that Python considers equal
    but are of different types, like ``True`` and ``1``.

    >>> freeze([1, {"a": True}]) == freeze([1, {"a": True}])
    True
    >>> freeze(True) == freeze(1)
    False
    """
    if isinstance(value, dict):
        frozen: Hashable = frozenset((k, freeze(v)) for k, v in value.items())
    elif isinstance(value, (list, tuple)):
        frozen = tuple(freeze(v) for v in value)
    elif isinstance(value, (set, frozenset)):
        frozen = frozenset(freeze(v) for v in value)
    else:
        try:
            hash(value)
        except TypeError:
            frozen = repr(value)
        else:
            frozen = value
    return (dtype_of(value), frozen)


def group_rows(
    rows: Iterable[dict[str, Any]], keys: list[str]
) -> list[list[dict[str, Any]]]:
    """Split the rows in groups based on the values of the key columns.

    :param rows: The records to group.
    :param keys: The columns whose values identify a group.
    """
    # Dictionaries preserve insertion order, so groups
    # come out in the order their key was first met.
    groups: dict[Hashable, list[dict[str, Any]]] = {}
    for row in rows:
        group_key = tuple(freeze(row.get(key)) for key in keys)
        groups.setdefault(group_key, []).append(row)
    return list(groups.values())
