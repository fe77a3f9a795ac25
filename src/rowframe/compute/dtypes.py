"""Detect the type of the values stored in a column.

Tables don't enforce a schema, every cell can hold any
Python value. To still give an idea of what a column contains,
each value is tagged with a primitive type and the column
is tagged with the type shared by all its values:

>>> detect_column_type([1, 2.5, 3])
'number'
>>> detect_column_type(["a", "b"])
'string'

When the values disagree, the column is ``mixed``:

>>> detect_column_type([1, "two", True])
'mixed'
"""

import numbers
from typing import Any, Iterable, Literal

DType = Literal["number", "string", "boolean", "object", "mixed"]

NUMBER = "number"
STRING = "string"
BOOLEAN = "boolean"
OBJECT = "object"
MIXED = "mixed"


def dtype_of(value: Any) -> DType:
    """Tag a single value with its primitive type.

    ``bool`` is checked first as in Python it's a subclass of ``int``,
    but it must not be confused with numbers.

    >>> [dtype_of(v) for v in (True, 1, 1.5, "x", None, {"a": 1})]
    ['boolean', 'number', 'number', 'string', 'object', 'object']
    """
    if isinstance(value, bool):
        return BOOLEAN
    elif isinstance(value, numbers.Number):
        return NUMBER
    elif isinstance(value, str):
        return STRING
    return OBJECT


def detect_column_type(values: Iterable[Any]) -> DType:
    """Tag a column by inspecting every value it contains.

    An empty column has no value to agree on, so it's ``mixed``.
    """
    tags = {dtype_of(value) for value in values}
    if len(tags) == 1:
        return tags.pop()
    return MIXED
