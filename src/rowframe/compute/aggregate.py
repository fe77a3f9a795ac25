"""Reducers that summarize the values of a column.

Frequently when analysing data is necessary
to compute statistics like the min, max, average, etc...
of the data stored in a table.

Aggregating a table means applying a reducer to
the values of one or more columns. A reducer is
any callable that receives the full list of values
of a column and returns a single value:

>>> max([25, 30, 28])
30

This module provides the most common reducers,
computed through :mod:`pyarrow.compute`:

>>> SumAggregation()([25, 30, 28])
83
>>> MeanAggregation()([10, 20])
15.0

Aggregations can be combined with grouping by first
grouping the rows and then aggregating each group.
"""

import abc
from typing import Any, Protocol

import pyarrow as pa
import pyarrow.compute as pc

from ..errors import InvalidAggregationFunctionError

__all__ = (
    "Reducer",
    "Aggregation",
    "SumAggregation",
    "MinAggregation",
    "MaxAggregation",
    "CountAggregation",
    "MeanAggregation",
    "check_reducer",
)


class Reducer(Protocol):
    """Anything that turns the values of a column into a single value."""

    def __call__(self, values: list[Any]) -> Any: ...


def check_reducer(column: str, reducer: Any) -> Reducer:
    """Ensure that the reducer for a column can actually be invoked.

    >>> check_reducer("ID", "sum")
    Traceback (most recent call last):
    ...
    rowframe.errors.InvalidAggregationFunctionError: Invalid aggregation function for column 'ID'
    """
    if not callable(reducer):
        raise InvalidAggregationFunctionError(column)
    return reducer


class Aggregation(abc.ABC):
    """Base class for the builtin reducers.

    The values of the column are converted to a :class:`pyarrow.Array`
    and the aggregation is computed by the compute functions of pyarrow.
    The result is converted back to a Python value.
    """

    def __str__(self) -> str:
        return f"{self.__class__.__name__}()"

    __repr__ = __str__

    def __call__(self, values: list[Any]) -> Any:
        return self._aggregate(pa.array(values)).as_py()

    @abc.abstractmethod
    def _aggregate(self, data: pa.Array) -> pa.Scalar: ...


class SumAggregation(Aggregation):
    """Compute the sum of a column."""

    def _aggregate(self, data: pa.Array) -> pa.Scalar:
        return pc.sum(data)


class MinAggregation(Aggregation):
    """Compute the min of a column."""

    def _aggregate(self, data: pa.Array) -> pa.Scalar:
        return pc.min(data)


class MaxAggregation(Aggregation):
    """Compute the max of a column."""

    def _aggregate(self, data: pa.Array) -> pa.Scalar:
        return pc.max(data)


class CountAggregation(Aggregation):
    """Compute how many values of a column are not ``None``."""

    def _aggregate(self, data: pa.Array) -> pa.Scalar:
        return pc.count(data)


class MeanAggregation(Aggregation):
    """Compute the mean of a column."""

    def _aggregate(self, data: pa.Array) -> pa.Scalar:
        return pc.mean(data)
