"""The rowframe compute functions.

The compute functions implement the algorithms
behind the :class:`rowframe.table.Table` operations.
They work on plain Python records, lists of
dictionaries mapping column names to values,
and never modify the data they receive.

This keeps the algorithms separate from the table
itself, and allows to use them on any list of records:

>>> from rowframe.compute import sort_rows, group_rows
>>> rows = [{"n": 3}, {"n": 1}, {"n": 3}]
>>> sort_rows(rows, ["n"])
[{'n': 1}, {'n': 3}, {'n': 3}]
>>> group_rows(rows, ["n"])
[[{'n': 3}, {'n': 3}], [{'n': 1}]]
"""

from .aggregate import (
    Aggregation,
    CountAggregation,
    MaxAggregation,
    MeanAggregation,
    MinAggregation,
    Reducer,
    SumAggregation,
    check_reducer,
)
from .dtypes import DType, detect_column_type, dtype_of
from .grouping import freeze, group_rows
from .sorting import RowSortKey, compare_values, sort_rows
from .statistics import mean, median, mode, std

__all__ = (
    "Aggregation",
    "CountAggregation",
    "MaxAggregation",
    "MeanAggregation",
    "MinAggregation",
    "Reducer",
    "SumAggregation",
    "check_reducer",
    "DType",
    "detect_column_type",
    "dtype_of",
    "freeze",
    "group_rows",
    "RowSortKey",
    "compare_values",
    "sort_rows",
    "mean",
    "median",
    "mode",
    "std",
)
