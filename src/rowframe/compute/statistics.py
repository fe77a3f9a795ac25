"""Descriptive statistics over the values of a column.

>>> ages = [25, 30, 28]
>>> mean(ages)
27.666666666666668
>>> median(ages)
28
>>> mode(ages)
[25, 30, 28]
>>> round(std(ages), 6)
2.054805

Mean and standard deviation are computed by :mod:`pyarrow.compute`,
values are expected to be numbers and pyarrow errors are propagated
when they are not. Median and mode only require the values to be
comparable and hashable respectively.

Statistics of an empty column are not defined and are ``nan``.
Missing values are not skipped by mean and standard deviation,
a column with any ``None`` has ``nan`` for both.
"""

import math
from typing import Any, Callable

import pyarrow as pa
import pyarrow.compute as pc

from .grouping import freeze


def mean(values: list[Any]) -> float:
    """Arithmetic mean, the sum of the values divided by their count.

    Missing values are counted too, so any ``None`` makes the mean ``nan``:

    >>> mean([1, None, 3])
    nan
    """
    return _nan_if_null(pc.mean, values)


def median(values: list[Any]) -> Any:
    """The value in the middle of the sorted values.

    When there is an even number of values, the
    average of the two central ones is returned.

    >>> median([4, 1, 3, 2])
    2.5
    """
    if not values:
        return math.nan

    sorted_values = sorted(values)
    mid = len(sorted_values) // 2
    if len(sorted_values) % 2 == 0:
        return (sorted_values[mid - 1] + sorted_values[mid]) / 2
    return sorted_values[mid]


def mode(values: list[Any]) -> list[Any]:
    """All the values that appear the most.

    Values are returned in the order they reached the highest frequency:

    >>> mode([1, 2, 2, 1, 3])
    [2, 1]
    """
    frequencies: dict[Any, int] = {}
    max_frequency = 0
    modes: list[Any] = []
    for value in values:
        key = freeze(value)
        frequencies[key] = frequencies.get(key, 0) + 1
        if frequencies[key] > max_frequency:
            max_frequency = frequencies[key]
            modes = [value]
        elif frequencies[key] == max_frequency:
            modes.append(value)
    return modes


def std(values: list[Any]) -> float:
    """Population standard deviation (not corrected for the sample size)."""
    return _nan_if_null(pc.stddev, values, ddof=0)


def _nan_if_null(
    function: Callable[..., pa.Scalar], values: list[Any], **kwargs: Any
) -> float:
    # An all-None column has arrow null type, which has no numeric kernels.
    if all(value is None for value in values):
        return math.nan
    result = function(pa.array(values), skip_nulls=False, **kwargs).as_py()
    return math.nan if result is None else result
