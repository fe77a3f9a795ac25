import pytest

from rowframe.compute.aggregate import (
    CountAggregation,
    MaxAggregation,
    MeanAggregation,
    MinAggregation,
    SumAggregation,
    check_reducer,
)
from rowframe.errors import InvalidAggregationFunctionError, TableError

N_EMPLOYEES = [10, 15, 8, 12, 20]


@pytest.mark.parametrize(
    "aggregation,expected",
    [
        (SumAggregation(), 65),
        (MinAggregation(), 8),
        (MaxAggregation(), 20),
        (CountAggregation(), 5),
        (MeanAggregation(), 13),
    ],
)
def test_aggregations(aggregation, expected):
    assert aggregation(N_EMPLOYEES) == expected


def test_count_aggregation_skips_none():
    assert CountAggregation()([1, None, 3]) == 2


def test_aggregation_str():
    assert str(SumAggregation()) == "SumAggregation()"
    assert repr(MeanAggregation()) == "MeanAggregation()"


@pytest.mark.parametrize("reducer", [max, len, lambda v: v, SumAggregation()])
def test_check_reducer_callable(reducer):
    assert check_reducer("ID", reducer) is reducer


@pytest.mark.parametrize("reducer", ["sum", 1, None, ["max"]])
def test_check_reducer_not_callable(reducer):
    with pytest.raises(InvalidAggregationFunctionError) as exc:
        check_reducer("ID", reducer)
    assert exc.value.column == "ID"
    assert str(exc.value) == "Invalid aggregation function for column 'ID'"
    assert isinstance(exc.value, TableError)
