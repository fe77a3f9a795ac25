import pytest

from rowframe.compute.dtypes import detect_column_type, dtype_of


@pytest.mark.parametrize(
    "value,expected",
    [
        (1, "number"),
        (1.5, "number"),
        (float("nan"), "number"),
        ("text", "string"),
        ("", "string"),
        (True, "boolean"),
        (False, "boolean"),
        (None, "object"),
        ([1, 2], "object"),
        ({"a": 1}, "object"),
    ],
)
def test_dtype_of(value, expected):
    assert dtype_of(value) == expected


@pytest.mark.parametrize(
    "values,expected",
    [
        ([1, 2, 3.5], "number"),
        (["a", "b"], "string"),
        ([True, False], "boolean"),
        ([None, {"a": 1}], "object"),
        ([1, True], "mixed"),
        ([1, "1"], "mixed"),
        ([1, None], "mixed"),
        ([], "mixed"),
    ],
)
def test_detect_column_type(values, expected):
    assert detect_column_type(values) == expected
