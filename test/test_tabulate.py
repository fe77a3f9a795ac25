from rowframe.utils.tabulate import format_value, tabulate

ROWS = [{"name": "row%d" % i, "value": i * 1.5} for i in range(30)]


def test_tabulate_limits_rows():
    text = tabulate(["name", "value"], ROWS, max_rows=3)
    lines = text.splitlines()
    assert lines[0] == "name | value"
    assert lines[2] == "row0 | 0.00 "
    assert len(lines) == 6
    assert lines[-1] == "... and 27 more rows"


def test_tabulate_missing_values():
    text = tabulate(["a", "b"], [{"a": 1}])
    assert text.splitlines()[-1] == "1 |  "


def test_format_value_truncates():
    assert format_value("x" * 40) == "x" * 27 + "..."
    assert format_value(False) == "false"
    assert format_value([1, 2]) == "[1, 2]"
