import pytest

from rowframe import Table
from rowframe.commands.describe import describe, main


@pytest.fixture
def csv_file(tmp_path):
    filename = tmp_path / "users.csv"
    Table(
        [[1, "John", 25], [2, "Jane", 30], [3, "Sam", 28]], ["ID", "Name", "Age"]
    ).to_csv(str(filename))
    return str(filename)


def test_describe_csv(csv_file, capsys):
    assert main([csv_file]) == 0
    out = capsys.readouterr().out
    assert "Shape: (3, 3)" in out
    assert "Name   | string" in out
    assert "Age    | 27.67 | 28     | 2.05" in out


def test_describe_sorted(csv_file, capsys):
    assert main([csv_file, "--sort", "Age", "--descending", "--head", "1"]) == 0
    out = capsys.readouterr().out
    assert "2  | Jane | 30" in out
    assert "John" not in out


def test_describe_json_format(tmp_path, capsys):
    filename = tmp_path / "users.data"
    filename.write_text('[{"Name": "John"}, {"Name": "Jane"}]')
    assert main([str(filename), "--format", "json"]) == 0
    out = capsys.readouterr().out
    assert "Shape: (2, 1)" in out
    assert "median" not in out


def test_describe_unknown_format(tmp_path):
    with pytest.raises(SystemExit) as exc:
        main([str(tmp_path / "users.data")])
    assert exc.value.code == 2


def test_describe_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.csv")]) == 1
    assert "Unable to describe" in capsys.readouterr().out


def test_describe_missing_sort_column(csv_file, capsys):
    assert main([csv_file, "--sort", "Salary"]) == 1
    assert "Column does not exist: 'Salary'" in capsys.readouterr().out


def test_describe_stats():
    table = Table([[1, 2.0], [3, 4.0]], ["a", "b"])
    assert describe(table, ["a"]) == [
        {"column": "a", "mean": 2.0, "median": 2.0, "std": 1.0}
    ]
