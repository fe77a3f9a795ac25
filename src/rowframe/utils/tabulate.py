"""Format table records into a text table for print.

The `tabulate` function takes the columns and the records of a table
and formats them into a text table.
It will truncate long strings, format floats to 2 decimal places, and limit the number of rows to display.
The function is used to display the rows of a table in ``head``, ``tail`` and in the command line tools.

Example:

    >>> columns = ["Product", "Quantity", "Price"]
    >>> rows = [
    ...     {"Product": "Videogame", "Quantity": 8, "Price": 66.5},
    ...     {"Product": "Laptop", "Quantity": 8, "Price": 38.72},
    ...     {"Product": "Laptop", "Quantity": 7, "Price": 77.46},
    ... ]
    >>> print(tabulate(columns, rows))
    Product   | Quantity | Price
    --------- | -------- | -----
    Videogame | 8        | 66.50
    Laptop    | 8        | 38.72
    Laptop    | 7        | 77.46
"""

from typing import Any


def tabulate(
    columns: list[str], records: list[dict[str, Any]], max_rows: int = 20
) -> str:
    """Format a list of records into a text table.

    Will produce a string like::

        Product   | Quantity | Price | Total
        --------- | -------- | ----- | ------
        Videogame | 8        | 66.50 | 532.00
        Laptop    | 8        | 38.72 | 309.76
        Laptop    | 7        | 77.46 | 542.22
    """
    rows = [
        [format_value(record.get(c)) for c in columns] for record in records[:max_rows]
    ]

    colsizes = compute_max_colsize(columns, rows)
    header = [maketablerow(columns, colsizes=colsizes)]
    separator = [
        maketablerow(["-"] * len(columns), colsizes=colsizes, fillvalue="-")
    ]
    textrows = [maketablerow(row, colsizes=colsizes) for row in rows]

    table = "\n".join(header + separator + textrows)
    if len(records) > max_rows:
        table += f"\n... and {len(records) - max_rows} more rows"
    return table


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    return " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    )


def format_value(v: Any) -> str:
    """Format a value to be printed in the table.

    This function will format floats to 2 decimal places,
    and truncate long strings.

    >>> format_value(None), format_value(True), format_value(2.0)
    ('', 'true', '2.00')
    """
    if v is None:
        return ""
    elif isinstance(v, float):
        return f"{v:.2f}"
    elif isinstance(v, bool):
        return "true" if v else "false"

    v = str(v)
    if len(v) > 30:
        v = v[:27] + "..."
    return v
