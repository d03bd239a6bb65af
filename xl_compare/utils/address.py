from openpyxl.utils import get_column_letter  # type: ignore[import]


def cell_address(row: int, col: int) -> str:
    """Return the spreadsheet address of a 0-based (row, col) position.

    Columns use base-26 letters, so column 25 is "Z" and column 26 is "AA".

    Args:
        row: 0-based row index.
        col: 0-based column index.

    Returns:
        The address, e.g. "C5" for row 4, column 2.

    Raises:
        ValueError: If either index is negative or the column is beyond the
            last column a workbook can hold.
    """
    if row < 0 or col < 0:
        raise ValueError("Invalid cell position (%r, %r)" % (row, col))
    return f"{get_column_letter(col + 1)}{row + 1}"
