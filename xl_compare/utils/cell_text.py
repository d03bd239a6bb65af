from typing import Any, Iterable


def cell_text(value: Any) -> str:
    """Return the text used to compare a cell value.

    Empty cells are the empty string, booleans are spelled the way the
    spreadsheet shows them and floats holding an integer lose the ".0".
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def row_texts(values: Iterable[Any]) -> list[str]:
    """Convert a row of cell values to text, dropping trailing empty cells.

    The width of the result is the position of the last non-empty cell, so
    two rows may differ in width even when their sheets share a dimension.
    """
    texts = [cell_text(v) for v in values]
    while texts and texts[-1] == "":
        texts.pop()
    return texts
