"""Cell difference representation for sheet comparisons."""

from __future__ import annotations

from attrs import define

from xl_compare.utils.address import cell_address


@define(frozen=True)
class CellDiff:
    """A single cell where the left and the right sheet disagree.

    Attributes:
        cell: Spreadsheet address of the cell (e.g. "C5").
        row: 0-based row index.
        col: 0-based column index.
        val_a: Text of the cell in the left sheet.
        val_b: Text of the cell in the right sheet.
    """

    cell: str
    row: int
    col: int
    val_a: str
    val_b: str

    @classmethod
    def at(cls, row: int, col: int, val_a: str, val_b: str) -> "CellDiff":
        """Create a difference, computing the address from the position."""
        return cls(
            cell=cell_address(row, col),
            row=row,
            col=col,
            val_a=val_a,
            val_b=val_b,
        )

    def __str__(self) -> str:
        return (
            f"{self.cell} ({self.row}, {self.col}): "
            f"'{self.val_a}' != '{self.val_b}'"
        )
