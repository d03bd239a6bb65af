"""Fills the cells of the right workbook where differences were found."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable

from attrs import define, field

if TYPE_CHECKING:
    from xl_compare.cell_diff import CellDiff
    from xl_compare.document import XlDocument

logger = logging.getLogger(__name__)


@define
class Highlighter:
    """Applies a solid fill to differing cells of a sheet.

    The fill style is created on first use and shared by all the cells.

    Attributes:
        doc: The document that receives the fill (the right side).
        sheet: Name of the sheet inside `doc`.
        color: ARGB color of the fill.
        style: The shared fill style; None until the first cell is styled.
        count: Number of cells styled so far.
    """

    doc: "XlDocument" = field(repr=False)
    sheet: str
    color: str
    style: Any = field(default=None, init=False, repr=False)
    count: int = field(default=0, init=False)

    def __call__(self, diffs: Iterable["CellDiff"]) -> None:
        """Fill the cell of each difference."""
        for diff in diffs:
            self.highlight(diff.cell)

    def highlight(self, address: str) -> None:
        if self.style is None:
            self.style = self.doc.new_style(self.color)
        self.doc.set_cell_style(self.sheet, address, address, self.style)
        self.count += 1
        logger.debug("Highlighted %s!%s", self.sheet, address)
