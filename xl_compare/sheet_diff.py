"""Positional, cell-by-cell comparison of two sheets."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from attrs import define, field

from xl_compare.cell_diff import CellDiff
from xl_compare.config import CompareConfig
from xl_compare.errors import DimensionMismatchError, RowWidthMismatchError
from xl_compare.highlighter import Highlighter

if TYPE_CHECKING:
    from xl_compare.document import XlDocument

logger = logging.getLogger(__name__)


@define
class SheetDiffer:
    """Compares a sheet of the left document with one of the right document.

    The sheets must have the same dimension. Rows are walked in lockstep
    and the walk stops when either side runs out of rows. Cells are
    compared by their text, exactly.

    Attributes:
        doc_a: The left document.
        doc_b: The right document; receives the highlights.
        sheet_a: Name of the sheet in the left document.
        sheet_b: Name of the sheet in the right document.
        config: Comparison options.
        highlighter: Fills the differing cells in `doc_b`. Created from
            `config` when highlighting is enabled and none is provided.
    """

    doc_a: "XlDocument" = field(repr=False)
    doc_b: "XlDocument" = field(repr=False)
    sheet_a: str
    sheet_b: str
    config: CompareConfig = field(factory=CompareConfig)
    highlighter: Optional[Highlighter] = field(default=None, repr=False)

    def __attrs_post_init__(self):
        if self.highlighter is None and self.config.color_sheet:
            self.highlighter = Highlighter(
                doc=self.doc_b, sheet=self.sheet_b, color=self.config.color
            )

    def __call__(self) -> list[CellDiff]:
        """Compare the two sheets.

        Returns:
            The differences in row-major order.

        Raises:
            DimensionMismatchError: The sheets have different dimensions.
            RowWidthMismatchError: A pair of rows has different widths.
        """
        self._check_dimensions()

        diff: list[CellDiff] = []
        rows_walked = 0
        with self.doc_a.rows(self.sheet_a) as a_rows, self.doc_b.rows(
            self.sheet_b
        ) as b_rows:
            for row, (a_cols, b_cols) in enumerate(zip(a_rows, b_rows)):
                row_diff = self._compare_row(row, a_cols, b_cols)
                if row_diff:
                    diff.extend(row_diff)
                    if self.highlighter is not None:
                        self.highlighter(row_diff)
                rows_walked = row + 1

        logger.debug(
            "Walked %d rows of %s, found %d differences",
            rows_walked,
            self.sheet_a,
            len(diff),
        )
        return diff

    def _check_dimensions(self) -> None:
        a_dim = self.doc_a.get_sheet_dimension(self.sheet_a)
        b_dim = self.doc_b.get_sheet_dimension(self.sheet_b)
        logger.debug("Sheet dimensions: %s, %s", a_dim, b_dim)
        if a_dim != b_dim:
            raise DimensionMismatchError(a_dim, b_dim)

    @staticmethod
    def _compare_row(
        row: int, a_cols: list[str], b_cols: list[str]
    ) -> list[CellDiff]:
        if len(a_cols) != len(b_cols):
            raise RowWidthMismatchError(row, len(a_cols), len(b_cols))
        return [
            CellDiff.at(row, col, a_val, b_val)
            for col, (a_val, b_val) in enumerate(zip(a_cols, b_cols))
            if a_val != b_val
        ]


def compare_sheets(
    doc_a: "XlDocument",
    doc_b: "XlDocument",
    sheet_a: str,
    sheet_b: str,
    config: Optional[CompareConfig] = None,
    **kwargs: Any,
) -> list[CellDiff]:
    """Compare a sheet of `doc_a` with a sheet of `doc_b`.

    Args:
        doc_a: The left document.
        doc_b: The right document. When `config.color_sheet` is set, the
            differing cells are filled in this document (not saved).
        sheet_a: Sheet name in the left document.
        sheet_b: Sheet name in the right document.
        config: Comparison options; defaults are used if None.
        **kwargs: Extra arguments for `SheetDiffer`.

    Returns:
        The list of differences, top-to-bottom then left-to-right.
    """
    return SheetDiffer(
        doc_a=doc_a,
        doc_b=doc_b,
        sheet_a=sheet_a,
        sheet_b=sheet_b,
        config=config if config is not None else CompareConfig(),
        **kwargs,
    )()
