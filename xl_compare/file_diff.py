"""Standalone function to compare a sheet across two workbook files."""

from __future__ import annotations

import logging
import os
from typing import Optional

from attrs import define, field

from xl_compare.cell_diff import CellDiff
from xl_compare.config import CompareConfig
from xl_compare.document import XlDocument
from xl_compare.errors import ErrCode, SaveError
from xl_compare.sheet_diff import SheetDiffer

logger = logging.getLogger(__name__)

DIFF_MARKER = ".diff"
EXPECTED_EXT = ".xlsx"


@define(frozen=True)
class FileDiff:
    """Outcome of comparing two files.

    Attributes:
        diffs: The differences found, in row-major order.
        saved_path: Where the highlighted copy of the right file was
            written, or None if nothing was saved.
    """

    diffs: tuple[CellDiff, ...] = field(converter=tuple)
    saved_path: Optional[str] = None


def diff_output_path(path: str) -> str:
    """Return the name of the highlighted copy of a workbook.

    The marker is inserted before the extension: `book.xlsx` becomes
    `book.diff.xlsx`.

    Raises:
        SaveError: The path does not end in `.xlsx`, so the copy would
            overwrite the input.
    """
    root, ext = os.path.splitext(path)
    if ext.lower() != EXPECTED_EXT:
        raise SaveError(
            f"Cannot derive the output name from {path}; "
            f"expected a {EXPECTED_EXT} file",
            code=ErrCode.INVALID_OUTPUT_PATH,
            path=path,
        )
    return f"{root}{DIFF_MARKER}{ext}"


def compare_files(
    path_a: str,
    path_b: str,
    sheet_a: str,
    sheet_b: str,
    config: Optional[CompareConfig] = None,
) -> FileDiff:
    """Compare a sheet of two workbook files.

    When `config.color_sheet` is set and differences exist, the right
    workbook is saved with the differing cells filled under the name
    returned by `diff_output_path`. Both files are closed on return,
    including when an error is raised.

    Args:
        path_a: The left workbook.
        path_b: The right workbook.
        sheet_a: Sheet name in the left workbook.
        sheet_b: Sheet name in the right workbook.
        config: Comparison options; defaults are used if None.

    Returns:
        The differences and the path of the highlighted copy, if any.
    """
    if config is None:
        config = CompareConfig()

    # Fail on a bad output name before spending time on the comparison.
    out_path = diff_output_path(path_b) if config.color_sheet else None

    with XlDocument.open(path_a) as doc_a, XlDocument.open(path_b) as doc_b:
        diffs = SheetDiffer(
            doc_a=doc_a,
            doc_b=doc_b,
            sheet_a=sheet_a,
            sheet_b=sheet_b,
            config=config,
        )()

        saved_path = None
        if out_path is not None and diffs:
            doc_b.save_as(out_path)
            saved_path = out_path
            logger.info("Saved highlighted differences to %s", out_path)

    return FileDiff(diffs=diffs, saved_path=saved_path)
