"""Cell-by-cell comparison of Excel workbooks."""

from xl_compare.__version__ import __version__
from xl_compare.cell_diff import CellDiff
from xl_compare.config import CompareConfig
from xl_compare.document import RowIterator, XlDocument
from xl_compare.errors import (
    ConfigurationError,
    DimensionMismatchError,
    DocumentOpenError,
    ErrCode,
    GlobExpansionError,
    RowWidthMismatchError,
    SaveError,
    SheetNotFoundError,
    StyleApplicationError,
    XlCompareError,
)
from xl_compare.file_diff import FileDiff, compare_files, diff_output_path
from xl_compare.highlighter import Highlighter
from xl_compare.runner import (
    PairResult,
    expand_globs,
    format_report,
    run_comparisons,
    validate_file_lists,
)
from xl_compare.sheet_diff import SheetDiffer, compare_sheets

__all__ = [
    "CellDiff",
    "CompareConfig",
    "ConfigurationError",
    "DimensionMismatchError",
    "DocumentOpenError",
    "ErrCode",
    "FileDiff",
    "GlobExpansionError",
    "Highlighter",
    "PairResult",
    "RowIterator",
    "RowWidthMismatchError",
    "SaveError",
    "SheetDiffer",
    "SheetNotFoundError",
    "StyleApplicationError",
    "XlCompareError",
    "XlDocument",
    "__version__",
    "compare_files",
    "compare_sheets",
    "diff_output_path",
    "expand_globs",
    "format_report",
    "run_comparisons",
    "validate_file_lists",
]
