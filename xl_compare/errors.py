"""Errors raised while comparing workbooks."""

from enum import StrEnum
from typing import Any, Optional


class ErrCode(StrEnum):
    """Machine-readable kind of a comparison failure."""

    CONFIGURATION = "configuration"
    GLOB_EXPANSION = "glob_expansion"
    DOCUMENT_OPEN = "document_open"
    SHEET_NOT_FOUND = "sheet_not_found"
    DIMENSION_MISMATCH = "dimension_mismatch"
    ROW_WIDTH_MISMATCH = "row_width_mismatch"
    STYLE_APPLICATION = "style_application"
    SAVE = "save"
    INVALID_OUTPUT_PATH = "invalid_output_path"


class XlCompareError(Exception):
    """Base class for all errors raised by the comparator.

    Every error is fatal for the file pair being compared and, through the
    runner, for the whole run.

    Attributes:
        code: The error code.
        path: The file involved in the failure, if any.
    """

    default_code: ErrCode = ErrCode.CONFIGURATION

    code: ErrCode
    path: Optional[str]

    def __init__(
        self,
        msg: str,
        code: Optional[ErrCode] = None,
        path: Optional[str] = None,
    ):
        super().__init__(msg)
        self.code = code if code is not None else self.default_code
        self.path = path

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""

    def as_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "message": self.message,
            "path": self.path,
        }


class ConfigurationError(XlCompareError):
    """The file lists or other settings are not usable."""

    default_code = ErrCode.CONFIGURATION


class GlobExpansionError(XlCompareError):
    """A file pattern is invalid or does not match any file.

    Attributes:
        pattern: The offending pattern.
    """

    default_code = ErrCode.GLOB_EXPANSION

    def __init__(self, msg: str, pattern: str):
        super().__init__(msg)
        self.pattern = pattern

    def as_dict(self) -> dict[str, Any]:
        result = super().as_dict()
        result["pattern"] = self.pattern
        return result


class DocumentOpenError(XlCompareError):
    """A workbook could not be opened or read."""

    default_code = ErrCode.DOCUMENT_OPEN


class SheetNotFoundError(XlCompareError):
    """The requested sheet does not exist in a workbook.

    Attributes:
        sheet: The name of the missing sheet.
    """

    default_code = ErrCode.SHEET_NOT_FOUND

    def __init__(self, msg: str, sheet: str, path: Optional[str] = None):
        super().__init__(msg, path=path)
        self.sheet = sheet

    def as_dict(self) -> dict[str, Any]:
        result = super().as_dict()
        result["sheet"] = self.sheet
        return result


class DimensionMismatchError(XlCompareError):
    """The two sheets have different dimension descriptors.

    Attributes:
        dim_a: Dimension of the left sheet (e.g. "A1:D10").
        dim_b: Dimension of the right sheet.
    """

    default_code = ErrCode.DIMENSION_MISMATCH

    def __init__(self, dim_a: str, dim_b: str):
        super().__init__(
            f"dimensions don't match: {dim_a} != {dim_b}",
        )
        self.dim_a = dim_a
        self.dim_b = dim_b

    def as_dict(self) -> dict[str, Any]:
        result = super().as_dict()
        result["dim_a"] = self.dim_a
        result["dim_b"] = self.dim_b
        return result


class RowWidthMismatchError(XlCompareError):
    """A pair of rows has a different number of cells.

    Attributes:
        row: The 0-based index of the row pair.
        width_a: Number of cells in the left row.
        width_b: Number of cells in the right row.
    """

    default_code = ErrCode.ROW_WIDTH_MISMATCH

    def __init__(self, row: int, width_a: int, width_b: int):
        super().__init__(
            f"Found row size that doesn't match at row {row + 1}: "
            f"{width_a} != {width_b}",
        )
        self.row = row
        self.width_a = width_a
        self.width_b = width_b

    def as_dict(self) -> dict[str, Any]:
        result = super().as_dict()
        result["row"] = self.row
        result["width_a"] = self.width_a
        result["width_b"] = self.width_b
        return result


class StyleApplicationError(XlCompareError):
    """The highlight style could not be created or applied."""

    default_code = ErrCode.STYLE_APPLICATION


class SaveError(XlCompareError):
    """The annotated workbook could not be written."""

    default_code = ErrCode.SAVE
