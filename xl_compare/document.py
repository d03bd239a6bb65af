"""Access to the sheets of a workbook through openpyxl."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterator
from zipfile import BadZipFile

from attrs import define, field
from openpyxl import load_workbook  # type: ignore[import]
from openpyxl.styles import PatternFill  # type: ignore[import]
from openpyxl.utils.exceptions import (  # type: ignore[import]
    InvalidFileException,
)

from xl_compare.errors import (
    DocumentOpenError,
    SaveError,
    SheetNotFoundError,
    StyleApplicationError,
)
from xl_compare.utils.cell_text import row_texts

if TYPE_CHECKING:
    from openpyxl.worksheet.worksheet import Worksheet

logger = logging.getLogger(__name__)

# Malformed sheet XML raises a SyntaxError subclass.
OPEN_ERRORS = (
    OSError,
    BadZipFile,
    InvalidFileException,
    KeyError,
    ValueError,
    TypeError,
    IndexError,
    SyntaxError,
)


@define(eq=False)
class RowIterator:
    """Forward-only iterator over the rows of a sheet.

    Each row is produced as a list of cell texts with trailing empty cells
    removed. The iterator must be closed once the caller is done with it;
    it is also a context manager that closes it on exit.

    Attributes:
        sheet: Name of the sheet the rows come from.
        source: Lazy iterator of raw cell values, one tuple per row.
    """

    sheet: str
    source: Iterator[tuple[Any, ...]] = field(repr=False)
    closed: bool = field(default=False, init=False)

    def __iter__(self) -> "RowIterator":
        return self

    def __next__(self) -> list[str]:
        if self.closed:
            raise StopIteration
        return row_texts(next(self.source))

    def close(self) -> None:
        """Release the underlying row generator."""
        if self.closed:
            return
        self.closed = True
        close = getattr(self.source, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "RowIterator":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


@define(eq=False)
class XlDocument:
    """An opened workbook.

    Sheet dimensions are computed once per sheet, before any row walk:
    iterating rows of a loaded workbook creates the cells it visits, which
    would move the dimension of a sheet that does not start at A1.

    Values are read from the cached results of formulas. Styles are applied
    to a second copy of the workbook, loaded on first use with its formulas
    intact, so that saving it produces the original file plus the styles.

    Attributes:
        path: The file the workbook was loaded from.
        wb: The workbook used for reading values.
        styled_wb: The workbook that receives styles; None until the first
            style is applied.
        dimensions: Dimension of each sheet, by sheet name.
    """

    path: str
    wb: Any = field(repr=False)
    styled_wb: Any = field(default=None, init=False, repr=False)
    dimensions: dict[str, str] = field(factory=dict, init=False, repr=False)

    @classmethod
    def open(cls, path: str) -> "XlDocument":
        """Load the workbook at `path`.

        Raises:
            DocumentOpenError: The file is missing, unreadable or not a
                workbook.
        """
        logger.debug("Opening %s", path)
        try:
            wb = load_workbook(filename=path, read_only=False, data_only=True)
        except OPEN_ERRORS as exc:
            raise DocumentOpenError(
                f"Unable to open {path}: {exc}", path=path
            ) from exc
        return cls(path=path, wb=wb)

    def __enter__(self) -> "XlDocument":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def close(self) -> None:
        """Close the workbooks held by this document."""
        self.wb.close()
        if self.styled_wb is not None:
            self.styled_wb.close()

    @property
    def is_modified(self) -> bool:
        """Whether any style was applied to this document."""
        return self.styled_wb is not None

    def _worksheet(self, wb: Any, sheet: str) -> "Worksheet":
        if sheet not in wb.sheetnames:
            raise SheetNotFoundError(
                f"sheet {sheet} does not exist in {self.path}",
                sheet=sheet,
                path=self.path,
            )
        return wb[sheet]

    def get_sheet_dimension(self, sheet: str) -> str:
        """Return the used range of a sheet, e.g. "A1:D10"."""
        dim = self.dimensions.get(sheet)
        if dim is None:
            dim = self._worksheet(self.wb, sheet).calculate_dimension()
            self.dimensions[sheet] = dim
        return dim

    def rows(self, sheet: str) -> RowIterator:
        """Return a forward-only iterator over the rows of a sheet."""
        ws = self._worksheet(self.wb, sheet)
        self.get_sheet_dimension(sheet)
        return RowIterator(sheet=sheet, source=ws.iter_rows(values_only=True))

    def new_style(self, color: str) -> PatternFill:
        """Create a solid fill style.

        Args:
            color: ARGB color of the fill.
        """
        try:
            return PatternFill(
                fill_type="solid", start_color=color, end_color=color
            )
        except (TypeError, ValueError) as exc:
            raise StyleApplicationError(
                f"Unable to create a fill with color {color!r}: {exc}",
                path=self.path,
            ) from exc

    def _ensure_styled_workbook(self) -> Any:
        if self.styled_wb is None:
            logger.debug("Loading %s for styling", self.path)
            try:
                self.styled_wb = load_workbook(
                    filename=self.path, read_only=False, data_only=False
                )
            except OPEN_ERRORS as exc:
                raise DocumentOpenError(
                    f"Unable to open {self.path}: {exc}", path=self.path
                ) from exc
        return self.styled_wb

    def set_cell_style(
        self,
        sheet: str,
        from_address: str,
        to_address: str,
        style: PatternFill,
    ) -> None:
        """Apply a fill to every cell of a range.

        Only the fill of the cells is replaced; fonts, borders and number
        formats are kept.
        """
        ws = self._worksheet(self._ensure_styled_workbook(), sheet)
        try:
            for row in ws[f"{from_address}:{to_address}"]:
                for cell in row:
                    cell.fill = style
        except (TypeError, ValueError) as exc:
            raise StyleApplicationError(
                f"Unable to style {from_address}:{to_address} in "
                f"{self.path}: {exc}",
                path=self.path,
            ) from exc

    def save_as(self, path: str) -> None:
        """Write the styled workbook to `path`.

        Raises:
            SaveError: The file could not be written.
        """
        wb = self._ensure_styled_workbook()
        logger.debug("Saving %s", path)
        try:
            wb.save(path)
        except OSError as exc:
            raise SaveError(f"Unable to save {path}: {exc}", path=path) from exc
