from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence
from zipfile import ZipFile

import pytest
from attrs import define, field
from openpyxl import Workbook

from xl_compare.document import RowIterator


@pytest.fixture
def make_xlsx(tmp_path) -> Callable[..., str]:
    """Factory that writes a workbook with a single sheet and returns its
    path.

    Rows are written starting with cell A1. `None` leaves a cell empty.
    """

    def _make(
        name: str,
        rows: Iterable[Sequence[Any]],
        sheet: str = "Sheet1",
    ) -> str:
        wb = Workbook()
        ws = wb.active
        ws.title = sheet
        for row in rows:
            ws.append(list(row))
        path = tmp_path / name
        wb.save(path)
        return str(path)

    return _make


@define
class FakeDocument:
    """In-memory stand-in for `XlDocument`.

    Rows are given as lists of cell texts. Styling calls are recorded in
    `styled`, saves in `saved`.
    """

    rows_by_sheet: dict[str, list[list[str]]]
    dimension: str = "A1:A1"
    styled: list[tuple[str, str, str, Any]] = field(factory=list)
    saved: list[str] = field(factory=list)
    iterators: list[RowIterator] = field(factory=list)

    def get_sheet_dimension(self, sheet: str) -> str:
        return self.dimension

    def rows(self, sheet: str) -> RowIterator:
        it = RowIterator(
            sheet=sheet, source=(tuple(r) for r in self.rows_by_sheet[sheet])
        )
        self.iterators.append(it)
        return it

    def new_style(self, color: str) -> Any:
        return ("fill", color)

    def set_cell_style(self, sheet, from_address, to_address, style) -> None:
        self.styled.append((sheet, from_address, to_address, style))

    def save_as(self, path: str) -> None:
        self.saved.append(path)


@pytest.fixture
def fake_doc() -> Callable[..., FakeDocument]:
    def _make(
        rows: list[list[str]], dimension: str = "A1:B2", sheet: str = "Sheet1"
    ) -> FakeDocument:
        return FakeDocument(rows_by_sheet={sheet: rows}, dimension=dimension)

    return _make


@pytest.fixture
def make_broken_xlsx(make_xlsx) -> Callable[[str], str]:
    """Factory for a workbook whose sheet XML is truncated."""

    def _make(name: str) -> str:
        path = make_xlsx(name, [["1"]])
        with ZipFile(path) as src:
            entries = {n: src.read(n) for n in src.namelist()}
        entries["xl/worksheets/sheet1.xml"] = b"<worksheet><sheetData><row"
        with ZipFile(path, "w") as dst:
            for entry, data in entries.items():
                dst.writestr(entry, data)
        return path

    return _make
