import os

import pytest
from openpyxl import load_workbook

from xl_compare.cell_diff import CellDiff
from xl_compare.config import CompareConfig
from xl_compare.errors import (
    DimensionMismatchError,
    ErrCode,
    RowWidthMismatchError,
    SaveError,
    SheetNotFoundError,
)
from xl_compare.file_diff import compare_files, diff_output_path


class TestDiffOutputPath:
    def test_marker_before_extension(self):
        assert diff_output_path("data/book.xlsx") == "data/book.diff.xlsx"

    def test_only_final_extension(self):
        assert (
            diff_output_path("a.xlsx.d/b.xlsx") == "a.xlsx.d/b.diff.xlsx"
        )

    def test_extension_case_is_kept(self):
        assert diff_output_path("BOOK.XLSX") == "BOOK.diff.XLSX"

    @pytest.mark.parametrize("path", ["book.xls", "book", "book.csv"])
    def test_unexpected_extension(self, path):
        with pytest.raises(SaveError) as info:
            diff_output_path(path)
        assert info.value.code == ErrCode.INVALID_OUTPUT_PATH


class TestCompareFiles:
    def test_end_to_end(self, make_xlsx):
        a = make_xlsx("a.xlsx", [["1", "2"], ["3", "4"]])
        b = make_xlsx("b.xlsx", [["1", "9"], ["3", "4"]])
        result = compare_files(a, b, "Sheet1", "Sheet1")
        assert result.diffs == (
            CellDiff(cell="B1", row=0, col=1, val_a="2", val_b="9"),
        )
        assert result.saved_path is None

    def test_identical_files(self, make_xlsx):
        rows = [["a", 1], ["b", 2.5], ["c", None]]
        a = make_xlsx("a.xlsx", rows)
        b = make_xlsx("b.xlsx", rows)
        assert compare_files(a, b, "Sheet1", "Sheet1").diffs == ()

    def test_numbers_compare_by_text(self, make_xlsx):
        a = make_xlsx("a.xlsx", [[1, "x"]])
        b = make_xlsx("b.xlsx", [["1", "x"]])
        assert compare_files(a, b, "Sheet1", "Sheet1").diffs == ()

    def test_dimension_mismatch(self, make_xlsx):
        a = make_xlsx("a.xlsx", [["1", "2"]])
        b = make_xlsx("b.xlsx", [["1", "2"], ["3", "4"]])
        with pytest.raises(DimensionMismatchError):
            compare_files(a, b, "Sheet1", "Sheet1")

    def test_row_width_mismatch(self, make_xlsx):
        a = make_xlsx("a.xlsx", [["1", "2"], ["3", "4"]])
        b = make_xlsx("b.xlsx", [["1", None], ["3", "4"]])
        with pytest.raises(RowWidthMismatchError) as info:
            compare_files(a, b, "Sheet1", "Sheet1")
        assert info.value.row == 0

    def test_missing_sheet(self, make_xlsx):
        a = make_xlsx("a.xlsx", [["1"]])
        b = make_xlsx("b.xlsx", [["1"]], sheet="Data")
        with pytest.raises(SheetNotFoundError):
            compare_files(a, b, "Sheet1", "Sheet1")

    def test_separate_sheet_names(self, make_xlsx):
        a = make_xlsx("a.xlsx", [["1"]], sheet="Left")
        b = make_xlsx("b.xlsx", [["2"]], sheet="Right")
        diffs = compare_files(a, b, "Left", "Right").diffs
        assert [d.cell for d in diffs] == ["A1"]


class TestHighlightedCopy:
    def test_saved_with_fills(self, make_xlsx):
        a = make_xlsx("a.xlsx", [["1", "2"], ["3", "4"]])
        b = make_xlsx("b.xlsx", [["1", "9"], ["0", "4"]])
        config = CompareConfig(color_sheet=True)
        result = compare_files(a, b, "Sheet1", "Sheet1", config)

        assert result.saved_path == b[: -len(".xlsx")] + ".diff.xlsx"
        ws = load_workbook(result.saved_path)["Sheet1"]
        for address in ("B1", "A2"):
            assert ws[address].fill.fill_type == "solid"
            assert ws[address].fill.start_color.rgb == "FFE0EBF5"
        for address in ("A1", "B2"):
            assert ws[address].fill.fill_type is None
        assert ws["B1"].value == "9"

        # The input itself is left alone.
        ws_b = load_workbook(b)["Sheet1"]
        assert ws_b["B1"].fill.fill_type is None

    def test_custom_color(self, make_xlsx):
        a = make_xlsx("a.xlsx", [["1"]])
        b = make_xlsx("b.xlsx", [["2"]])
        config = CompareConfig(color_sheet=True, color="#FFE0E0")
        result = compare_files(a, b, "Sheet1", "Sheet1", config)
        ws = load_workbook(result.saved_path)["Sheet1"]
        assert ws["A1"].fill.start_color.rgb == "FFFFE0E0"

    def test_formulas_are_kept(self, make_xlsx):
        a = make_xlsx("a.xlsx", [["1", '=LEN("a")', "z"]])
        b = make_xlsx("b.xlsx", [["2", '=LEN("a")', "z"]])
        config = CompareConfig(color_sheet=True)
        result = compare_files(a, b, "Sheet1", "Sheet1", config)
        assert [d.cell for d in result.diffs] == ["A1"]
        ws = load_workbook(result.saved_path)["Sheet1"]
        assert ws["B1"].value == '=LEN("a")'

    def test_not_saved_without_differences(self, make_xlsx, tmp_path):
        a = make_xlsx("a.xlsx", [["1", "2"]])
        b = make_xlsx("b.xlsx", [["1", "2"]])
        config = CompareConfig(color_sheet=True)
        result = compare_files(a, b, "Sheet1", "Sheet1", config)
        assert result.saved_path is None
        assert not os.path.exists(tmp_path / "b.diff.xlsx")
        assert sorted(os.listdir(tmp_path)) == ["a.xlsx", "b.xlsx"]

    def test_not_saved_when_disabled(self, make_xlsx, tmp_path):
        a = make_xlsx("a.xlsx", [["1"]])
        b = make_xlsx("b.xlsx", [["2"]])
        result = compare_files(a, b, "Sheet1", "Sheet1")
        assert result.saved_path is None
        assert not os.path.exists(tmp_path / "b.diff.xlsx")

    def test_bad_output_name_fails_early(self, make_xlsx, tmp_path):
        a = make_xlsx("a.xlsx", [["1"]])
        b = make_xlsx("b.xlsx", [["2"]])
        odd = tmp_path / "b.xlsm"
        os.rename(b, odd)
        config = CompareConfig(color_sheet=True)
        with pytest.raises(SaveError) as info:
            compare_files(a, str(odd), "Sheet1", "Sheet1", config)
        assert info.value.code == ErrCode.INVALID_OUTPUT_PATH
