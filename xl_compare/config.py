"""Settings that control a comparison run."""

from __future__ import annotations

import re

from attrs import define, field

from xl_compare.errors import ConfigurationError

DEFAULT_SHEET = "Sheet1"
DEFAULT_COLOR = "E0EBF5"

HEX_COLOR_RE = re.compile(r"[0-9A-F]{3}|[0-9A-F]{6}|[0-9A-F]{8}")


def parse_fill_color(value: str) -> str:
    """Turn the value of the color option into an ARGB fill color.

    Accepts "RGB", "RRGGBB" or "AARRGGBB" with an optional leading "#".
    Colors without alpha are made opaque.

    Raises:
        ConfigurationError: The value is not a hex color.
    """
    text = value.strip().lstrip("#").upper()
    if not HEX_COLOR_RE.fullmatch(text):
        raise ConfigurationError(
            f"Invalid color {value!r} for highlighting differences; "
            "expected RGB, RRGGBB or AARRGGBB hex digits"
        )
    if len(text) == 3:
        text = "".join(c * 2 for c in text)
    return text if len(text) == 8 else "FF" + text


@define(frozen=True, kw_only=True)
class CompareConfig:
    """Options of a comparison run.

    Attributes:
        sheet: Name of the sheet compared on both sides.
        print_diff: Report every difference instead of a count.
        color_sheet: Fill differing cells in the right workbook and save it
            under a new name.
        color: Fill color, stored in the 8-digit ARGB form.
    """

    sheet: str = field(default=DEFAULT_SHEET)
    print_diff: bool = False
    color_sheet: bool = False
    color: str = field(default=DEFAULT_COLOR, converter=parse_fill_color)

    @sheet.validator
    def _check_sheet(self, attribute, value):
        if not value:
            raise ConfigurationError("Sheet name must not be empty")
