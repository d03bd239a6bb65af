"""Expands the file lists and compares the files pair by pair."""

from __future__ import annotations

import glob
import logging
from typing import Callable, Iterable, Optional

from attrs import define, field

from xl_compare.cell_diff import CellDiff
from xl_compare.config import CompareConfig
from xl_compare.errors import ConfigurationError, GlobExpansionError
from xl_compare.file_diff import compare_files

logger = logging.getLogger(__name__)


@define(frozen=True)
class PairResult:
    """The outcome of comparing one pair of files.

    Attributes:
        path_a: The left file.
        path_b: The right file.
        diffs: Differences found between the two files.
        saved_path: The highlighted copy of the right file, if one was saved.
    """

    path_a: str
    path_b: str
    diffs: tuple[CellDiff, ...] = field(converter=tuple)
    saved_path: Optional[str] = None

    @property
    def identical(self) -> bool:
        return not self.diffs


def expand_globs(patterns: Iterable[str]) -> list[str]:
    """Replace each pattern by the files it matches.

    Matches of a pattern are sorted; the order of the patterns is kept.

    Raises:
        GlobExpansionError: A pattern is empty or matches no file.
    """
    result: list[str] = []
    for pattern in patterns:
        if not pattern:
            raise GlobExpansionError("Empty file pattern", pattern=pattern)
        matches = sorted(glob.glob(pattern))
        if not matches:
            raise GlobExpansionError(
                f"No files match {pattern}", pattern=pattern
            )
        logger.debug("Pattern %s matched %d files", pattern, len(matches))
        result.extend(matches)
    return result


def validate_file_lists(files_a: list[str], files_b: list[str]) -> None:
    """Check that both sides list the same, non-zero number of files.

    Raises:
        ConfigurationError: A side is empty or the lengths differ.
    """
    if not files_a or not files_b:
        raise ConfigurationError(
            "Must specify at least one file for each side"
        )
    if len(files_a) != len(files_b):
        raise ConfigurationError(
            "Length of files to compare don't match: "
            f"{len(files_a)} != {len(files_b)}"
        )


def format_report(result: PairResult, config: CompareConfig) -> list[str]:
    """Return the lines that describe the outcome of a pair."""
    if config.print_diff:
        return [str(d) for d in result.diffs]
    if result.diffs:
        return [f"found {len(result.diffs)} differences in '{config.sheet}'"]
    return ["Files were the same"]


def run_comparisons(
    files_a: list[str],
    files_b: list[str],
    config: CompareConfig,
    report: Optional[Callable[[PairResult], None]] = None,
    before: Optional[Callable[[str, str], None]] = None,
) -> list[PairResult]:
    """Compare every pair of files, in order.

    The first failure stops the run; pairs already compared have been
    reported through `report` by then.

    Args:
        files_a: Patterns for the left files.
        files_b: Patterns for the right files.
        config: Comparison options.
        report: Called with the result of each pair as soon as it is ready.
        before: Called with the two paths before each pair is compared.

    Returns:
        The results of all pairs.
    """
    validate_file_lists(files_a, files_b)
    paths_a = expand_globs(files_a)
    paths_b = expand_globs(files_b)
    validate_file_lists(paths_a, paths_b)

    results: list[PairResult] = []
    for path_a, path_b in zip(paths_a, paths_b):
        if before is not None:
            before(path_a, path_b)
        logger.debug("Comparing %s with %s", path_a, path_b)
        file_diff = compare_files(
            path_a, path_b, config.sheet, config.sheet, config
        )
        result = PairResult(
            path_a=path_a,
            path_b=path_b,
            diffs=file_diff.diffs,
            saved_path=file_diff.saved_path,
        )
        logger.info(
            "%s vs %s: %d differences", path_a, path_b, len(result.diffs)
        )
        results.append(result)
        if report is not None:
            report(result)
    return results
