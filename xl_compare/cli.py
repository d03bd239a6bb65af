import logging
from typing import Tuple

import click
from dotenv import load_dotenv

from xl_compare.__version__ import __version__
from xl_compare.config import DEFAULT_COLOR, DEFAULT_SHEET, CompareConfig
from xl_compare.errors import XlCompareError
from xl_compare.runner import PairResult, format_report, run_comparisons

ENV_PREFIX = "XL_COMPARE"

EXAMPLES = """
Example usage:

    Different file combinations to compare:
        xl-compare -a a.xlsx -b b.xlsx --sheet Sheet1
        xl-compare -a a.xlsx -b b.xlsx -a a2.xlsx -b b2.xlsx
        xl-compare -a 'folder_a/*.xlsx' -b 'folder_b/*.xlsx'

    See the diff in the console:
        xl-compare -a a.xlsx -b b.xlsx --print-diff

    Modify the color of cells where changes occurred in the B group:
        xl-compare -a a.xlsx -b b.xlsx --color-sheet
        xl-compare -a a.xlsx -b b.xlsx --color-sheet --color FFE0E0
"""


def setup_logging(debug: bool):
    """Sets up the logging for the CLI.

    Args:
        debug: If True, sets the logging level to DEBUG.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.debug("Debug mode is on")


@click.command()
@click.option("--debug/--no-debug", default=False)
@click.version_option(__version__, prog_name="xl-compare")
@click.option(
    "-a",
    "--files-a",
    "files_a",
    multiple=True,
    metavar="PATTERN",
    help="Left input files; repeat the option or use glob patterns.",
)
@click.option(
    "-b",
    "--files-b",
    "files_b",
    multiple=True,
    metavar="PATTERN",
    help="Right input files, paired in order with the left ones.",
)
@click.option(
    "--sheet",
    default=DEFAULT_SHEET,
    show_default=True,
    help="Sheet to compare.",
)
@click.option(
    "--print-diff",
    is_flag=True,
    default=False,
    help="Print the differences.",
)
@click.option(
    "--color-sheet",
    is_flag=True,
    default=False,
    help=(
        "Change the color of cells where changes occurred in the B group "
        "(saved to a new .diff.xlsx file)."
    ),
)
@click.option(
    "--color",
    default=DEFAULT_COLOR,
    show_default=True,
    help="Color to use for the cells that changed.",
)
@click.pass_context
def cli(
    context: click.Context,
    debug: bool,
    files_a: Tuple[str, ...],
    files_b: Tuple[str, ...],
    sheet: str,
    print_diff: bool,
    color_sheet: bool,
    color: str,
):
    """Compare the cells of a sheet across pairs of Excel workbooks."""
    setup_logging(debug)

    def before(path_a: str, path_b: str) -> None:
        click.echo(f"comparing {path_a} with {path_b}")

    try:
        config = CompareConfig(
            sheet=sheet,
            print_diff=print_diff,
            color_sheet=color_sheet,
            color=color,
        )

        def report(result: PairResult) -> None:
            for line in format_report(result, config):
                click.echo(line)

        run_comparisons(
            list(files_a),
            list(files_b),
            config,
            report=report,
            before=before,
        )
    except XlCompareError as e:
        click.echo(str(e))
        click.echo()
        click.echo(context.get_help())
        click.echo(EXAMPLES)
        context.exit(1)


def main():
    load_dotenv()
    cli(auto_envvar_prefix=ENV_PREFIX)


if __name__ == "__main__":
    main()
