"""Main CLI entry point for lh-avg."""

import json
import sys

import click
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from lh_avg import __version__
from lh_avg.core.exceptions import LhAvgError
from lh_avg.core.logging import configure_logging, get_logger
from lh_avg.core.settings import OUTPUT_FORMATS, get_cached_settings
from lh_avg.scoring import Result, ScoreAggregator

EXIT_SUCCESS = 0
EXIT_FAILURE = 1  # No score strings given
EXIT_ERROR = 2  # Invalid score string or configuration

COLUMNS = [
    ("perf", "Performance"),
    ("a11y", "Accessibility"),
    ("bp", "Best Practices"),
    ("seo", "SEO"),
    ("fnr", "Fast & Reliable"),
    ("ins", "Installable"),
    ("po", "PWA Optimized"),
    ("average", "Average"),
]


def _read_stdin() -> list[str]:
    """Read one score string per non-empty stdin line."""
    stream = click.get_text_stream("stdin")
    if stream.isatty():
        return []
    return [line.strip() for line in stream if line.strip()]


def _row_values(result: Result) -> list[str]:
    data = result.to_dict()
    flat = {**data, **data["pwa"]}
    return [str(flat[key]) for key, _ in COLUMNS]


def _create_results_table(
    score_strings: list[str], results: list[Result], show_diff: bool
) -> Table:
    """Create the table of results, one row per score string.

    Args:
        score_strings: Inputs, used as row labels.
        results: Results in input order.
        show_diff: Whether rows after the first hold differences.

    Returns:
        Configured Rich Table instance.
    """
    title = "Lighthouse Scores (diff against first row)" if show_diff else None
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Scores", style="dim")
    for _, header in COLUMNS:
        table.add_column(header, justify="right")

    for score_str, result in zip(score_strings, results):
        table.add_row(score_str, *_row_values(result))
    return table


@click.command(name="lh-avg")
@click.argument("scores", nargs=-1)
@click.option(
    "--perc",
    "-p",
    "as_percentage",
    is_flag=True,
    help="Show percentages instead of fractions",
)
@click.option(
    "--diff",
    "-d",
    "show_diff",
    is_flag=True,
    help="Show the difference between the first row and the subsequent ones",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(OUTPUT_FORMATS),
    default=None,
    help="Output format (default: table)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging on stderr",
)
@click.version_option(version=__version__, prog_name="lh-avg")
def cli(
    scores: tuple[str, ...],
    as_percentage: bool,
    show_diff: bool,
    output_format: str | None,
    verbose: bool,
) -> None:
    """LightHouse average calculator.

    SCORES are Lighthouse score strings of the form
    'perf / a11y / bp / seo / (fnr, ins, po)'. When none are given, one score
    string is read per line from stdin.

    Examples:

    \b
      lh-avg '14 / 100 / 98 / 100 / (1, 0, 6)'
      lh-avg -p '14/100/98/100/(1/3,0/3,6/7)'
      lh-avg -d -f json '14/100/98/100/(1,0,6)' '28/100/97/100/(1,2,6)'
    """
    try:
        settings = get_cached_settings()
    except ValidationError as e:
        click.echo(f"Error: invalid configuration: {e}", err=True)
        sys.exit(EXIT_ERROR)

    configure_logging(
        "DEBUG" if verbose else settings.log_level,
        json_output=settings.json_logs,
    )
    logger = get_logger(__name__)

    as_percentage = as_percentage or settings.as_percentage
    show_diff = show_diff or settings.show_diff
    output_format = output_format or settings.output_format

    score_strings = list(scores) or _read_stdin()
    if not score_strings:
        click.echo("Error: no score strings given", err=True)
        sys.exit(EXIT_FAILURE)

    logger.debug(
        "scores_received",
        count=len(score_strings),
        as_percentage=as_percentage,
        show_diff=show_diff,
    )

    aggregator = ScoreAggregator(denominators=settings.pwa)
    try:
        results = aggregator.average(score_strings, as_percentage, show_diff)
    except LhAvgError as e:
        logger.debug("score_parse_failed", error=str(e))
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_ERROR)

    logger.debug("scores_computed", count=len(results))

    if output_format == "json":
        click.echo(json.dumps([result.to_dict() for result in results], indent=2))
    else:
        console = Console()
        console.print(_create_results_table(score_strings, results, show_diff))

    sys.exit(EXIT_SUCCESS)


def main() -> None:
    """Run the lh-avg command."""
    cli()


if __name__ == "__main__":
    main()
