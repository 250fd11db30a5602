"""
Statistics Commands
-------------------

The three statistics screens rendered as text, and the Markdown export.

Commands:
    - history: Month calendar with memo markers and the yearly heatmap
    - summary: Total and monthly counts, last 7 days, monthly series
    - keywords: Keyword breakdown for a period and all-time top keywords
    - export: Write the dashboard to stats.md
"""
from datetime import date
from pathlib import Path

import click

from reflog.builders.dashboard import StatisticsScreen, export_stats
from reflog.core.exceptions import DatabaseError
from reflog.core.logging_manager import handle_cli_error
from reflog.core.paths import STATS_PATH
from reflog.stats.aggregation import Period
from reflog.stats.calendar import picker_years, recent_years, shift_month
from . import memo_workspace


def load_screen(ctx) -> StatisticsScreen:
    """Statistics screen holding the memos announced by the collection."""
    screen = StatisticsScreen()
    with memo_workspace(ctx) as (_db, collection):
        screen.attach(collection.bus)
        collection.announce()
        screen.detach()
    return screen


@click.group()
@click.pass_context
def stats(ctx: click.Context) -> None:
    """Writing statistics."""
    pass


@stats.command("history")
@click.option("--year", type=int, help="Calendar year (default: this year)")
@click.option("--month", type=click.IntRange(1, 12), help="Calendar month (default: this month)")
@click.option("--shift", type=int, default=0, help="Move the calendar by N months")
@click.option("--heatmap-year", type=int, help="Heatmap year (default: calendar year)")
@click.pass_context
def history(ctx, year, month, shift, heatmap_year):
    """Month calendar and yearly activity heatmap."""
    today = date.today()
    year, month = shift_month(year or today.year, month or today.month, shift)

    if year not in picker_years(today):
        raise click.BadParameter(f"{year} is outside the supported range", param_hint="--year")
    if heatmap_year is not None and heatmap_year not in recent_years(today):
        raise click.BadParameter(
            f"heatmap covers the last ten years only ({min(recent_years(today))}-{today.year})",
            param_hint="--heatmap-year",
        )

    try:
        screen = load_screen(ctx)
        for line in screen.history(year, month, heatmap_year):
            click.echo(line)

    except DatabaseError as e:
        handle_cli_error(ctx, e, "stats_history")


@stats.command("summary")
@click.pass_context
def summary(ctx):
    """Memo counts and activity charts."""
    try:
        screen = load_screen(ctx)
        for line in screen.memo_stats():
            click.echo(line)

    except DatabaseError as e:
        handle_cli_error(ctx, e, "stats_summary")


@stats.command("keywords")
@click.option(
    "--period",
    type=click.Choice([p.value for p in Period]),
    default=Period.YEAR.value,
    show_default=True,
    help="Window of the keyword breakdown",
)
@click.option("--all", "show_all", is_flag=True, help="List every keyword, not just the top 5")
@click.pass_context
def keywords(ctx, period, show_all):
    """Keyword breakdown and top keywords."""
    try:
        screen = load_screen(ctx)
        for line in screen.keyword_stats(Period(period), show_all):
            click.echo(line)

    except DatabaseError as e:
        handle_cli_error(ctx, e, "stats_keywords", additional_context={"period": period})


@stats.command("export")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    default=str(STATS_PATH),
    help="Markdown file to write",
)
@click.option("--force", is_flag=True, help="Rewrite even if unchanged")
@click.pass_context
def export(ctx, output, force):
    """Export the statistics dashboard to Markdown."""
    try:
        screen = load_screen(ctx)
        status = export_stats(
            screen.memos, Path(output), force=force, logger=ctx.obj.get("logger")
        )
        click.echo(f"📊 {output}: {status}")

    except DatabaseError as e:
        handle_cli_error(ctx, e, "stats_export", additional_context={"output": output})
