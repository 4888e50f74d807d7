"""Calendar view command."""

from datetime import date

import click

from ..config import settings
from ..db import SetRepository
from ..services.aggregation import CategoryConflictError, by_day
from ..utils.calendar_grid import chunk_weeks, days_in_month_grid, month_names, weekday_names
from .base import async_command, colour_marker, echo_error, ensure_initialized

CELL_WIDTH = 5
MAX_MARKERS = 3


def _marker_cell(colours: list[str]) -> str:
    shown = [colour_marker(c, "•") for c in colours[:MAX_MARKERS]]
    if len(colours) > MAX_MARKERS:
        shown[-1] = "+"
    return " " + "".join(shown) + " " * (CELL_WIDTH - 1 - len(shown))


def render_month(
    year: int,
    month: int,
    markers: dict[str, list[str]],
    start_of_week: int = 1,
    today: date | None = None,
) -> list[str]:
    """Render one month as lines of text with category markers under each day."""
    lines = [click.style(f"{month_names()[month - 1]} {year}", bold=True)]
    lines.append(
        "".join(
            name[:3].upper().rjust(CELL_WIDTH - 1) + " "
            for name in weekday_names(start_of_week)
        ).rstrip()
    )

    for week in chunk_weeks(days_in_month_grid(year, month, start_of_week)):
        day_line = ""
        marker_line = ""
        for day in week:
            if day is None:
                day_line += " " * CELL_WIDTH
                marker_line += " " * CELL_WIDTH
                continue

            cell = f"{day:>{CELL_WIDTH - 1}} "
            if today is not None and today == date(year, month, day):
                cell = click.style(cell, reverse=True)
            day_line += cell
            marker_line += _marker_cell(markers.get(f"{year:04d}-{month:02d}-{day:02d}", []))

        lines.append(day_line.rstrip())
        lines.append(marker_line.rstrip())

    return lines


@click.command()
@click.option("--year", "-y", type=int, help="Year to show (default: this year)")
@click.option("--month", "-m", type=click.IntRange(1, 12), help="Only show one month")
@click.pass_context
@async_command
async def calendar(ctx: click.Context, year: int | None, month: int | None):
    """Show a calendar with a coloured marker per category trained each day."""
    ensure_initialized(ctx)

    today = date.today()
    year = year or today.year

    rows = await SetRepository().calendar_rows(year)
    try:
        markers = by_day(rows)
    except CategoryConflictError as e:
        echo_error(str(e))
        ctx.exit(1)

    months = [month] if month else range(1, 13)
    for m in months:
        click.echo()
        for line in render_month(year, m, markers, settings.week_start, today):
            click.echo(line)
