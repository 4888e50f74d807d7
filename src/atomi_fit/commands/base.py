"""Shared CLI utilities."""

import asyncio
from datetime import date
from functools import wraps

import click

from ..db import ExerciseRepository, get_db_path
from ..models.catalog import Exercise
from ..utils.formatting import hex_to_rgb, hexcode_luminosity


def async_command(f):
    """Decorator to run async Click commands."""

    @wraps(f)
    def wrapper(*args, **kwargs):
        return asyncio.run(f(*args, **kwargs))

    return wrapper


def ensure_initialized(ctx: click.Context) -> None:
    """Ensure the database is initialized."""
    if not get_db_path().exists():
        echo_error("No database found. Run 'atomi-fit init' first.")
        ctx.exit(1)


def validate_date(ctx: click.Context, param: click.Parameter, value: str | None) -> str | None:
    """Click callback accepting YYYY-MM-DD dates."""
    if value is None:
        return None
    try:
        return date.fromisoformat(value).isoformat()
    except ValueError:
        raise click.BadParameter("expected a date as YYYY-MM-DD") from None


async def resolve_exercise(ctx: click.Context, exercise: str) -> Exercise:
    """Look up an exercise by ID or name, exiting if it does not exist."""
    repo = ExerciseRepository()
    found = await repo.get(int(exercise)) if exercise.isdigit() else None
    if found is None:
        found = await repo.get_by_name(exercise)
    if found is None:
        echo_error(f"Exercise {exercise!r} not found")
        ctx.exit(1)
    return found


def colour_marker(hex_colour: str | None, marker: str = "●") -> str:
    """A marker styled in a category colour (plain if the colour is invalid)."""
    if hex_colour is None:
        return marker
    try:
        return click.style(marker, fg=hex_to_rgb(hex_colour))
    except ValueError:
        return marker


def category_tag(name: str, hex_colour: str | None) -> str:
    """A category name on its colour, in a darker shade of the same colour."""
    if hex_colour is None:
        return name
    try:
        return click.style(
            f" {name} ",
            fg=hex_to_rgb(hexcode_luminosity(hex_colour, -120)),
            bg=hex_to_rgb(hex_colour),
            bold=True,
        )
    except ValueError:
        return name


def echo_success(message: str) -> None:
    """Print a success message."""
    click.echo(click.style("[OK] ", fg="green") + message)


def echo_error(message: str) -> None:
    """Print an error message."""
    click.echo(click.style("[ERROR] ", fg="red") + message)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(click.style("[INFO] ", fg="blue") + message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.echo(click.style("[WARN] ", fg="yellow") + message)


def format_table(headers: list[str], rows: list[list[str]], padding: int = 2) -> str:
    """Format data as a simple table."""
    if not rows:
        return ""

    widths = [len(h) for h in headers]
    for row in rows:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(click.unstyle(str(cell))))

    def render(cells: list[str]) -> str:
        line = ""
        for i, cell in enumerate(cells):
            text = str(cell)
            line += text + " " * (widths[i] + padding - len(click.unstyle(text)))
        return line.rstrip()

    lines = [render(headers)]
    lines.append("".join("-" * w + " " * padding for w in widths).rstrip())
    lines.extend(render(row) for row in rows)
    return "\n".join(lines)
