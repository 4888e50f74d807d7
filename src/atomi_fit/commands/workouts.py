"""Workout review commands: single day, history list and exercise history."""

import click

from ..db import SetRepository
from ..services.aggregation import (
    CategoryConflictError,
    group_by_date,
    group_sets_by_date,
    list_workouts,
)
from ..services.shapes import (
    UNRECOGNIZED_SET_TYPE,
    MalformedShapeError,
    describe_set_or_fallback,
    set_columns,
)
from ..utils.formatting import display_date, get_today
from .base import (
    async_command,
    category_tag,
    colour_marker,
    echo_error,
    echo_info,
    ensure_initialized,
    resolve_exercise,
    validate_date,
)


@click.command()
@click.argument("date", required=False, callback=validate_date)
@click.pass_context
@async_command
async def workout(ctx: click.Context, date: str | None):
    """Show every set logged on DATE (default: today), grouped by exercise."""
    ensure_initialized(ctx)

    today = get_today()
    day = date or today
    rows = await SetRepository().workout_rows(day)
    groups = group_by_date(rows).get(day, [])

    click.echo()
    click.echo(click.style(display_date(day, today), bold=True))
    click.echo("=" * 40)

    if not groups:
        echo_info("No workout logged on this day")
        return

    for group in groups:
        click.echo()
        click.echo(click.style(group.exercise_name, bold=True))
        for number, exercise_set in enumerate(group.sets, start=1):
            click.echo(f"  {number:>2}. {describe_set_or_fallback(exercise_set)}")


@click.command("list")
@click.pass_context
@async_command
async def list_history(ctx: click.Context):
    """List all workouts, newest first."""
    ensure_initialized(ctx)

    rows = await SetRepository().list_rows()
    try:
        workouts = list_workouts(rows)
    except CategoryConflictError as e:
        echo_error(str(e))
        ctx.exit(1)

    today = get_today()
    if not any(entry.date == today for entry in workouts):
        click.echo()
        click.echo(click.style("TODAY", bold=True))
        click.echo("  No workouts currently logged today")
        click.echo("  Log a set with 'atomi-fit log <exercise>'")

    for entry in workouts:
        click.echo()
        header = click.style(display_date(entry.date, today), bold=True)
        tags = " ".join(
            category_tag(tag.category_name, tag.category_colour) for tag in entry.categories
        )
        click.echo(f"{header}  {tags}")
        click.echo("-" * 40)
        for exercise in entry.exercises:
            click.echo(f"{colour_marker(exercise.category_colour)} {exercise.exercise_name}")
            for exercise_set in exercise.sets:
                click.echo(f"    {describe_set_or_fallback(exercise_set)}")


@click.command()
@click.argument("exercise")
@click.pass_context
@async_command
async def history(ctx: click.Context, exercise: str):
    """Show the full history of EXERCISE (name or ID), newest first."""
    ensure_initialized(ctx)

    found = await resolve_exercise(ctx, exercise)
    logged = await SetRepository().history_for_exercise(found.id)

    click.echo()
    click.echo(click.style(f"{found.name} ({found.type.label})", bold=True))
    click.echo("=" * 40)

    if not logged:
        echo_info("No sets logged yet")
        return

    today = get_today()
    for day, day_sets in group_sets_by_date(logged).items():
        click.echo()
        click.echo(click.style(display_date(day, today), bold=True))
        for exercise_set in day_sets:
            try:
                columns = "   ".join(
                    f"{value} {unit}".rstrip() for value, unit in set_columns(exercise_set)
                )
            except MalformedShapeError:
                columns = UNRECOGNIZED_SET_TYPE
            notes = click.style(f"  # {exercise_set.notes}", dim=True) if exercise_set.notes else ""
            click.echo(f"  {columns}{notes}")
