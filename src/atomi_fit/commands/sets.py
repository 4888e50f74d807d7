"""Set logging and tracking commands."""

from dataclasses import replace

import click

from ..clients.manual.client import ManualSetInput
from ..db import ExerciseRepository, SetRepository
from ..models.sets import MEASUREMENT_FIELDS, ExerciseSet
from ..services.shapes import (
    MalformedShapeError,
    ShapeMismatchError,
    classify,
    describe_set,
    describe_set_or_fallback,
    validate_for_exercise,
)
from ..utils.formatting import get_today, parse_time
from .base import (
    async_command,
    echo_error,
    echo_info,
    echo_success,
    echo_warning,
    ensure_initialized,
    resolve_exercise,
    validate_date,
)


def _parse_time_option(ctx: click.Context, param: click.Parameter, value: str | None) -> int | None:
    if value is None:
        return None
    try:
        return parse_time(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from None


def measurement_options(f):
    """Attach the --weight/--reps/--distance/--time/--notes options."""
    options = [
        click.option("--weight", "-w", type=click.FloatRange(min=0), help="Weight in kg"),
        click.option("--reps", "-r", type=click.IntRange(min=0), help="Repetitions"),
        click.option("--distance", "-d", type=click.FloatRange(min=0), help="Distance in km"),
        click.option(
            "--time", "-t", "time_", callback=_parse_time_option,
            help="Duration as HH:MM:SS, MM:SS or seconds",
        ),
        click.option("--notes", "-n", help="Free-text notes"),
    ]
    for option in reversed(options):
        f = option(f)
    return f


@click.command()
@click.argument("exercise")
@click.option("--date", callback=validate_date, help="Date as YYYY-MM-DD (default: today)")
@measurement_options
@click.pass_context
@async_command
async def log(
    ctx: click.Context,
    exercise: str,
    date: str | None,
    weight: float | None,
    reps: int | None,
    distance: float | None,
    time_: int | None,
    notes: str | None,
):
    """Log a set of EXERCISE (name or ID).

    Pass the measurements the exercise records as options, or leave them
    out to be asked for them interactively.

    Examples:

        atomi-fit log Squat --weight 100 --reps 5

        atomi-fit log Running --distance 5 --time 25:30
    """
    ensure_initialized(ctx)

    found = await resolve_exercise(ctx, exercise)
    day = date or get_today()

    if weight is None and reps is None and distance is None and time_ is None:
        new_set = await ManualSetInput().collect_set(found, day, notes=notes)
        if new_set is None:
            echo_info("Cancelled")
            return
    else:
        new_set = ExerciseSet(
            date=day,
            exercise_id=found.id,
            weight=weight,
            reps=reps,
            distance=distance,
            time=time_,
            notes=notes,
        )

    try:
        validate_for_exercise(new_set, found)
    except (MalformedShapeError, ShapeMismatchError) as e:
        echo_error(f"{found.name}: {e}")
        ctx.exit(1)

    repo = SetRepository()
    set_id = await repo.add(new_set)
    number = len(await repo.list_for_exercise_on_date(found.id, day))
    echo_success(
        f"Logged {found.name} set {number} on {day}: {describe_set(new_set)} (ID {set_id})"
    )


@click.group()
def sets():
    """View, edit and delete logged sets."""
    pass


@sets.command("show")
@click.argument("exercise")
@click.option("--date", callback=validate_date, help="Date as YYYY-MM-DD (default: today)")
@click.pass_context
@async_command
async def show_sets(ctx: click.Context, exercise: str, date: str | None):
    """Show the sets logged for EXERCISE on a date."""
    ensure_initialized(ctx)

    found = await resolve_exercise(ctx, exercise)
    day = date or get_today()

    logged = await SetRepository().list_for_exercise_on_date(found.id, day)
    click.echo()
    click.echo(click.style(f"{found.name} - {day}", bold=True))
    click.echo("-" * 40)

    if not logged:
        echo_info("No sets logged. Add one with 'atomi-fit log'.")
        return

    for number, exercise_set in enumerate(logged, start=1):
        line = f"  {number:>2}. {describe_set_or_fallback(exercise_set)}"
        line += click.style(f"  (ID {exercise_set.id})", dim=True)
        click.echo(line)
        if exercise_set.notes:
            click.echo(f"      {exercise_set.notes}")


@sets.command("edit")
@click.argument("set_id", type=int)
@measurement_options
@click.option(
    "--clear",
    type=click.Choice(MEASUREMENT_FIELDS + ("notes",)),
    multiple=True,
    help="Clear a field (repeatable)",
)
@click.pass_context
@async_command
async def edit_set(
    ctx: click.Context,
    set_id: int,
    weight: float | None,
    reps: int | None,
    distance: float | None,
    time_: int | None,
    notes: str | None,
    clear: tuple[str, ...],
):
    """Change the measurements of set SET_ID."""
    ensure_initialized(ctx)

    repo = SetRepository()
    existing = await repo.get(set_id)
    if existing is None:
        echo_error(f"Set ID {set_id} not found")
        ctx.exit(1)

    changes = {
        name: value
        for name, value in (
            ("weight", weight),
            ("reps", reps),
            ("distance", distance),
            ("time", time_),
            ("notes", notes),
        )
        if value is not None
    }
    both = sorted(set(changes) & set(clear))
    if both:
        raise click.UsageError(f"Cannot both set and clear: {', '.join(both)}")
    changes.update({name: None for name in clear})
    if not changes:
        echo_info("Nothing to change")
        return

    updated = replace(existing, **changes)
    exercise = await ExerciseRepository().get(updated.exercise_id)
    try:
        if exercise is not None:
            validate_for_exercise(updated, exercise)
        else:
            echo_warning(
                f"Exercise {updated.exercise_id} no longer exists; only checking the set type"
            )
            classify(updated)
    except (MalformedShapeError, ShapeMismatchError) as e:
        echo_error(str(e))
        ctx.exit(1)

    await repo.update(updated)
    echo_success(f"Set {set_id} updated: {describe_set(updated)}")


@sets.command("delete")
@click.argument("set_id", type=int)
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete_set(ctx: click.Context, set_id: int, force: bool):
    """Delete set SET_ID."""
    ensure_initialized(ctx)

    repo = SetRepository()
    existing = await repo.get(set_id)
    if existing is None:
        echo_error(f"Set ID {set_id} not found")
        ctx.exit(1)

    if not force:
        click.echo(f"Set: {describe_set_or_fallback(existing)} on {existing.date}")
        if not click.confirm("Are you sure you want to delete this set?"):
            echo_info("Cancelled")
            return

    await repo.delete(set_id)
    echo_success(f"Set {set_id} deleted")
