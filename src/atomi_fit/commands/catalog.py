"""Exercise catalog commands."""

import click

from ..db import CategoryRepository, ExerciseRepository, SetRepository
from ..models.catalog import Category, Exercise
from ..models.sets import ShapeKey
from ..utils.formatting import hex_to_rgb
from .base import (
    async_command,
    colour_marker,
    echo_error,
    echo_info,
    echo_success,
    ensure_initialized,
    format_table,
    resolve_exercise,
)


async def _resolve_category(ctx: click.Context, category: str) -> Category:
    """Look up a category by ID or name, exiting if it does not exist."""
    repo = CategoryRepository()
    found = await repo.get(int(category)) if category.isdigit() else None
    if found is None:
        found = await repo.get_by_name(category)
    if found is None:
        echo_error(f"Category {category!r} not found")
        ctx.exit(1)
    return found


@click.command()
@click.pass_context
@async_command
async def categories(ctx: click.Context):
    """List exercise categories."""
    ensure_initialized(ctx)

    all_categories = await CategoryRepository().list_all()
    if not all_categories:
        echo_info("No categories found. Run 'atomi-fit init' to seed the catalog.")
        return

    rows = [
        [str(c.id), f"{colour_marker(c.colour)} {c.name}", c.colour]
        for c in all_categories
    ]
    click.echo()
    click.echo(format_table(["ID", "Category", "Colour"], rows))


@click.command()
@click.argument("category", required=False)
@click.option("--search", "-s", help="Only show exercises whose name contains this text")
@click.pass_context
@async_command
async def exercises(ctx: click.Context, category: str | None, search: str | None):
    """Browse exercises, optionally within a CATEGORY (name or ID)."""
    ensure_initialized(ctx)

    category_repo = CategoryRepository()
    exercise_repo = ExerciseRepository()

    category_id = None
    if category is not None:
        category_id = (await _resolve_category(ctx, category)).id

    if search:
        results = await exercise_repo.search(search, category_id)
    elif category_id is not None:
        results = await exercise_repo.list_by_category(category_id)
    else:
        results = await exercise_repo.list_all()

    if not results:
        echo_info("No exercises found")
        return

    names = {c.id: c.name for c in await category_repo.list_all()}
    rows = [
        [str(e.id), e.name, e.type.label, names.get(e.category_id, "-")]
        for e in results
    ]
    click.echo()
    click.echo(format_table(["ID", "Exercise", "Type", "Category"], rows))
    click.echo()
    click.echo(f"Total: {len(results)} exercise(s)")


@click.group()
def catalog():
    """Add, annotate and remove catalog entries."""
    pass


@catalog.command("add-category")
@click.argument("name")
@click.argument("colour")
@click.pass_context
@async_command
async def add_category(ctx: click.Context, name: str, colour: str):
    """Add a category NAME with a hex COLOUR such as "#60DD49"."""
    ensure_initialized(ctx)

    try:
        hex_to_rgb(colour)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="COLOUR") from None

    repo = CategoryRepository()
    if await repo.get_by_name(name) is not None:
        echo_error(f"Category {name!r} already exists")
        ctx.exit(1)

    category_id = await repo.add(Category(name=name, colour=f"#{colour.lstrip('#').upper()}"))
    echo_success(f"Added category {name} (ID {category_id})")


@catalog.command("add-exercise")
@click.argument("name")
@click.option(
    "--type",
    "-t",
    "shape",
    required=True,
    type=click.Choice([s.value for s in ShapeKey]),
    help="Which measurements the exercise's sets record",
)
@click.option("--category", "-c", required=True, help="Category name or ID")
@click.option("--notes", "-n", default="", help="Free-text notes")
@click.pass_context
@async_command
async def add_exercise(ctx: click.Context, name: str, shape: str, category: str, notes: str):
    """Add an exercise NAME to a category."""
    ensure_initialized(ctx)

    found = await _resolve_category(ctx, category)
    repo = ExerciseRepository()
    if await repo.get_by_name(name) is not None:
        echo_error(f"Exercise {name!r} already exists")
        ctx.exit(1)

    exercise = Exercise(name=name, type=ShapeKey(shape), category_id=found.id, notes=notes)
    exercise_id = await repo.add(exercise)
    echo_success(f"Added {name} ({exercise.type.label}) to {found.name} (ID {exercise_id})")


@catalog.command("notes")
@click.argument("exercise")
@click.argument("notes")
@click.pass_context
@async_command
async def set_notes(ctx: click.Context, exercise: str, notes: str):
    """Replace the notes of EXERCISE (name or ID)."""
    ensure_initialized(ctx)

    found = await resolve_exercise(ctx, exercise)
    await ExerciseRepository().update_notes(found.id, notes)
    echo_success(f"Notes updated for {found.name}")


@catalog.command("delete")
@click.argument("exercise")
@click.option("--force", "-f", is_flag=True, help="Skip confirmation")
@click.pass_context
@async_command
async def delete_exercise(ctx: click.Context, exercise: str, force: bool):
    """Delete EXERCISE (name or ID) and every set logged for it."""
    ensure_initialized(ctx)

    found = await resolve_exercise(ctx, exercise)
    if not force:
        logged = await SetRepository().history_for_exercise(found.id)
        click.echo(f"Exercise: {found.name} ({len(logged)} logged set(s))")
        if not click.confirm("Are you sure you want to delete this exercise?"):
            echo_info("Cancelled")
            return

    await ExerciseRepository().delete(found.id)
    echo_success(f"Exercise {found.name} deleted")
