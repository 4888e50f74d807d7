"""Initialize project command."""

from pathlib import Path

import click

from ..config import settings
from ..data.catalog_loader import seed_catalog_from_json
from ..db import get_db_path, init_db, seed_catalog
from .base import async_command, echo_info, echo_success


@click.command()
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Seed exercises from a catalog JSON file instead of the built-in list",
)
@async_command
async def init(catalog_path: Path | None):
    """Initialize the atomi-fit database.

    This creates the data directory and initializes the SQLite database
    with the schema and the exercise catalog. Running it again is safe:
    existing categories and exercises are kept.
    """
    data_dir = settings.data_dir
    db_path = get_db_path(data_dir)

    echo_info(f"Initializing atomi-fit in {data_dir}")

    await init_db(db_path)
    echo_success("Database initialized")

    if catalog_path is not None:
        count = await seed_catalog_from_json(catalog_path, db_path)
        echo_success(f"Exercise catalog populated ({count} exercises from {catalog_path.name})")
    else:
        count = await seed_catalog(db_path)
        echo_success(f"Exercise catalog populated ({count} new exercises)")

    click.echo()
    click.echo("atomi-fit is ready to use!")
    click.echo()
    click.echo("Next steps:")
    click.echo("  1. Find an exercise:")
    click.echo("     atomi-fit categories")
    click.echo("     atomi-fit exercises Legs")
    click.echo()
    click.echo("  2. Log a set:")
    click.echo('     atomi-fit log "Squat" --weight 100 --reps 5')
    click.echo()
    click.echo("  3. Review your training:")
    click.echo("     atomi-fit list")
    click.echo("     atomi-fit calendar")
