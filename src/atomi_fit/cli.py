"""CLI entry point for atomi-fit."""

import logging

import click

from .commands import (
    calendar,
    catalog,
    categories,
    exercises,
    history,
    init,
    list_history,
    log,
    sets,
    workout,
)
from .config import settings


@click.group()
@click.version_option(version="0.1.0", prog_name="atomi-fit")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """atomi-fit: log your training and review it by day, list or calendar.

    Example usage:

        # Initialize the database and exercise catalog
        atomi-fit init

        # Browse the catalog
        atomi-fit categories
        atomi-fit exercises Legs --search press

        # Log sets
        atomi-fit log Squat --weight 100 --reps 5
        atomi-fit log Running --distance 5 --time 25:30

        # Review
        atomi-fit workout
        atomi-fit list
        atomi-fit calendar --month 3
        atomi-fit history Squat
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(init)
main.add_command(categories)
main.add_command(exercises)
main.add_command(catalog)
main.add_command(log)
main.add_command(sets)
main.add_command(workout)
main.add_command(list_history)
main.add_command(history)
main.add_command(calendar)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
