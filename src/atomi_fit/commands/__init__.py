"""CLI commands for atomi-fit."""

from .calendar import calendar
from .catalog import catalog, categories, exercises
from .init import init
from .sets import log, sets
from .workouts import history, list_history, workout

__all__ = [
    "calendar",
    "catalog",
    "categories",
    "exercises",
    "history",
    "init",
    "list_history",
    "log",
    "sets",
    "workout",
]
