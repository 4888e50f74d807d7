"""Database layer for atomi-fit."""

from .engine import get_db_path, init_db, seed_catalog
from .repositories import (
    CategoryRepository,
    ExerciseRepository,
    SetRepository,
)

__all__ = [
    "CategoryRepository",
    "ExerciseRepository",
    "get_db_path",
    "init_db",
    "seed_catalog",
    "SetRepository",
]
