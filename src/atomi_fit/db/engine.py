"""Database engine setup and initialization."""

import logging
from pathlib import Path

import aiosqlite

from ..config import settings
from ..models.catalog import DEFAULT_CATEGORIES, DEFAULT_EXERCISES, Category

logger = logging.getLogger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path."""
    if data_dir is None:
        data_dir = settings.data_dir
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / "atomi_fit.db"


async def init_db(db_path: Path | None = None) -> None:
    """Initialize the database schema."""
    if db_path is None:
        db_path = get_db_path()

    async with aiosqlite.connect(db_path) as db:
        await db.execute("""
            CREATE TABLE IF NOT EXISTS categories (
                id INTEGER PRIMARY KEY,
                name TEXT NOT NULL UNIQUE,
                colour TEXT NOT NULL
            )
        """)

        await db.execute("""
            CREATE TABLE IF NOT EXISTS exercises (
                id INTEGER PRIMARY KEY,
                name TEXT NOT NULL UNIQUE,
                notes TEXT NOT NULL DEFAULT '',
                type TEXT NOT NULL,
                category_id INTEGER NOT NULL,
                FOREIGN KEY (category_id) REFERENCES categories(id)
            )
        """)

        # Logged sets; measurement columns are null when not recorded
        await db.execute("""
            CREATE TABLE IF NOT EXISTS sets_data (
                id INTEGER PRIMARY KEY,
                date TEXT NOT NULL,
                exercise_id INTEGER NOT NULL,
                weight REAL,
                reps INTEGER,
                distance REAL,
                time INTEGER,
                notes TEXT,
                FOREIGN KEY (exercise_id) REFERENCES exercises(id) ON DELETE CASCADE
            )
        """)

        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_sets_data_date
            ON sets_data(date)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_sets_data_exercise
            ON sets_data(exercise_id)
        """)
        await db.execute("""
            CREATE INDEX IF NOT EXISTS idx_exercises_category
            ON exercises(category_id)
        """)

        await db.commit()


async def seed_catalog(
    db_path: Path | None = None,
    categories: list[Category] | None = None,
    exercises: list[tuple] | None = None,
) -> int:
    """Seed categories and exercises, skipping names that already exist.

    Args:
        db_path: Optional database path. Uses default if not provided.
        categories: Categories to insert (defaults to DEFAULT_CATEGORIES)
        exercises: (name, type, category name[, notes]) tuples
            (defaults to DEFAULT_EXERCISES)

    Returns:
        Number of exercises inserted
    """
    if db_path is None:
        db_path = get_db_path()
    if categories is None:
        categories = DEFAULT_CATEGORIES
    if exercises is None:
        exercises = DEFAULT_EXERCISES

    async with aiosqlite.connect(db_path) as db:
        for category in categories:
            await db.execute(
                "INSERT OR IGNORE INTO categories (name, colour) VALUES (?, ?)",
                (category.name, category.colour),
            )

        cursor = await db.execute("SELECT id, name FROM categories")
        category_ids = {name: id for id, name in await cursor.fetchall()}

        count = 0
        for entry in exercises:
            name, shape, category_name = entry[:3]
            notes = entry[3] if len(entry) > 3 else ""
            category_id = category_ids.get(category_name)
            if category_id is None:
                logger.warning(
                    "Skipping exercise %s: unknown category %s", name, category_name
                )
                continue

            cursor = await db.execute(
                """
                INSERT OR IGNORE INTO exercises (name, notes, type, category_id)
                VALUES (?, ?, ?, ?)
                """,
                (name, notes, shape.label, category_id),
            )
            count += cursor.rowcount

        await db.commit()

    return count
