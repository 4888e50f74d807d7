"""Data access layer for atomi-fit.

Repositories take the database path explicitly; nothing here is shared
between instances.
"""

import logging
from pathlib import Path

import aiosqlite

from ..models.catalog import Category, Exercise
from ..models.sets import ExerciseSet
from ..models.workout import FlatRow
from .engine import get_db_path

logger = logging.getLogger(__name__)

# Joined columns for FlatRow queries. Outer joins keep sets whose exercise or
# category has gone missing.
_FLAT_ROW_SELECT = """
    SELECT
        sets_data.id, sets_data.date, sets_data.exercise_id,
        sets_data.weight, sets_data.reps, sets_data.distance,
        sets_data.time, sets_data.notes,
        exercises.name AS exercise_name,
        categories.name AS category_name,
        categories.colour AS category_colour
    FROM sets_data
    LEFT JOIN exercises ON sets_data.exercise_id = exercises.id
    LEFT JOIN categories ON exercises.category_id = categories.id
"""


def _row_to_set(row: aiosqlite.Row) -> ExerciseSet:
    """Convert a database row to an ExerciseSet."""
    return ExerciseSet(
        id=row["id"],
        date=row["date"],
        exercise_id=row["exercise_id"],
        weight=row["weight"],
        reps=row["reps"],
        distance=row["distance"],
        time=row["time"],
        notes=row["notes"],
    )


def _row_to_flat_row(row: aiosqlite.Row) -> FlatRow:
    """Convert a joined database row to a FlatRow."""
    return FlatRow(
        set=_row_to_set(row),
        exercise_name=row["exercise_name"],
        category_name=row["category_name"],
        category_colour=row["category_colour"],
    )


class CategoryRepository:
    """Repository for exercise categories."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def list_all(self) -> list[Category]:
        """List all categories by name."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM categories ORDER BY name")
            rows = await cursor.fetchall()
            return [self._row_to_category(row) for row in rows]

    async def get(self, category_id: int) -> Category | None:
        """Get a category by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM categories WHERE id = ?", (category_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_category(row)

    async def get_by_name(self, name: str) -> Category | None:
        """Get a category by name (case-insensitive)."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM categories WHERE name = ? COLLATE NOCASE", (name,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_category(row)

    async def add(self, category: Category) -> int:
        """Add a new category."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                "INSERT INTO categories (name, colour) VALUES (?, ?)",
                (category.name, category.colour),
            )
            await db.commit()
            return cursor.lastrowid

    def _row_to_category(self, row: aiosqlite.Row) -> Category:
        """Convert a database row to a Category."""
        return Category(id=row["id"], name=row["name"], colour=row["colour"])


class ExerciseRepository:
    """Repository for the exercise catalog."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def get(self, exercise_id: int) -> Exercise | None:
        """Get an exercise by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE id = ?", (exercise_id,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_exercise(row)

    async def get_by_name(self, name: str) -> Exercise | None:
        """Get an exercise by name (case-insensitive)."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE name = ? COLLATE NOCASE", (name,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            return self._row_to_exercise(row)

    async def list_by_category(self, category_id: int) -> list[Exercise]:
        """List the exercises in a category."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT * FROM exercises WHERE category_id = ? ORDER BY name",
                (category_id,),
            )
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def list_all(self) -> list[Exercise]:
        """List all exercises."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM exercises ORDER BY name")
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def search(self, query: str, category_id: int | None = None) -> list[Exercise]:
        """Search exercises whose name contains the query."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            if category_id is not None:
                cursor = await db.execute(
                    """
                    SELECT * FROM exercises
                    WHERE name LIKE ? AND category_id = ?
                    ORDER BY name
                    """,
                    (f"%{query}%", category_id),
                )
            else:
                cursor = await db.execute(
                    "SELECT * FROM exercises WHERE name LIKE ? ORDER BY name",
                    (f"%{query}%",),
                )
            rows = await cursor.fetchall()
            return [self._row_to_exercise(row) for row in rows]

    async def add(self, exercise: Exercise) -> int:
        """Add a new exercise."""
        data = exercise.to_dict()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO exercises (name, notes, type, category_id)
                VALUES (?, ?, ?, ?)
                """,
                (data["name"], data["notes"], data["type"], data["category_id"]),
            )
            await db.commit()
            return cursor.lastrowid

    async def update_notes(self, exercise_id: int, notes: str) -> None:
        """Update an exercise's notes."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                "UPDATE exercises SET notes = ? WHERE id = ?", (notes, exercise_id)
            )
            await db.commit()

    async def delete(self, exercise_id: int) -> None:
        """Delete an exercise and its logged sets."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("PRAGMA foreign_keys = ON")
            await db.execute("DELETE FROM exercises WHERE id = ?", (exercise_id,))
            await db.commit()

    def _row_to_exercise(self, row: aiosqlite.Row) -> Exercise:
        """Convert a database row to an Exercise."""
        return Exercise.from_dict(
            {
                "name": row["name"],
                "type": row["type"],
                "category_id": row["category_id"],
                "notes": row["notes"],
            },
            id=row["id"],
        )


class SetRepository:
    """Repository for logged sets and the joined rows the views aggregate."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def add(self, exercise_set: ExerciseSet) -> int:
        """Log a new set."""
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute(
                """
                INSERT INTO sets_data
                (date, exercise_id, weight, reps, distance, time, notes)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    exercise_set.date,
                    exercise_set.exercise_id,
                    exercise_set.weight,
                    exercise_set.reps,
                    exercise_set.distance,
                    exercise_set.time,
                    exercise_set.notes,
                ),
            )
            await db.commit()
            logger.debug(
                "Logged set %s for exercise %s", cursor.lastrowid, exercise_set.exercise_id
            )
            return cursor.lastrowid

    async def get(self, set_id: int) -> ExerciseSet | None:
        """Get a set by ID."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute("SELECT * FROM sets_data WHERE id = ?", (set_id,))
            row = await cursor.fetchone()
            if row is None:
                return None
            return _row_to_set(row)

    async def update(self, exercise_set: ExerciseSet) -> None:
        """Update an existing set."""
        if exercise_set.id is None:
            raise ValueError("Set must have an ID to update")

        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                UPDATE sets_data SET
                    date = ?, exercise_id = ?, weight = ?, reps = ?,
                    distance = ?, time = ?, notes = ?
                WHERE id = ?
                """,
                (
                    exercise_set.date,
                    exercise_set.exercise_id,
                    exercise_set.weight,
                    exercise_set.reps,
                    exercise_set.distance,
                    exercise_set.time,
                    exercise_set.notes,
                    exercise_set.id,
                ),
            )
            await db.commit()

    async def delete(self, set_id: int) -> None:
        """Delete a set."""
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM sets_data WHERE id = ?", (set_id,))
            await db.commit()

    async def list_for_exercise_on_date(self, exercise_id: int, date: str) -> list[ExerciseSet]:
        """Sets logged for one exercise on one date, in logging order."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM sets_data
                WHERE exercise_id = ? AND date = ?
                ORDER BY id
                """,
                (exercise_id, date),
            )
            rows = await cursor.fetchall()
            return [_row_to_set(row) for row in rows]

    async def history_for_exercise(self, exercise_id: int) -> list[ExerciseSet]:
        """All sets for an exercise, newest date first, logging order within a date."""
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                """
                SELECT * FROM sets_data
                WHERE exercise_id = ?
                ORDER BY date DESC, id
                """,
                (exercise_id,),
            )
            rows = await cursor.fetchall()
            return [_row_to_set(row) for row in rows]

    async def workout_rows(self, date: str) -> list[FlatRow]:
        """Joined rows for a single date, in logging order."""
        return await self._fetch_rows(
            f"{_FLAT_ROW_SELECT} WHERE sets_data.date = ? ORDER BY sets_data.id",
            (date,),
        )

    async def list_rows(self) -> list[FlatRow]:
        """Joined rows for the history list, newest date first."""
        return await self._fetch_rows(
            f"{_FLAT_ROW_SELECT} ORDER BY sets_data.date DESC, sets_data.id"
        )

    async def calendar_rows(self, year: int | None = None) -> list[FlatRow]:
        """Joined rows for the calendar, optionally limited to one year."""
        if year is None:
            return await self._fetch_rows(
                f"{_FLAT_ROW_SELECT} ORDER BY sets_data.date, sets_data.id"
            )
        return await self._fetch_rows(
            f"""{_FLAT_ROW_SELECT}
            WHERE sets_data.date >= ? AND sets_data.date <= ?
            ORDER BY sets_data.date, sets_data.id""",
            (f"{year:04d}-01-01", f"{year:04d}-12-31"),
        )

    async def _fetch_rows(self, query: str, params: tuple = ()) -> list[FlatRow]:
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(query, params)
            rows = await cursor.fetchall()
            return [_row_to_flat_row(row) for row in rows]
