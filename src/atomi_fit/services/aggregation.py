"""Group flat set rows into the workout, list and calendar view models.

Every function here reads its input once and returns freshly built
structures. Rows are consumed in the order given; that order is the only
record of the sequence in which sets were logged, so callers should pass rows
sorted by set id within a date.

Rows whose exercise or category join came back empty (the referenced row was
deleted) are skipped from any output that needs the missing name.
"""

import logging
from typing import Iterable

from ..models.sets import ExerciseSet
from ..models.workout import (
    CategoryTag,
    ExerciseSetGroup,
    FlatRow,
    ListWorkout,
    ListWorkoutExercise,
)

logger = logging.getLogger(__name__)


class CategoryConflictError(ValueError):
    """One category name appeared with two different colours on a date."""

    def __init__(self, date: str, category_name: str, colours: tuple[str, str]):
        self.date = date
        self.category_name = category_name
        self.colours = colours
        super().__init__(
            f"Category {category_name!r} on {date} has conflicting colours "
            f"{colours[0]} and {colours[1]}"
        )


class _GroupBuilder:
    """Mutable accumulator for one exercise group while rows are consumed."""

    __slots__ = ("exercise_id", "exercise_name", "category_name", "category_colour", "sets")

    def __init__(self, row: FlatRow):
        self.exercise_id = row.exercise_id
        self.exercise_name = row.exercise_name
        self.category_name = row.category_name
        self.category_colour = row.category_colour
        self.sets: list[ExerciseSet] = [row.set]


def _group_rows(
    rows: Iterable[FlatRow], require_category: bool
) -> dict[str, list[_GroupBuilder]]:
    grouped: dict[str, list[_GroupBuilder]] = {}
    # (date, exercise_id) -> builder, so lookups don't rescan the date's list
    index: dict[tuple[str, int], _GroupBuilder] = {}

    for row in rows:
        if row.exercise_name is None or (require_category and row.category_name is None):
            logger.debug(
                "Skipping set %s on %s: exercise %s has no joined %s",
                row.set.id,
                row.date,
                row.exercise_id,
                "name" if row.exercise_name is None else "category",
            )
            continue

        key = (row.date, row.exercise_id)
        builder = index.get(key)
        if builder is not None:
            builder.sets.append(row.set)
            continue

        builder = _GroupBuilder(row)
        index[key] = builder
        grouped.setdefault(row.date, []).append(builder)

    return grouped


def group_by_date(rows: Iterable[FlatRow]) -> dict[str, list[ExerciseSetGroup]]:
    """Group rows by date, then by exercise id.

    Dates and exercise groups appear in first-seen order and each group's
    sets keep encounter order. Groups are keyed on exercise id, so two
    exercises sharing a name stay separate.
    """
    return {
        date: [
            ExerciseSetGroup(
                exercise_id=b.exercise_id,
                exercise_name=b.exercise_name,
                sets=tuple(b.sets),
            )
            for b in builders
        ]
        for date, builders in _group_rows(rows, require_category=False).items()
    }


def group_by_date_with_category(
    rows: Iterable[FlatRow],
) -> dict[str, list[ListWorkoutExercise]]:
    """Group rows like group_by_date, carrying each exercise's category."""
    return {
        date: [
            ListWorkoutExercise(
                exercise_id=b.exercise_id,
                exercise_name=b.exercise_name,
                category_name=b.category_name,
                category_colour=b.category_colour,
                sets=tuple(b.sets),
            )
            for b in builders
        ]
        for date, builders in _group_rows(rows, require_category=True).items()
    }


def category_summary(
    exercises: Iterable[ListWorkoutExercise], date: str = ""
) -> list[CategoryTag]:
    """Distinct categories of a date's exercises, in order of first occurrence.

    Raises:
        CategoryConflictError: If a category name is seen with two colours
    """
    seen: dict[str, CategoryTag] = {}
    for exercise in exercises:
        existing = seen.get(exercise.category_name)
        if existing is None:
            seen[exercise.category_name] = CategoryTag(
                category_name=exercise.category_name,
                category_colour=exercise.category_colour,
            )
        elif existing.category_colour != exercise.category_colour:
            raise CategoryConflictError(
                date,
                exercise.category_name,
                (existing.category_colour, exercise.category_colour),
            )
    return list(seen.values())


def list_workouts(rows: Iterable[FlatRow]) -> list[ListWorkout]:
    """Build the history list: one entry per date with its category tags."""
    return [
        ListWorkout(
            date=date,
            exercises=tuple(exercises),
            categories=tuple(category_summary(exercises, date)),
        )
        for date, exercises in group_by_date_with_category(rows).items()
    ]


def by_day(rows: Iterable[FlatRow]) -> dict[str, list[str]]:
    """Category colours present on each date, for calendar day markers.

    Colours are deduplicated per date by category, independent of exercise.
    Rows without a joined category are skipped.

    Raises:
        CategoryConflictError: If a category name is seen with two colours
    """
    days: dict[str, dict[str, str]] = {}
    for row in rows:
        if row.category_name is None or row.category_colour is None:
            logger.debug(
                "Skipping set %s on %s: no joined category", row.set.id, row.date
            )
            continue

        categories = days.setdefault(row.date, {})
        colour = categories.get(row.category_name)
        if colour is None:
            categories[row.category_name] = row.category_colour
        elif colour != row.category_colour:
            raise CategoryConflictError(
                row.date, row.category_name, (colour, row.category_colour)
            )

    return {date: list(categories.values()) for date, categories in days.items()}


def group_sets_by_date(sets: Iterable[ExerciseSet]) -> dict[str, tuple[ExerciseSet, ...]]:
    """Group one exercise's sets by date, keeping encounter order."""
    grouped: dict[str, list[ExerciseSet]] = {}
    for exercise_set in sets:
        grouped.setdefault(exercise_set.date, []).append(exercise_set)
    return {date: tuple(date_sets) for date, date_sets in grouped.items()}
