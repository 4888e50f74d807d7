"""Flat query rows and the grouped view models built from them."""

from dataclasses import dataclass

from .sets import ExerciseSet


@dataclass(frozen=True)
class FlatRow:
    """A logged set joined with its exercise and category.

    The joins are outer joins, so the exercise and category columns are None
    when the referenced row has been deleted.
    """

    set: ExerciseSet
    exercise_name: str | None = None
    category_name: str | None = None
    category_colour: str | None = None

    @property
    def date(self) -> str:
        return self.set.date

    @property
    def exercise_id(self) -> int:
        return self.set.exercise_id


@dataclass(frozen=True)
class ExerciseSetGroup:
    """All sets logged for one exercise on one date, in logging order."""

    exercise_id: int
    exercise_name: str
    sets: tuple[ExerciseSet, ...] = ()

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "exercise_id": self.exercise_id,
            "exercise_name": self.exercise_name,
            "sets": [s.to_dict() for s in self.sets],
        }


@dataclass(frozen=True)
class ListWorkoutExercise:
    """An exercise group in the history list, tagged with its category."""

    exercise_id: int
    exercise_name: str
    category_name: str
    category_colour: str
    sets: tuple[ExerciseSet, ...] = ()

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "exercise_id": self.exercise_id,
            "exercise_name": self.exercise_name,
            "category_name": self.category_name,
            "category_colour": self.category_colour,
            "sets": [s.to_dict() for s in self.sets],
        }


@dataclass(frozen=True)
class CategoryTag:
    """A category name and colour shown in a workout's tag row."""

    category_name: str
    category_colour: str


@dataclass(frozen=True)
class ListWorkout:
    """One date in the history list."""

    date: str
    exercises: tuple[ListWorkoutExercise, ...] = ()
    categories: tuple[CategoryTag, ...] = ()

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "date": self.date,
            "exercises": [e.to_dict() for e in self.exercises],
            "categories": [
                {"category_name": c.category_name, "category_colour": c.category_colour}
                for c in self.categories
            ],
        }
