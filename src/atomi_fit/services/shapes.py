"""Set shape classification and the per-shape display and input strategies."""

import logging
from typing import Callable

from ..models.catalog import Exercise
from ..models.sets import ExerciseSet, ShapeKey
from ..utils.formatting import distance_display, format_number, format_time

logger = logging.getLogger(__name__)

UNRECOGNIZED_SET_TYPE = "UNRECOGNIZED SET TYPE"


class MalformedShapeError(ValueError):
    """A set populates a combination of fields that is not a known shape."""

    def __init__(self, fields: tuple[str, ...], set_id: int | None = None):
        self.fields = fields
        self.set_id = set_id
        populated = ", ".join(fields) if fields else "no measurement fields"
        super().__init__(f"Unrecognized set shape (set {set_id}): {populated}")


class ShapeMismatchError(ValueError):
    """A set's shape does not match its exercise's declared type."""

    def __init__(self, expected: ShapeKey, actual: ShapeKey):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Expected a {expected.label} set, got {actual.label}"
        )


def classify(exercise_set: ExerciseSet) -> ShapeKey:
    """Determine which shape a set has.

    Populated field names are joined with "_" in the fixed order
    weight, reps, distance, time.

    Raises:
        MalformedShapeError: If the populated fields are not one of the ten shapes
    """
    fields = exercise_set.populated_fields()
    try:
        return ShapeKey("_".join(fields))
    except ValueError:
        raise MalformedShapeError(fields, exercise_set.id) from None


def _require_all_shapes(table: dict, name: str) -> None:
    missing = [shape.value for shape in ShapeKey if shape not in table]
    if missing:
        raise RuntimeError(f"{name} has no entry for: {', '.join(missing)}")


def _kg(s: ExerciseSet) -> str:
    return f"{format_number(s.weight)} KG"


def _reps(s: ExerciseSet) -> str:
    return f"{s.reps} REPS"


def _dist(s: ExerciseSet) -> str:
    return distance_display(s.distance)


def _time(s: ExerciseSet) -> str:
    return format_time(s.time)


_SUMMARIES: dict[ShapeKey, Callable[[ExerciseSet], str]] = {
    ShapeKey.WEIGHT_REPS: lambda s: f"{_kg(s)} x {_reps(s)}",
    ShapeKey.DISTANCE_TIME: lambda s: f"{_dist(s)} - {_time(s)}",
    ShapeKey.WEIGHT_DISTANCE: lambda s: f"{_kg(s)} - {_dist(s)}",
    ShapeKey.WEIGHT_TIME: lambda s: f"{_kg(s)} - {_time(s)}",
    ShapeKey.REPS_DISTANCE: lambda s: f"{_reps(s)} - {_dist(s)}",
    ShapeKey.REPS_TIME: lambda s: f"{_reps(s)} - {_time(s)}",
    ShapeKey.WEIGHT: _kg,
    ShapeKey.REPS: _reps,
    ShapeKey.DISTANCE: _dist,
    ShapeKey.TIME: _time,
}

# field -> (value formatter, unit label)
_COLUMNS: dict[str, tuple[Callable[[ExerciseSet], str], str]] = {
    "weight": (lambda s: format_number(s.weight), "Kg"),
    "reps": (lambda s: str(s.reps), "Reps"),
    "distance": (lambda s: format_number(s.distance), "Km"),
    "time": (lambda s: format_time(s.time), ""),
}

_INPUT_PROMPTS: dict[ShapeKey, tuple[str, ...]] = {
    shape: shape.fields for shape in ShapeKey
}

_require_all_shapes(_SUMMARIES, "Set summary table")
_require_all_shapes(_INPUT_PROMPTS, "Input field table")


def describe_set(exercise_set: ExerciseSet) -> str:
    """One-line summary of a set, e.g. "100 KG x 5 REPS".

    Raises:
        MalformedShapeError: If the set has no recognized shape
    """
    return _SUMMARIES[classify(exercise_set)](exercise_set)


def describe_set_or_fallback(exercise_set: ExerciseSet) -> str:
    """Like describe_set, but renders an indicator for unrecognized sets."""
    try:
        return describe_set(exercise_set)
    except MalformedShapeError as e:
        logger.warning("%s", e)
        return UNRECOGNIZED_SET_TYPE


def set_columns(exercise_set: ExerciseSet) -> list[tuple[str, str]]:
    """Value and unit pairs for the exercise history view.

    Raises:
        MalformedShapeError: If the set has no recognized shape
    """
    shape = classify(exercise_set)
    return [
        (_COLUMNS[name][0](exercise_set), _COLUMNS[name][1]) for name in shape.fields
    ]


def input_fields(shape: ShapeKey) -> tuple[str, ...]:
    """Measurement fields to ask for when logging a set of this shape."""
    return _INPUT_PROMPTS[shape]


def validate_for_exercise(exercise_set: ExerciseSet, exercise: Exercise) -> ShapeKey:
    """Check that a set matches the type its exercise declares.

    Returns:
        The set's shape

    Raises:
        MalformedShapeError: If the set has no recognized shape
        ShapeMismatchError: If the shape differs from the exercise type
    """
    shape = classify(exercise_set)
    if shape != exercise.type:
        raise ShapeMismatchError(exercise.type, shape)
    return shape
