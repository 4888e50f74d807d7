"""Logged set model and set shapes."""

from dataclasses import dataclass
from enum import Enum

# Canonical order of the measurement fields. Shape keys join populated field
# names in this order, never alphabetically.
MEASUREMENT_FIELDS: tuple[str, ...] = ("weight", "reps", "distance", "time")


class ShapeKey(str, Enum):
    """Which measurement fields a set populates."""

    WEIGHT_REPS = "weight_reps"
    DISTANCE_TIME = "distance_time"
    WEIGHT_DISTANCE = "weight_distance"
    WEIGHT_TIME = "weight_time"
    REPS_DISTANCE = "reps_distance"
    REPS_TIME = "reps_time"
    WEIGHT = "weight"
    REPS = "reps"
    DISTANCE = "distance"
    TIME = "time"

    @property
    def fields(self) -> tuple[str, ...]:
        """Populated field names in canonical order."""
        return tuple(self.value.split("_"))

    @property
    def label(self) -> str:
        """Human-readable exercise type, e.g. "Weight And Reps"."""
        return " And ".join(name.capitalize() for name in self.fields)

    @classmethod
    def from_label(cls, label: str) -> "ShapeKey":
        """Look up a shape by its exercise type label."""
        for shape in cls:
            if shape.label.lower() == str(label).strip().lower():
                return shape
        raise ValueError(f"Unknown exercise type: {label!r}")

    @classmethod
    def parse(cls, value: str) -> "ShapeKey":
        """Accept either a shape key ("weight_reps") or a label ("Weight And Reps")."""
        try:
            return cls(value)
        except ValueError:
            return cls.from_label(value)


@dataclass(frozen=True)
class ExerciseSet:
    """A single logged set.

    Weight is in kilograms, distance in kilometres and time in seconds.
    A set that has not been stored yet has no id.
    """

    date: str
    exercise_id: int
    weight: float | None = None
    reps: int | None = None
    distance: float | None = None
    time: int | None = None
    notes: str | None = None
    id: int | None = None

    def populated_fields(self) -> tuple[str, ...]:
        """Names of the measurement fields that are not null."""
        return tuple(
            name for name in MEASUREMENT_FIELDS if getattr(self, name) is not None
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "id": self.id,
            "date": self.date,
            "exercise_id": self.exercise_id,
            "weight": self.weight,
            "reps": self.reps,
            "distance": self.distance,
            "time": self.time,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ExerciseSet":
        """Create from dictionary. Missing measurement keys are treated as null."""
        return cls(
            id=data.get("id"),
            date=data["date"],
            exercise_id=data["exercise_id"],
            weight=data.get("weight"),
            reps=data.get("reps"),
            distance=data.get("distance"),
            time=data.get("time"),
            notes=data.get("notes"),
        )
