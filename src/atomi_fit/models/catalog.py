"""Exercise catalog: categories and exercises."""

from dataclasses import dataclass

from .sets import ShapeKey


@dataclass
class Category:
    """A coloured grouping of exercises, e.g. "Legs"."""

    name: str
    colour: str  # hex string, e.g. "#F5A623"
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"name": self.name, "colour": self.colour}

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "Category":
        """Create from dictionary."""
        return cls(id=id, name=data["name"], colour=data["colour"])


@dataclass
class Exercise:
    """A named activity with a declared set shape."""

    name: str
    type: ShapeKey
    category_id: int | None = None
    notes: str = ""
    id: int | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for storage."""
        return {
            "name": self.name,
            "type": self.type.label,
            "category_id": self.category_id,
            "notes": self.notes,
        }

    @classmethod
    def from_dict(cls, data: dict, id: int | None = None) -> "Exercise":
        """Create from dictionary. Accepts either a type label or a shape key."""
        return cls(
            id=id,
            name=data["name"],
            type=ShapeKey.parse(data["type"]),
            category_id=data.get("category_id"),
            notes=data.get("notes") or "",
        )


DEFAULT_CATEGORIES: list[Category] = [
    Category(name="Abs", colour="#F5D547"),
    Category(name="Back", colour="#4A90E2"),
    Category(name="Biceps", colour="#9B59B6"),
    Category(name="Cardio", colour="#E74C3C"),
    Category(name="Chest", colour="#F39C12"),
    Category(name="Legs", colour="#60DD49"),
    Category(name="Shoulders", colour="#1ABC9C"),
    Category(name="Triceps", colour="#E91E63"),
]

# (name, type, category name)
DEFAULT_EXERCISES: list[tuple[str, ShapeKey, str]] = [
    ("Crunch", ShapeKey.REPS, "Abs"),
    ("Plank", ShapeKey.TIME, "Abs"),
    ("Hanging Leg Raise", ShapeKey.REPS, "Abs"),
    ("Deadlift", ShapeKey.WEIGHT_REPS, "Back"),
    ("Barbell Row", ShapeKey.WEIGHT_REPS, "Back"),
    ("Pull Up", ShapeKey.REPS, "Back"),
    ("Lat Pulldown", ShapeKey.WEIGHT_REPS, "Back"),
    ("Barbell Curl", ShapeKey.WEIGHT_REPS, "Biceps"),
    ("Hammer Curl", ShapeKey.WEIGHT_REPS, "Biceps"),
    ("Running", ShapeKey.DISTANCE_TIME, "Cardio"),
    ("Cycling", ShapeKey.DISTANCE_TIME, "Cardio"),
    ("Rowing Machine", ShapeKey.DISTANCE_TIME, "Cardio"),
    ("Jump Rope", ShapeKey.REPS_TIME, "Cardio"),
    ("Swimming", ShapeKey.DISTANCE, "Cardio"),
    ("Bench Press", ShapeKey.WEIGHT_REPS, "Chest"),
    ("Incline Dumbbell Press", ShapeKey.WEIGHT_REPS, "Chest"),
    ("Push Up", ShapeKey.REPS, "Chest"),
    ("Squat", ShapeKey.WEIGHT_REPS, "Legs"),
    ("Leg Press", ShapeKey.WEIGHT_REPS, "Legs"),
    ("Walking Lunge", ShapeKey.REPS_DISTANCE, "Legs"),
    ("Sled Push", ShapeKey.WEIGHT_DISTANCE, "Legs"),
    ("Wall Sit", ShapeKey.WEIGHT_TIME, "Legs"),
    ("Overhead Press", ShapeKey.WEIGHT_REPS, "Shoulders"),
    ("Lateral Raise", ShapeKey.WEIGHT_REPS, "Shoulders"),
    ("Farmer's Carry", ShapeKey.WEIGHT_DISTANCE, "Shoulders"),
    ("Tricep Pushdown", ShapeKey.WEIGHT_REPS, "Triceps"),
    ("Dips", ShapeKey.REPS, "Triceps"),
    ("Skull Crusher", ShapeKey.WEIGHT_REPS, "Triceps"),
]
