"""Data models for atomi-fit."""

from .catalog import DEFAULT_CATEGORIES, DEFAULT_EXERCISES, Category, Exercise
from .sets import MEASUREMENT_FIELDS, ExerciseSet, ShapeKey
from .workout import (
    CategoryTag,
    ExerciseSetGroup,
    FlatRow,
    ListWorkout,
    ListWorkoutExercise,
)

__all__ = [
    "Category",
    "CategoryTag",
    "DEFAULT_CATEGORIES",
    "DEFAULT_EXERCISES",
    "Exercise",
    "ExerciseSet",
    "ExerciseSetGroup",
    "FlatRow",
    "ListWorkout",
    "ListWorkoutExercise",
    "MEASUREMENT_FIELDS",
    "ShapeKey",
]
