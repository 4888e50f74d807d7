"""Interactive set entry via questionnaire."""

import questionary
from questionary import Style

from ...models.catalog import Exercise
from ...models.sets import ExerciseSet
from ...services.shapes import input_fields
from ...utils.formatting import parse_time

# Custom style for questionnaire
custom_style = Style(
    [
        ("qmark", "fg:#60DD49 bold"),
        ("question", "bold"),
        ("answer", "fg:#60DD49 bold"),
        ("pointer", "fg:#60DD49 bold"),
        ("highlighted", "fg:#60DD49 bold"),
        ("instruction", ""),
        ("text", ""),
    ]
)


def _is_number(value: str) -> bool | str:
    try:
        return float(value) >= 0 or "Must not be negative"
    except ValueError:
        return "Enter a number"


def _is_whole_number(value: str) -> bool | str:
    return value.strip().isdigit() or "Enter a whole number"


def _is_duration(value: str) -> bool | str:
    try:
        parse_time(value)
    except ValueError:
        return "Enter a time as HH:MM:SS, MM:SS or seconds"
    return True


# field -> (question, validator, converter)
FIELD_QUESTIONS = {
    "weight": ("Weight (kg):", _is_number, float),
    "reps": ("Reps:", _is_whole_number, int),
    "distance": ("Distance (km):", _is_number, float),
    "time": ("Time (HH:MM:SS):", _is_duration, parse_time),
}


class ManualSetInput:
    """Interactive questionnaire for logging one set."""

    async def collect_set(
        self, exercise: Exercise, date: str, notes: str | None = None
    ) -> ExerciseSet | None:
        """Ask for the measurements the exercise's type calls for.

        Notes are only asked for when none were given.

        Returns:
            The new (unsaved) set, or None if the user cancelled
        """
        print(f"\n=== {exercise.name} ({exercise.type.label}) ===\n")

        values: dict = {}
        for name in input_fields(exercise.type):
            question, validator, convert = FIELD_QUESTIONS[name]
            answer = await questionary.text(
                question,
                validate=validator,
                style=custom_style,
            ).ask_async()
            if answer is None:
                return None
            values[name] = convert(answer)

        if notes is None:
            notes = await questionary.text(
                "Notes (optional):",
                style=custom_style,
            ).ask_async()
            if notes is None:
                return None

        return ExerciseSet(
            date=date,
            exercise_id=exercise.id,
            notes=notes.strip() or None,
            **values,
        )
