"""Pytest configuration and fixtures."""

import asyncio
import tempfile
from pathlib import Path

import pytest
import questionary

from atomi_fit.config import settings
from atomi_fit.db import init_db, seed_catalog
from atomi_fit.models.sets import ExerciseSet
from atomi_fit.models.workout import FlatRow


@pytest.fixture
def temp_db_path():
    """Create a temporary database path."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture
def seeded_db_path(temp_db_path):
    """A database with the schema and the default catalog."""
    asyncio.run(init_db(temp_db_path))
    asyncio.run(seed_catalog(temp_db_path))
    return temp_db_path


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    """Point the application data directory at a temporary directory."""
    monkeypatch.setattr(settings, "data_dir", tmp_path)
    return tmp_path


def build_row(
    set_id: int,
    date: str,
    exercise_id: int,
    exercise_name: str | None,
    category_name: str | None = None,
    category_colour: str | None = None,
    **measurements,
) -> FlatRow:
    """Build a joined row for aggregation tests."""
    return FlatRow(
        set=ExerciseSet(id=set_id, date=date, exercise_id=exercise_id, **measurements),
        exercise_name=exercise_name,
        category_name=category_name,
        category_colour=category_colour,
    )


@pytest.fixture
def sample_rows():
    """Two days of logged sets across three exercises and two categories."""
    return [
        build_row(1, "2024-01-01", 1, "Squat", "Legs", "#60DD49", weight=100, reps=5),
        build_row(2, "2024-01-01", 1, "Squat", "Legs", "#60DD49", weight=105, reps=3),
        build_row(3, "2024-01-01", 2, "Bench Press", "Chest", "#F39C12", weight=60, reps=8),
        build_row(4, "2024-01-01", 3, "Leg Press", "Legs", "#60DD49", weight=200, reps=10),
        build_row(5, "2024-01-01", 1, "Squat", "Legs", "#60DD49", weight=90, reps=8),
        build_row(6, "2024-01-03", 4, "Running", "Cardio", "#E74C3C", distance=5.0, time=1500),
    ]


@pytest.fixture
def make_row():
    """Factory for joined rows."""
    return build_row


class _ScriptedQuestion:
    def __init__(self, answer):
        self.answer = answer

    async def ask_async(self):
        return self.answer


@pytest.fixture
def scripted_prompts(monkeypatch):
    """Answer questionary text prompts from a script.

    Call the fixture with the replies in order. It returns the list that
    records each (message, kwargs) pair as it is asked.
    """
    asked = []
    replies = []

    def fake_text(message, **kwargs):
        asked.append((message, kwargs))
        return _ScriptedQuestion(replies.pop(0))

    monkeypatch.setattr(questionary, "text", fake_text)

    def script(*answers):
        replies.extend(answers)
        return asked

    return script
