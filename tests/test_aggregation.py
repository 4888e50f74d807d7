"""Tests for grouping rows into workout views."""

import pytest

from atomi_fit.models.sets import ExerciseSet, ShapeKey
from atomi_fit.models.workout import CategoryTag, ListWorkoutExercise
from atomi_fit.services.aggregation import (
    CategoryConflictError,
    by_day,
    category_summary,
    group_by_date,
    group_by_date_with_category,
    group_sets_by_date,
    list_workouts,
)
from atomi_fit.services.shapes import classify


class TestGroupByDate:
    """Tests for group_by_date."""

    def test_basic_grouping(self, make_row):
        """Test sets group by exercise within a date."""
        rows = [
            make_row(1, "2024-01-01", 1, "Squat", weight=100, reps=5),
            make_row(2, "2024-01-01", 1, "Squat", weight=105, reps=3),
            make_row(3, "2024-01-01", 2, "Bench", weight=60, reps=8),
        ]
        result = group_by_date(rows)

        assert list(result) == ["2024-01-01"]
        groups = result["2024-01-01"]
        assert [(g.exercise_id, g.exercise_name) for g in groups] == [
            (1, "Squat"),
            (2, "Bench"),
        ]
        assert [(s.weight, s.reps) for s in groups[0].sets] == [(100, 5), (105, 3)]
        assert [(s.weight, s.reps) for s in groups[1].sets] == [(60, 8)]
        for group in groups:
            for s in group.sets:
                assert classify(s) is ShapeKey.WEIGHT_REPS

    def test_first_seen_order(self, sample_rows):
        """Test dates and exercises keep first-seen order."""
        result = group_by_date(sample_rows)

        assert list(result) == ["2024-01-01", "2024-01-03"]
        assert [g.exercise_name for g in result["2024-01-01"]] == [
            "Squat",
            "Bench Press",
            "Leg Press",
        ]
        # A later Squat set joins the existing group
        assert [s.id for s in result["2024-01-01"][0].sets] == [1, 2, 5]

    def test_dates_not_resorted(self, make_row):
        """Test dates are emitted in input order, not sorted."""
        rows = [
            make_row(1, "2024-03-01", 1, "Squat", reps=5),
            make_row(2, "2024-01-01", 1, "Squat", reps=5),
        ]
        assert list(group_by_date(rows)) == ["2024-03-01", "2024-01-01"]

    def test_same_name_different_ids_stay_separate(self, make_row):
        """Test exercises are grouped by id, not name."""
        rows = [
            make_row(1, "2024-01-01", 1, "Curl", reps=10),
            make_row(2, "2024-01-01", 7, "Curl", reps=12),
        ]
        groups = group_by_date(rows)["2024-01-01"]
        assert [g.exercise_id for g in groups] == [1, 7]

    def test_same_exercise_on_two_dates(self, make_row):
        """Test an exercise gets a separate group on each date."""
        rows = [
            make_row(1, "2024-01-01", 1, "Squat", reps=5),
            make_row(2, "2024-01-02", 1, "Squat", reps=6),
        ]
        result = group_by_date(rows)
        assert len(result["2024-01-01"]) == 1
        assert len(result["2024-01-02"]) == 1

    def test_empty(self):
        """Test empty input gives an empty mapping."""
        assert group_by_date([]) == {}

    def test_dangling_exercise_skipped(self, make_row):
        """Test rows without a joined exercise name are skipped."""
        rows = [
            make_row(1, "2024-01-01", 1, None, reps=5),
            make_row(2, "2024-01-01", 2, "Squat", reps=5),
            make_row(3, "2024-01-02", 1, None, reps=5),
        ]
        result = group_by_date(rows)
        assert list(result) == ["2024-01-01"]
        assert [g.exercise_id for g in result["2024-01-01"]] == [2]

    def test_does_not_need_category(self, make_row):
        """Test rows without a category are still grouped."""
        rows = [make_row(1, "2024-01-01", 1, "Squat", reps=5)]
        assert len(group_by_date(rows)["2024-01-01"]) == 1

    def test_idempotent(self, sample_rows):
        """Test regrouping the same rows gives the same result."""
        assert group_by_date(sample_rows) == group_by_date(sample_rows)

    def test_accepts_iterator(self, sample_rows):
        """Test any iterable of rows is accepted."""
        assert group_by_date(iter(sample_rows)) == group_by_date(sample_rows)


class TestGroupByDateWithCategory:
    """Tests for group_by_date_with_category."""

    def test_carries_category(self, sample_rows):
        """Test each group carries its category."""
        groups = group_by_date_with_category(sample_rows)["2024-01-01"]
        assert [(g.exercise_name, g.category_name, g.category_colour) for g in groups] == [
            ("Squat", "Legs", "#60DD49"),
            ("Bench Press", "Chest", "#F39C12"),
            ("Leg Press", "Legs", "#60DD49"),
        ]

    def test_missing_category_skipped(self, make_row):
        """Test rows without a joined category are skipped."""
        rows = [
            make_row(1, "2024-01-01", 1, "Squat", None, None, reps=5),
            make_row(2, "2024-01-01", 2, "Bench", "Chest", "#F39C12", reps=5),
        ]
        groups = group_by_date_with_category(rows)["2024-01-01"]
        assert [g.exercise_name for g in groups] == ["Bench"]


class TestCategorySummary:
    """Tests for category_summary."""

    def _exercise(self, exercise_id, category, colour):
        return ListWorkoutExercise(
            exercise_id=exercise_id,
            exercise_name=f"Exercise {exercise_id}",
            category_name=category,
            category_colour=colour,
        )

    def test_dedup_in_first_seen_order(self):
        """Test categories are distinct and keep first-seen order."""
        exercises = [
            self._exercise(1, "Legs", "#60DD49"),
            self._exercise(2, "Chest", "#F39C12"),
            self._exercise(3, "Legs", "#60DD49"),
        ]
        assert category_summary(exercises) == [
            CategoryTag("Legs", "#60DD49"),
            CategoryTag("Chest", "#F39C12"),
        ]

    def test_empty(self):
        """Test no exercises give no categories."""
        assert category_summary([]) == []

    def test_colour_conflict(self):
        """Test one name with two colours raises."""
        exercises = [
            self._exercise(1, "Legs", "#60DD49"),
            self._exercise(2, "Legs", "#000000"),
        ]
        with pytest.raises(CategoryConflictError) as exc_info:
            category_summary(exercises, "2024-01-01")
        assert exc_info.value.category_name == "Legs"
        assert exc_info.value.colours == ("#60DD49", "#000000")
        assert "2024-01-01" in str(exc_info.value)


class TestListWorkouts:
    """Tests for list_workouts."""

    def test_entries_per_date(self, sample_rows):
        """Test one entry per date with exercises and categories."""
        workouts = list_workouts(sample_rows)

        assert [w.date for w in workouts] == ["2024-01-01", "2024-01-03"]
        first = workouts[0]
        assert [e.exercise_name for e in first.exercises] == [
            "Squat",
            "Bench Press",
            "Leg Press",
        ]
        assert [c.category_name for c in first.categories] == ["Legs", "Chest"]
        assert [c.category_name for c in workouts[1].categories] == ["Cardio"]

    def test_to_dict(self, sample_rows):
        """Test list entries serialize."""
        data = list_workouts(sample_rows)[1].to_dict()
        assert data["date"] == "2024-01-03"
        assert data["categories"] == [
            {"category_name": "Cardio", "category_colour": "#E74C3C"}
        ]

    def test_conflict_propagates(self, make_row):
        """Test a colour conflict surfaces from list_workouts."""
        rows = [
            make_row(1, "2024-01-01", 1, "Squat", "Legs", "#60DD49", reps=5),
            make_row(2, "2024-01-01", 2, "Lunge", "Legs", "#111111", reps=5),
        ]
        with pytest.raises(CategoryConflictError):
            list_workouts(rows)

    def test_empty(self):
        """Test empty input gives an empty list."""
        assert list_workouts([]) == []


class TestByDay:
    """Tests for by_day."""

    def test_colours_per_day(self, sample_rows):
        """Test each date lists its distinct category colours."""
        assert by_day(sample_rows) == {
            "2024-01-01": ["#60DD49", "#F39C12"],
            "2024-01-03": ["#E74C3C"],
        }

    def test_dedup_is_by_category_not_exercise(self, make_row):
        """Test two exercises in one category give one colour."""
        rows = [
            make_row(1, "2024-01-01", 1, "Squat", "Legs", "#60DD49", reps=5),
            make_row(2, "2024-01-01", 2, "Lunge", "Legs", "#60DD49", reps=5),
        ]
        assert by_day(rows) == {"2024-01-01": ["#60DD49"]}

    def test_missing_category_skipped(self, make_row):
        """Test rows without a joined category are skipped."""
        rows = [
            make_row(1, "2024-01-01", 1, "Squat", None, None, reps=5),
            make_row(2, "2024-01-02", 2, "Bench", "Chest", "#F39C12", reps=5),
        ]
        assert by_day(rows) == {"2024-01-02": ["#F39C12"]}

    def test_conflict(self, make_row):
        """Test one category with two colours on a day raises."""
        rows = [
            make_row(1, "2024-01-01", 1, "Squat", "Legs", "#60DD49", reps=5),
            make_row(2, "2024-01-01", 2, "Lunge", "Legs", "#111111", reps=5),
        ]
        with pytest.raises(CategoryConflictError):
            by_day(rows)

    def test_empty(self):
        """Test empty input gives an empty mapping."""
        assert by_day([]) == {}


class TestGroupSetsByDate:
    """Tests for group_sets_by_date."""

    def test_grouping(self):
        """Test sets of one exercise group by date in encounter order."""
        sets = [
            ExerciseSet(id=3, date="2024-01-05", exercise_id=1, reps=5),
            ExerciseSet(id=4, date="2024-01-05", exercise_id=1, reps=6),
            ExerciseSet(id=1, date="2024-01-01", exercise_id=1, reps=7),
        ]
        result = group_sets_by_date(sets)
        assert list(result) == ["2024-01-05", "2024-01-01"]
        assert [s.id for s in result["2024-01-05"]] == [3, 4]
