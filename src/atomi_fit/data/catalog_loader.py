"""Exercise catalog loader from JSON."""

import json
import logging
from pathlib import Path

from ..db.engine import get_db_path, seed_catalog
from ..models.catalog import Category
from ..models.sets import ShapeKey

logger = logging.getLogger(__name__)


def load_catalog(path: Path) -> tuple[list[Category], list[tuple[str, ShapeKey, str, str]]]:
    """Load categories and exercises from a catalog JSON file.

    The file looks like::

        {
            "categories": [{"name": "Legs", "colour": "#60DD49"}],
            "exercises": [
                {"name": "Squat", "type": "Weight And Reps", "category": "Legs"}
            ]
        }

    Exercise ``type`` may be a label ("Weight And Reps") or a shape key
    ("weight_reps").

    Returns:
        (categories, exercise tuples of (name, type, category name, notes))
    """
    with open(path) as f:
        data = json.load(f)

    categories = []
    for cat_data in data.get("categories", []):
        try:
            categories.append(Category.from_dict(cat_data))
        except (KeyError, TypeError) as e:
            logger.warning("Skipping invalid category %s: %s", cat_data, e)

    exercises = []
    for ex_data in data.get("exercises", []):
        try:
            exercises.append(
                (
                    ex_data["name"],
                    ShapeKey.parse(ex_data["type"]),
                    ex_data["category"],
                    ex_data.get("notes", ""),
                )
            )
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(
                "Skipping invalid exercise %s: %s",
                ex_data.get("name", "unknown") if isinstance(ex_data, dict) else ex_data,
                e,
            )

    return categories, exercises


async def seed_catalog_from_json(path: Path, db_path: Path | None = None) -> int:
    """Seed the database from a catalog JSON file.

    Args:
        path: Catalog JSON file
        db_path: Optional database path. Uses default if not provided.

    Returns:
        Number of exercises seeded
    """
    if db_path is None:
        db_path = get_db_path()

    categories, exercises = load_catalog(path)
    return await seed_catalog(db_path, categories=categories, exercises=exercises)
