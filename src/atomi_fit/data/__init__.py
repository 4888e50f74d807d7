"""Data loading utilities."""

from .catalog_loader import load_catalog, seed_catalog_from_json

__all__ = ["load_catalog", "seed_catalog_from_json"]
