"""
Font data service.

Loads the static font and decorator tables and caches the catalog built
from them. The catalog is built once per process and never mutated.
"""

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from fancyfonts.config import settings
from fancyfonts.models.catalog import Catalog, build_catalog

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent.parent / "data"

FONTS_FILE = "fonts.json"
DECORATORS_FILE = "decorators.json"


def _load_records(path: Path, kind: str) -> list[dict[str, Any]]:
    if not path.exists():
        raise FileNotFoundError(
            f"{kind.capitalize()} table not found at {path}. "
            f"Set FANCYFONTS_{kind.upper()}_PATH or reinstall the package data."
        )

    with open(path, encoding="utf-8") as f:
        records = json.load(f)

    if not isinstance(records, list):
        raise ValueError(f"{kind.capitalize()} table at {path} must be a JSON list")

    # Skip anything that is not a record object
    valid = [record for record in records if isinstance(record, dict)]
    if len(valid) != len(records):
        logger.warning(
            "Skipped %d malformed %s records in %s", len(records) - len(valid), kind, path
        )
    return valid


def load_font_records(path: Path | None = None) -> list[dict[str, Any]]:
    """
    Load raw font records.

    Args:
        path: Path to JSON file. Defaults to settings.fonts_path, then data/fonts.json

    Returns:
        Raw font records in file order.

    Raises:
        FileNotFoundError: If the table doesn't exist
        ValueError: If the file is not a JSON list
    """
    if path is None:
        path = Path(settings.fonts_path) if settings.fonts_path else DATA_DIR / FONTS_FILE
    return _load_records(path, "fonts")


def load_decorator_records(path: Path | None = None) -> list[dict[str, Any]]:
    """
    Load raw decorator records.

    The first record is the fallback for unknown decorator ids and is
    conventionally the empty "none" decorator.
    """
    if path is None:
        path = (
            Path(settings.decorators_path)
            if settings.decorators_path
            else DATA_DIR / DECORATORS_FILE
        )
    return _load_records(path, "decorators")


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """
    Get the cached font catalog.

    Raises:
        FileNotFoundError: If a data table doesn't exist
    """
    return build_catalog(load_font_records(), load_decorator_records())
