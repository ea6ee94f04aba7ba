import pytest

from fancyfonts.models.catalog import Catalog, build_catalog


@pytest.fixture
def font_records() -> list[dict]:
    """Raw font records covering inline, block and sparse definitions."""
    return [
        {
            "id": "flip",
            "name": "Upside Down",
            "styles": ["fun", "upside down", "fun"],
            "characters": {"a": "ɐ", "b": "q"},
        },
        {
            "id": "block",
            "name": "Block",
            "styles": ["ascii art"],
            "characters": {"A": "#\n#", "B": "##\n.#"},
        },
        {
            "id": "bold-serif",
            "name": "Bold Serif",
            "styles": ["bold", "serif"],
            "characters": {"a": "𝐚", "b": "𝐛", "c": "𝐜"},
        },
        {
            "id": "plain",
        },
    ]


@pytest.fixture
def decorator_records() -> list[dict]:
    return [
        {"id": "none", "name": "None", "value": ""},
        {"id": "stars", "name": "Stars", "value": " ★ "},
        {"id": "blank", "name": "Blank", "value": "   "},
    ]


@pytest.fixture
def sample_catalog(font_records: list[dict], decorator_records: list[dict]) -> Catalog:
    return build_catalog(font_records, decorator_records)
