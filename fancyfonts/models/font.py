"""
Font and decorator models.

A font is a character-substitution table. Raw records from the data tables
are normalized once into immutable Font values carrying the derived fields
the rest of the system relies on:

- is_block_font: at least one glyph spans several rows (contains a newline)
- search_key: lower-cased, trimmed "name id styles" used for substring search

INVARIANT: Derived fields are computed exactly once, at construction.
Fonts are frozen and their character map is read-only, so the derived
fields can never drift from the data they describe.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

GLYPH_ROW_BREAK = "\n"


def normalize_text(value: Any) -> str:
    """Normalize text for search: lower-case and strip surrounding whitespace."""
    if value is None:
        return ""
    return str(value).lower().strip()


def dedupe_styles(styles: Iterable[Any] | None) -> tuple[str, ...]:
    """Deduplicate style tags, keeping first-seen order."""
    seen: dict[str, None] = {}
    for style in styles or ():
        seen.setdefault(str(style), None)
    return tuple(seen)


@dataclass(frozen=True, slots=True)
class Font:
    """
    A normalized font definition.

    Attributes:
        id: Unique identifier (e.g., "bold-serif")
        name: Display name, may be empty
        styles: Style tags, deduplicated, original order preserved
        characters: Read-only map of single code point -> glyph string.
            A key mapped to "" is a real mapping, distinct from an absent key.
        is_block_font: True iff any glyph contains a row break
        search_key: Normalized "name id styles" for substring search
    """

    id: str
    name: str = ""
    styles: tuple[str, ...] = ()
    characters: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    is_block_font: bool = False
    search_key: str = ""

    @property
    def display_name(self) -> str:
        """Name for display, falling back to the id when the name is empty."""
        return self.name or self.id


@dataclass(frozen=True, slots=True)
class Decorator:
    """A marker wrapped symmetrically around rendered text."""

    id: str
    name: str = ""
    value: str = ""


def build_font(record: Mapping[str, Any]) -> Font:
    """
    Normalize a raw font record.

    Missing optional fields degrade to empty defaults; this never raises
    for a mapping input.

    Args:
        record: Raw record with id, name, styles and characters

    Returns:
        Immutable Font with derived fields filled in.
    """
    font_id = str(record.get("id") or "")
    name = str(record.get("name") or "")
    styles = dedupe_styles(record.get("styles"))

    raw_characters = record.get("characters") or {}
    characters = {str(char): str(glyph) for char, glyph in raw_characters.items()}

    is_block_font = any(GLYPH_ROW_BREAK in glyph for glyph in characters.values())
    search_key = normalize_text(f"{name} {font_id} {' '.join(styles)}")

    return Font(
        id=font_id,
        name=name,
        styles=styles,
        characters=MappingProxyType(characters),
        is_block_font=is_block_font,
        search_key=search_key,
    )


def build_decorator(record: Mapping[str, Any]) -> Decorator:
    """Normalize a raw decorator record."""
    return Decorator(
        id=str(record.get("id") or ""),
        name=str(record.get("name") or ""),
        value=str(record.get("value") or ""),
    )
