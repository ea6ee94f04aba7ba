"""
Font catalog index.

The catalog is built once at startup from the static data tables and is
never mutated afterwards.

INVARIANT: fonts keeps every record in input order.
INVARIANT: fonts_by_id is last-write-wins on duplicate ids.
INVARIANT: styles is the deduplicated union of all font styles, sorted.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import Any

from pyuca import Collator

from fancyfonts.models.font import Decorator, Font, build_decorator, build_font

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _collator() -> Collator:
    # Parses the bundled Unicode collation table; done once per process
    return Collator()


def style_sort_key(style: str) -> tuple[tuple[int, ...], str]:
    """
    Unicode collation key for style tags.

    Accents and case only break ties between otherwise equal letters, so
    "émoji" sorts before "fun" and "a" before "A". The swapped-case raw value
    keeps the order total.
    """
    return (_collator().sort_key(style), style.swapcase())


@dataclass(frozen=True, slots=True)
class Catalog:
    """
    Indexed, read-only view of all fonts and decorators.

    Attributes:
        fonts: Normalized fonts in input order
        styles: Every style tag across all fonts, deduplicated and sorted
        fonts_by_id: Lookup of font id -> Font
        decorators: Decorators in input order; the first is the fallback
    """

    fonts: tuple[Font, ...] = ()
    styles: tuple[str, ...] = ()
    fonts_by_id: Mapping[str, Font] = field(
        default_factory=lambda: MappingProxyType({}), hash=False
    )
    decorators: tuple[Decorator, ...] = ()

    def get_font(self, font_id: str) -> Font | None:
        """Look up a font by id."""
        return self.fonts_by_id.get(font_id)

    def get_decorator(self, decorator_id: str | None) -> Decorator | None:
        """
        Look up a decorator by id.

        Stale or unknown ids fall back to the first decorator (conventionally
        "none"). Returns None only when the catalog has no decorators.
        """
        for decorator in self.decorators:
            if decorator.id == decorator_id:
                return decorator
        if not self.decorators:
            return None
        logger.debug(
            "Unknown decorator %r, falling back to %r", decorator_id, self.decorators[0].id
        )
        return self.decorators[0]

    def has_decorator(self, decorator_id: str) -> bool:
        """Check whether a decorator id exists in the catalog."""
        return any(decorator.id == decorator_id for decorator in self.decorators)


def build_catalog(
    font_records: Iterable[Mapping[str, Any]],
    decorator_records: Iterable[Mapping[str, Any]] = (),
) -> Catalog:
    """
    Build the catalog index from raw records.

    Args:
        font_records: Raw font records in display order
        decorator_records: Raw decorator records in display order

    Returns:
        Immutable Catalog.
    """
    fonts = tuple(build_font(record) for record in font_records)

    fonts_by_id: dict[str, Font] = {}
    for font in fonts:
        if font.id in fonts_by_id:
            logger.warning("Duplicate font id %r; later definition wins", font.id)
        fonts_by_id[font.id] = font

    all_styles = {style for font in fonts for style in font.styles}
    styles = tuple(sorted(all_styles, key=style_sort_key))

    decorators = tuple(build_decorator(record) for record in decorator_records)

    if not fonts:
        logger.warning("Font catalog is empty. No fonts will be listed.")

    logger.info(
        "Built font catalog: %d fonts, %d styles, %d decorators",
        len(fonts),
        len(styles),
        len(decorators),
    )

    return Catalog(
        fonts=fonts,
        styles=styles,
        fonts_by_id=MappingProxyType(fonts_by_id),
        decorators=decorators,
    )
