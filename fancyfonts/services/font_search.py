"""
Font search service.

Filters the catalog by the current FilterState and selects the visible
page of results.

A font matches only if ALL of these hold:
- selected_font_id is "all", or equals the font id
- style is "all", or is one of the font's styles
- fav_only is off, or the font is a favorite
- the normalized query is empty, or is a substring of the font's search key

Results keep catalog order; there is no relevance ranking.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from fancyfonts.config import ALL
from fancyfonts.models.catalog import Catalog
from fancyfonts.models.filter_state import FilterState
from fancyfonts.models.font import Font, normalize_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FontPage:
    """The visible window of a filtered font list."""

    fonts: tuple[Font, ...]
    total: int

    @property
    def shown(self) -> int:
        return len(self.fonts)

    @property
    def has_more(self) -> bool:
        """More matches exist beyond this page."""
        return self.shown < self.total

    @property
    def summary(self) -> str:
        return f"Showing {self.shown} / {self.total} fonts"


def matches_filters(font: Font, state: FilterState) -> bool:
    """Check a single font against every filter in the state."""
    if state.selected_font_id != ALL and font.id != state.selected_font_id:
        return False

    if state.style != ALL and state.style not in font.styles:
        return False

    if state.fav_only and font.id not in state.favorites:
        return False

    query = normalize_text(state.query)
    if query and query not in font.search_key:
        return False

    return True


def filter_fonts(catalog: Catalog, state: FilterState) -> list[Font]:
    """
    Filter the catalog, preserving catalog order.

    Args:
        catalog: Font catalog
        state: Current filter state

    Returns:
        Every matching font, in catalog order.
    """
    if not catalog.fonts:
        logger.debug("Font catalog is empty. Search will return no results.")
        return []

    return [font for font in catalog.fonts if matches_filters(font, state)]


def paginate(fonts: Iterable[Font], limit: int) -> FontPage:
    """
    Select the visible prefix of a result list.

    The page holds min(limit, total) fonts.
    """
    matches = tuple(fonts)
    window = max(0, limit)
    return FontPage(fonts=matches[:window], total=len(matches))


def search_fonts(catalog: Catalog, state: FilterState) -> FontPage:
    """Filter the catalog and return the page selected by state.limit."""
    page = paginate(filter_fonts(catalog, state), state.limit)
    logger.debug(
        "Font search query=%r style=%r font=%r fav_only=%s -> %s",
        state.query,
        state.style,
        state.selected_font_id,
        state.fav_only,
        page.summary,
    )
    return page
