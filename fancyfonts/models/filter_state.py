"""
Filter / view state.

An immutable value describing what the user is looking at: the preview
text, the search filters, the chosen decorator, favorites and the
pagination window. Every user action produces a new FilterState.

INVARIANT: limit grows only through load_more(). Any other filter change
resets limit to page_size.
INVARIANT: cleared() keeps favorites.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from fancyfonts.config import ALL, NO_DECORATOR, settings


@dataclass(frozen=True, slots=True)
class FilterState:
    """
    What to render and which fonts to show.

    Attributes:
        text: Raw input to transform
        query: Free-text filter
        style: Selected style tag, or "all"
        selected_font_id: Single font id, or "all"
        decorator_id: Chosen decorator id
        fav_only: Restrict results to favorited fonts
        page_size: Base pagination window
        limit: Number of results to materialize
        favorites: Favorited font ids
    """

    text: str = field(default_factory=lambda: settings.default_text)
    query: str = ""
    style: str = ALL
    selected_font_id: str = ALL
    decorator_id: str = NO_DECORATOR
    fav_only: bool = False
    page_size: int = field(default_factory=lambda: settings.default_page_size)
    limit: int = field(default_factory=lambda: settings.default_page_size)
    favorites: frozenset[str] = frozenset()

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        if self.limit < 1:
            raise ValueError(f"limit must be positive, got {self.limit}")

    # --- Filter changes (reset the pagination window) ---

    def with_query(self, query: str) -> "FilterState":
        return replace(self, query=query, limit=self.page_size)

    def with_style(self, style: str) -> "FilterState":
        """Picking a style also clears any single-font selection."""
        return replace(self, style=style, selected_font_id=ALL, limit=self.page_size)

    def with_selected_font(self, font_id: str) -> "FilterState":
        return replace(self, selected_font_id=font_id, limit=self.page_size)

    def with_fav_only(self, fav_only: bool) -> "FilterState":
        return replace(self, fav_only=fav_only, limit=self.page_size)

    def with_page_size(self, page_size: int) -> "FilterState":
        return replace(self, page_size=page_size, limit=page_size)

    # --- Changes that keep the window ---

    def with_text(self, text: str) -> "FilterState":
        return replace(self, text=text)

    def with_decorator(self, decorator_id: str) -> "FilterState":
        return replace(self, decorator_id=decorator_id)

    def with_favorites(self, favorites: Iterable[str]) -> "FilterState":
        return replace(self, favorites=frozenset(favorites))

    def toggle_favorite(self, font_id: str) -> "FilterState":
        """Add the font to favorites, or remove it if already there."""
        return replace(self, favorites=self.favorites ^ {font_id})

    def is_favorite(self, font_id: str) -> bool:
        return font_id in self.favorites

    # --- Pagination ---

    def load_more(self) -> "FilterState":
        """Grow the window by one page."""
        return replace(self, limit=self.limit + self.page_size)

    def cleared(self) -> "FilterState":
        """Reset everything to defaults, keeping favorites."""
        return FilterState(favorites=self.favorites)
