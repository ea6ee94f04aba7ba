"""
FancyFonts services.

Text transformation, font search and preference persistence.
"""

from fancyfonts.services.decorators import decorate
from fancyfonts.services.font_data import get_catalog
from fancyfonts.services.font_search import (
    FontPage,
    filter_fonts,
    matches_filters,
    paginate,
    search_fonts,
)
from fancyfonts.services.transform import render, render_plain

__all__ = [
    "FontPage",
    "decorate",
    "filter_fonts",
    "get_catalog",
    "matches_filters",
    "paginate",
    "render",
    "render_plain",
    "search_fonts",
]
