"""
Font API endpoints.

Lists, searches and renders fonts from the catalog.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from fancyfonts.api.deps import catalog_dependency
from fancyfonts.config import ALL, LOCAL_USER_ID, settings
from fancyfonts.db.database import get_session
from fancyfonts.models.catalog import Catalog
from fancyfonts.models.failure import font_not_found
from fancyfonts.services.font_search import search_fonts
from fancyfonts.services.preferences import load_decorator_id, load_filter_state
from fancyfonts.services.transform import render

router = APIRouter(prefix="/fonts", tags=["fonts"])


class FontCard(BaseModel):
    """A rendered font in a result list."""

    id: str
    name: str
    styles: list[str] = Field(default_factory=list)
    is_block_font: bool = False
    is_favorite: bool = False
    output: str = Field(
        ...,
        description="Preview text rendered through the font, with the decorator applied",
    )


class FontListResponse(BaseModel):
    """Response model for a page of search results."""

    fonts: list[FontCard]
    shown: int
    total: int
    has_more: bool = Field(
        default=False,
        description="True if more fonts match than are shown; raise limit to load more",
    )
    summary: str
    decorator_id: str = Field(
        ...,
        description="Decorator actually applied (unknown ids fall back to the first decorator)",
    )


class StyleListResponse(BaseModel):
    """Response model for the style tag list."""

    styles: list[str]


class FontDetailResponse(BaseModel):
    """Response model for a single font."""

    id: str
    name: str
    display_name: str
    styles: list[str] = Field(default_factory=list)
    is_block_font: bool = False
    characters: dict[str, str] = Field(default_factory=dict)


class RenderRequest(BaseModel):
    """Request model for rendering text through one font."""

    text: str = Field(
        default="",
        description="Text to transform; may span several lines",
        examples=["Hello\nWorld"],
    )
    decorator_id: str | None = Field(
        default=None,
        description="Decorator to apply. Defaults to the user's saved choice.",
    )
    user_id: str = LOCAL_USER_ID


class RenderResponse(BaseModel):
    """Response model for a rendered string, ready to copy."""

    font_id: str
    decorator_id: str
    output: str


@router.get("", response_model=FontListResponse)
async def list_fonts(
    session: Annotated[AsyncSession, Depends(get_session)],
    catalog: Annotated[Catalog, Depends(catalog_dependency)],
    text: str | None = None,
    query: str = "",
    style: str = ALL,
    font_id: str = ALL,
    decorator_id: str | None = None,
    fav_only: bool = False,
    page_size: Annotated[int | None, Query(ge=1, le=1000)] = None,
    limit: Annotated[int | None, Query(ge=1)] = None,
    user_id: str = LOCAL_USER_ID,
) -> FontListResponse:
    """
    Search the catalog and render the visible page.

    All filters are ANDed together. Favorites and, unless decorator_id is
    given, the decorator come from the user's saved preferences.
    """
    size = page_size or settings.default_page_size
    overrides: dict[str, object] = {
        "text": settings.default_text if text is None else text,
        "query": query,
        "style": style,
        "selected_font_id": font_id,
        "fav_only": fav_only,
        "page_size": size,
        "limit": limit or size,
    }
    if decorator_id is not None:
        overrides["decorator_id"] = decorator_id

    state = await load_filter_state(session, user_id, **overrides)
    page = search_fonts(catalog, state)
    decorator = catalog.get_decorator(state.decorator_id)

    cards = [
        FontCard(
            id=font.id,
            name=font.display_name,
            styles=list(font.styles),
            is_block_font=font.is_block_font,
            is_favorite=state.is_favorite(font.id),
            output=render(state.text, font, decorator),
        )
        for font in page.fonts
    ]

    return FontListResponse(
        fonts=cards,
        shown=page.shown,
        total=page.total,
        has_more=page.has_more,
        summary=page.summary,
        decorator_id=decorator.id if decorator else state.decorator_id,
    )


@router.get("/styles", response_model=StyleListResponse)
async def list_styles(
    catalog: Annotated[Catalog, Depends(catalog_dependency)],
) -> StyleListResponse:
    """List every style tag in the catalog, sorted."""
    return StyleListResponse(styles=list(catalog.styles))


@router.get("/{font_id}", response_model=FontDetailResponse)
async def get_font(
    font_id: str,
    catalog: Annotated[Catalog, Depends(catalog_dependency)],
) -> FontDetailResponse:
    """Get a single font's definition."""
    font = catalog.get_font(font_id)
    if font is None:
        raise font_not_found(font_id)

    return FontDetailResponse(
        id=font.id,
        name=font.name,
        display_name=font.display_name,
        styles=list(font.styles),
        is_block_font=font.is_block_font,
        characters=dict(font.characters),
    )


@router.post("/{font_id}/render", response_model=RenderResponse)
async def render_font(
    font_id: str,
    request: RenderRequest,
    session: Annotated[AsyncSession, Depends(get_session)],
    catalog: Annotated[Catalog, Depends(catalog_dependency)],
) -> RenderResponse:
    """
    Render text through one font.

    Returns the fully transformed and decorated string, i.e. exactly what
    a client should put on the clipboard.
    """
    font = catalog.get_font(font_id)
    if font is None:
        raise font_not_found(font_id)

    decorator_id = request.decorator_id
    if decorator_id is None:
        decorator_id = await load_decorator_id(session, request.user_id)
    decorator = catalog.get_decorator(decorator_id)

    return RenderResponse(
        font_id=font.id,
        decorator_id=decorator.id if decorator else decorator_id,
        output=render(request.text, font, decorator),
    )
