"""
Preference API endpoints.

Reads and updates a user's favorites and decorator choice.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field
from sqlalchemy.ext.asyncio import AsyncSession

from fancyfonts.api.deps import catalog_dependency
from fancyfonts.db import delete_preferences
from fancyfonts.db.database import get_session
from fancyfonts.models.catalog import Catalog
from fancyfonts.models.failure import FailureKind, KnownError, font_not_found
from fancyfonts.services.preferences import (
    load_decorator_id,
    load_favorites,
    reset_preferences,
    save_decorator_id,
    toggle_favorite,
)

router = APIRouter(prefix="/preferences", tags=["preferences"])


class PreferencesResponse(BaseModel):
    """Response model for a user's saved preferences."""

    user_id: str
    favorites: list[str] = Field(default_factory=list)
    decorator_id: str


class FavoriteToggleResponse(BaseModel):
    """Response model for a favorite toggle."""

    user_id: str
    font_id: str
    is_favorite: bool
    favorites: list[str] = Field(default_factory=list)


class DecoratorUpdateRequest(BaseModel):
    """Request model for choosing a decorator."""

    decorator_id: str = Field(..., examples=["stars"])


class DeleteResponse(BaseModel):
    """Response model for delete operations."""

    user_id: str
    deleted: int
    message: str = ""


@router.get("/{user_id}", response_model=PreferencesResponse)
async def get_preferences(
    user_id: str,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> PreferencesResponse:
    """
    Get a user's favorites and decorator choice.

    Missing or unreadable values come back as their defaults
    (no favorites, decorator "none").
    """
    favorites = await load_favorites(session, user_id)
    return PreferencesResponse(
        user_id=user_id,
        favorites=sorted(favorites),
        decorator_id=await load_decorator_id(session, user_id),
    )


@router.post("/{user_id}/favorites/{font_id}", response_model=FavoriteToggleResponse)
async def toggle_user_favorite(
    user_id: str,
    font_id: str,
    session: Annotated[AsyncSession, Depends(get_session)],
    catalog: Annotated[Catalog, Depends(catalog_dependency)],
) -> FavoriteToggleResponse:
    """Add a font to the user's favorites, or remove it if already there."""
    if catalog.get_font(font_id) is None:
        raise font_not_found(font_id)

    favorites = await toggle_favorite(session, user_id, font_id)
    return FavoriteToggleResponse(
        user_id=user_id,
        font_id=font_id,
        is_favorite=font_id in favorites,
        favorites=sorted(favorites),
    )


@router.put("/{user_id}/decorator", response_model=PreferencesResponse)
async def update_user_decorator(
    user_id: str,
    request: DecoratorUpdateRequest,
    session: Annotated[AsyncSession, Depends(get_session)],
    catalog: Annotated[Catalog, Depends(catalog_dependency)],
) -> PreferencesResponse:
    """Save the user's decorator choice."""
    if not catalog.has_decorator(request.decorator_id):
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message=f"Decorator '{request.decorator_id}' does not exist.",
            suggestion="List available decorators with GET /decorators.",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    await save_decorator_id(session, user_id, request.decorator_id)
    favorites = await load_favorites(session, user_id)
    return PreferencesResponse(
        user_id=user_id,
        favorites=sorted(favorites),
        decorator_id=request.decorator_id,
    )


@router.post("/{user_id}/reset", response_model=PreferencesResponse)
async def reset_user_preferences(
    user_id: str,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> PreferencesResponse:
    """
    Clear all settings.

    The decorator goes back to "none"; favorites are kept.
    """
    state = await reset_preferences(session, user_id)
    return PreferencesResponse(
        user_id=user_id,
        favorites=sorted(state.favorites),
        decorator_id=state.decorator_id,
    )


@router.delete("/{user_id}", response_model=DeleteResponse)
async def delete_user_preferences(
    user_id: str,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> DeleteResponse:
    """
    Delete everything stored for a user, favorites included.

    This is irreversible.
    """
    deleted = await delete_preferences(session, user_id)

    if deleted:
        message = "Your saved preferences have been deleted."
    else:
        message = "No saved preferences found to delete."

    return DeleteResponse(user_id=user_id, deleted=deleted, message=message)
