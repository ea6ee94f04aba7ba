"""
Preference persistence service.

Stores favorites and the chosen decorator as key -> JSON values per user.

Reads never fail: every read produces an explicit LoadResult that is
either a value or a StorageError, and callers collapse it to a documented
default at the boundary:

- favorites  -> empty set
- decorator  -> "none"

Writes never fail either: a database error is logged and the preference
simply does not persist.
"""

import json
import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Generic, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from fancyfonts.config import NO_DECORATOR
from fancyfonts.db.operations import get_preference, set_preference
from fancyfonts.models.filter_state import FilterState

logger = logging.getLogger(__name__)

FAVORITES_KEY = "cfg:favorites:v2"
DECORATOR_KEY = "cfg:decorator:v2"

T = TypeVar("T")


class StorageErrorKind(str, Enum):
    """Why a stored value could not be used."""

    MISSING = "missing"
    UNPARSABLE = "unparsable"
    INVALID = "invalid"
    BACKEND = "backend"


@dataclass(frozen=True, slots=True)
class StorageError:
    """A failed preference read."""

    kind: StorageErrorKind
    key: str
    detail: str | None = None


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    """Outcome of a preference read: a value, or the error that prevented it."""

    value: T | None = None
    error: StorageError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap_or(self, default: T) -> T:
        """Collapse to the value, or the default on error."""
        if self.error is not None or self.value is None:
            return default
        return self.value


async def load_json(session: AsyncSession, user_id: str, key: str) -> LoadResult[Any]:
    """
    Read and decode a stored JSON value.

    Returns:
        LoadResult holding the decoded value, or a StorageError of kind
        MISSING (no value), UNPARSABLE (bad JSON) or BACKEND (database error).
    """
    try:
        preference = await get_preference(session, user_id, key)
    except SQLAlchemyError as e:
        logger.warning("Failed to read preference %s for %s: %s", key, user_id, e)
        return LoadResult(error=StorageError(StorageErrorKind.BACKEND, key, str(e)))

    if preference is None or not preference.value:
        return LoadResult(error=StorageError(StorageErrorKind.MISSING, key))

    try:
        return LoadResult(value=json.loads(preference.value))
    except json.JSONDecodeError as e:
        logger.debug("Unparsable preference %s for %s: %s", key, user_id, e)
        return LoadResult(error=StorageError(StorageErrorKind.UNPARSABLE, key, str(e)))


async def save_json(session: AsyncSession, user_id: str, key: str, value: Any) -> bool:
    """
    Encode and store a JSON value.

    Returns:
        True if stored, False if the database rejected the write.
    """
    raw = json.dumps(value, ensure_ascii=False)
    try:
        await set_preference(session, user_id, key, raw)
    except SQLAlchemyError as e:
        await session.rollback()
        logger.warning("Failed to persist preference %s for %s: %s", key, user_id, e)
        return False
    return True


# --- Favorites ---


async def read_favorites(session: AsyncSession, user_id: str) -> LoadResult[frozenset[str]]:
    """Read favorites; a payload that is not a list is INVALID."""
    result = await load_json(session, user_id, FAVORITES_KEY)
    if not result.ok:
        return LoadResult(error=result.error)

    if not isinstance(result.value, list):
        return LoadResult(
            error=StorageError(
                StorageErrorKind.INVALID,
                FAVORITES_KEY,
                f"expected a list, got {type(result.value).__name__}",
            )
        )
    return LoadResult(value=frozenset(str(font_id) for font_id in result.value))


async def load_favorites(session: AsyncSession, user_id: str) -> frozenset[str]:
    """Favorited font ids, or an empty set if none can be read."""
    result = await read_favorites(session, user_id)
    return result.unwrap_or(frozenset())


async def save_favorites(session: AsyncSession, user_id: str, favorites: frozenset[str]) -> bool:
    return await save_json(session, user_id, FAVORITES_KEY, sorted(favorites))


async def toggle_favorite(session: AsyncSession, user_id: str, font_id: str) -> frozenset[str]:
    """
    Add a font to favorites, or remove it if already there, and persist.

    Unreadable or wrongly shaped favorites start over from an empty set. A
    database error on read skips the save so stored favorites are not
    overwritten.

    Returns:
        The new favorites set (even if it could not be persisted).
    """
    result = await read_favorites(session, user_id)
    updated = result.unwrap_or(frozenset()) ^ {font_id}

    if result.error is not None and result.error.kind == StorageErrorKind.BACKEND:
        logger.warning(
            "Could not read favorites for %s; not saving toggle of %r", user_id, font_id
        )
        return updated

    await save_favorites(session, user_id, updated)
    return updated


# --- Decorator choice ---


async def read_decorator_id(session: AsyncSession, user_id: str) -> LoadResult[str]:
    """Read the decorator choice; a payload that is not a string is INVALID."""
    result = await load_json(session, user_id, DECORATOR_KEY)
    if not result.ok:
        return LoadResult(error=result.error)

    if not isinstance(result.value, str):
        return LoadResult(
            error=StorageError(
                StorageErrorKind.INVALID,
                DECORATOR_KEY,
                f"expected a string, got {type(result.value).__name__}",
            )
        )
    return LoadResult(value=result.value)


async def load_decorator_id(session: AsyncSession, user_id: str) -> str:
    """Chosen decorator id, or "none" if none can be read."""
    result = await read_decorator_id(session, user_id)
    return result.unwrap_or(NO_DECORATOR)


async def save_decorator_id(session: AsyncSession, user_id: str, decorator_id: str) -> bool:
    return await save_json(session, user_id, DECORATOR_KEY, decorator_id)


# --- Filter state ---


async def load_filter_state(
    session: AsyncSession,
    user_id: str,
    **overrides: Any,
) -> FilterState:
    """
    Build a FilterState seeded from persisted favorites and decorator choice.

    Args:
        session: Database session
        user_id: Whose preferences to load
        **overrides: FilterState fields that take precedence over stored values

    Returns:
        A fresh FilterState.
    """
    state = FilterState(
        favorites=await load_favorites(session, user_id),
        decorator_id=await load_decorator_id(session, user_id),
    )
    return replace(state, **overrides) if overrides else state


async def reset_preferences(session: AsyncSession, user_id: str) -> FilterState:
    """
    Clear all: decorator back to "none", favorites kept.

    Returns:
        The cleared FilterState.
    """
    state = await load_filter_state(session, user_id)
    await save_decorator_id(session, user_id, NO_DECORATOR)
    await save_favorites(session, user_id, state.favorites)
    return state.cleared()
