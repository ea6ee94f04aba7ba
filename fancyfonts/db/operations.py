"""
Database CRUD operations.

Provides async functions for reading and writing per-user preference values.
"""

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from fancyfonts.models.db import PreferenceDB


async def get_preference(session: AsyncSession, user_id: str, key: str) -> PreferenceDB | None:
    """
    Get a stored preference by user and key.

    Returns None if nothing is stored under this key.
    """
    result = await session.execute(
        select(PreferenceDB).where(
            PreferenceDB.user_id == user_id,
            PreferenceDB.key == key,
        )
    )
    return result.scalar_one_or_none()


async def set_preference(
    session: AsyncSession,
    user_id: str,
    key: str,
    value: str,
) -> PreferenceDB:
    """
    Insert or update a preference.

    Args:
        session: Database session
        user_id: Owner of the preference
        key: Preference key
        value: Raw JSON text to store

    Returns:
        The stored record.
    """
    preference = await get_preference(session, user_id, key)
    if preference is None:
        preference = PreferenceDB(user_id=user_id, key=key, value=value)
        session.add(preference)
    else:
        preference.value = value

    await session.flush()
    return preference


async def delete_preferences(session: AsyncSession, user_id: str) -> int:
    """
    Delete every preference stored for a user.

    Returns:
        Number of records deleted.
    """
    result = await session.execute(delete(PreferenceDB).where(PreferenceDB.user_id == user_id))
    return result.rowcount or 0
