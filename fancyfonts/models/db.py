"""
SQLAlchemy ORM models for persistent storage.

Preferences are stored as a key -> JSON value map per user. Values are
kept as raw JSON text so that corrupt or legacy payloads can be read back
and recognized instead of failing at the driver level.
"""

from datetime import datetime

from sqlalchemy import DateTime, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class PreferenceDB(Base):
    """
    A single persisted preference value.

    Each (user_id, key) pair holds one JSON-encoded value, e.g. the
    favorites list or the chosen decorator id.
    """

    __tablename__ = "preferences"
    __table_args__ = (UniqueConstraint("user_id", "key", name="uq_user_preference"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[str] = mapped_column(String(255), index=True)
    key: Mapped[str] = mapped_column(String(255))
    value: Mapped[str] = mapped_column(Text)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now()
    )

    def __repr__(self) -> str:
        return f"<PreferenceDB(user_id={self.user_id}, key={self.key})>"
