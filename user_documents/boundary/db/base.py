"""
SQLAlchemy declarative base and common mixins.

Provides base class for all ORM models and reusable mixins
for common fields (timestamps, integer primary keys).

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

from datetime import datetime, timezone
from typing import Any, Iterable

from sqlalchemy import DateTime, Integer, inspect
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata and included in table creation.
    """

    def to_dict(self, exclude: Iterable[str] = ()) -> dict[str, Any]:
        """
        Return loaded column values keyed by attribute name.

        Columns deferred or never loaded on this instance are skipped
        rather than triggering a lazy load.

        Args:
            exclude: Attribute names to leave out

        Returns:
            dict: Column attribute values
        """
        state = inspect(self)
        skipped = set(exclude) | state.unloaded
        return {
            attr.key: getattr(self, attr.key)
            for attr in state.mapper.column_attrs
            if attr.key not in skipped
        }


class IntegerIDMixin:
    """
    Mixin providing an autoincrement integer primary key.

    Ids grow with insertion order, so ``ORDER BY id DESC`` lists the
    most recently created rows first.

    Attributes:
        id: Integer primary key, assigned by the database on insert
    """

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )


class TimestampMixin:
    """
    Mixin providing automatic timestamp tracking to all models.

    created_at is set once on row creation and never changes.
    updated_at is refreshed on every update via onupdate hook.
    Both use UTC timezone for consistency across deployments.

    Attributes:
        created_at: Row creation timestamp (UTC, immutable)
        updated_at: Last modification timestamp (UTC, auto-updated)
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
