"""Mixins for SQLAlchemy models."""

from datetime import UTC, datetime

from sqlalchemy import Column, DateTime


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


class CreatedMixin:
    """Mixin to add an immutable creation timestamp column."""

    created = Column(DateTime(timezone=True), default=utcnow, nullable=False)
