"""SQLAlchemy Declarative Base — shared base class and mixins for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - id is a UUID4 rendered as text (portable across SQLite and PostgreSQL)
    - updated_at is refreshed by the ORM on every UPDATE

Design Decisions:
    - Separate file for Base: avoids circular imports between models
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_record_id() -> str:
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all catalog ORM models."""
    pass


class TimestampMixin:
    """Generated identifier plus created/updated timestamps."""

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_record_id,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utc_now, onupdate=_utc_now,
    )
