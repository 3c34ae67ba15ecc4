"""Ingredient ORM — raw material used in products.

Invariants:
    - nom is unique (store-enforced)
    - bio and allergene default to False
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from cynova.db.base import Base, TimestampMixin


class Ingredient(TimestampMixin, Base):
    """Ingredient entity."""
    __tablename__ = "ingredients"

    nom: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    origine: Mapped[str | None] = mapped_column(String(50), nullable=True, index=True)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    bio: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    allergene: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    produit_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
