"""User ORM — customer or admin account.

Invariants:
    - email is unique (store-enforced)
    - mot_de_passe holds a bcrypt hash, never plaintext
    - role is a UserRole value
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from cynova.core.domain_types import UserRole
from cynova.db.base import Base, TimestampMixin


class User(TimestampMixin, Base):
    """User entity."""
    __tablename__ = "utilisateurs"

    email: Mapped[str] = mapped_column(String(320), nullable=False, unique=True)
    mot_de_passe: Mapped[str] = mapped_column(String(100), nullable=False)
    nom: Mapped[str | None] = mapped_column(String(100), nullable=True)
    prenom: Mapped[str | None] = mapped_column(String(100), nullable=True)
    role: Mapped[str] = mapped_column(
        String(10), nullable=False, default=UserRole.USER.value,
    )
    adresse: Mapped[str | None] = mapped_column(String(200), nullable=True)
    telephone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    newsletter: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
