"""Blog ORM — editorial post linked to products by id.

Invariants:
    - categorie is a BlogCategory value
    - produit_ids and tags are JSON arrays of strings
"""

from sqlalchemy import JSON, Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cynova.core.domain_types import DEFAULT_BLOG_AUTHOR
from cynova.db.base import Base, TimestampMixin


class Blog(TimestampMixin, Base):
    """Blog post entity."""
    __tablename__ = "blogs"

    titre: Mapped[str] = mapped_column(String(200), nullable=False)
    contenu: Mapped[str] = mapped_column(Text, nullable=False)
    categorie: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    auteur: Mapped[str] = mapped_column(
        String(100), nullable=False, default=DEFAULT_BLOG_AUTHOR,
    )
    image_url: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    produit_ids: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    publie: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
