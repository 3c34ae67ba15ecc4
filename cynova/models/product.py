"""Product ORM — a cosmetic sold in the shop.

Invariants:
    - prix is positive and rounded to 2 decimals before it reaches the store
    - stock >= 0; yuka_score in 0..100 when present
    - categorie is a ProductCategory value
    - ingredient_ids / bienfaits / quantite_ids / blog_ids are JSON arrays of ids

Design Decisions:
    - JSON array columns instead of join tables: the relations are denormalized
      on purpose and never queried across tables
"""

from sqlalchemy import JSON, Boolean, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from cynova.db.base import Base, TimestampMixin


class Product(TimestampMixin, Base):
    """Product entity — catalog item with price, stock and score."""
    __tablename__ = "produits"

    nom: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False)
    prix: Mapped[float] = mapped_column(Float, nullable=False)
    categorie: Mapped[str] = mapped_column(String(20), nullable=False, index=True)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    yuka_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    provenance: Mapped[str | None] = mapped_column(String(50), nullable=True)
    image_url: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    ingredient_ids: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    bienfaits: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    quantite_ids: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    blog_ids: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    actif: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
