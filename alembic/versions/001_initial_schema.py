"""Initial schema — produits, ingredients, blogs, utilisateurs.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _record_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "produits",
        *_record_columns(),
        sa.Column("nom", sa.String(100), nullable=False),
        sa.Column("description", sa.String(500), nullable=False),
        sa.Column("prix", sa.Float, nullable=False),
        sa.Column("categorie", sa.String(20), nullable=False),
        sa.Column("stock", sa.Integer, nullable=False, server_default="0"),
        sa.Column("yuka_score", sa.Integer, nullable=True),
        sa.Column("provenance", sa.String(50), nullable=True),
        sa.Column("image_url", sa.String(2000), nullable=True),
        sa.Column("ingredient_ids", sa.JSON, nullable=False),
        sa.Column("bienfaits", sa.JSON, nullable=False),
        sa.Column("quantite_ids", sa.JSON, nullable=False),
        sa.Column("blog_ids", sa.JSON, nullable=False),
        sa.Column("actif", sa.Boolean, nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_produits_categorie", "produits", ["categorie"])

    op.create_table(
        "ingredients",
        *_record_columns(),
        sa.Column("nom", sa.String(100), nullable=False, unique=True),
        sa.Column("origine", sa.String(50), nullable=True),
        sa.Column("description", sa.String(500), nullable=True),
        sa.Column("bio", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("allergene", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("produit_id", sa.String(36), nullable=True),
    )
    op.create_index("ix_ingredients_origine", "ingredients", ["origine"])

    op.create_table(
        "blogs",
        *_record_columns(),
        sa.Column("titre", sa.String(200), nullable=False),
        sa.Column("contenu", sa.Text, nullable=False),
        sa.Column("categorie", sa.String(20), nullable=False),
        sa.Column("auteur", sa.String(100), nullable=False),
        sa.Column("image_url", sa.String(2000), nullable=True),
        sa.Column("produit_ids", sa.JSON, nullable=False),
        sa.Column("tags", sa.JSON, nullable=False),
        sa.Column("publie", sa.Boolean, nullable=False, server_default=sa.true()),
    )
    op.create_index("ix_blogs_categorie", "blogs", ["categorie"])

    op.create_table(
        "utilisateurs",
        *_record_columns(),
        sa.Column("email", sa.String(320), nullable=False, unique=True),
        sa.Column("mot_de_passe", sa.String(100), nullable=False),
        sa.Column("nom", sa.String(100), nullable=True),
        sa.Column("prenom", sa.String(100), nullable=True),
        sa.Column("role", sa.String(10), nullable=False, server_default="USER"),
        sa.Column("adresse", sa.String(200), nullable=True),
        sa.Column("telephone", sa.String(20), nullable=True),
        sa.Column("newsletter", sa.Boolean, nullable=False, server_default=sa.false()),
    )


def downgrade() -> None:
    op.drop_table("utilisateurs")
    op.drop_index("ix_blogs_categorie", table_name="blogs")
    op.drop_table("blogs")
    op.drop_index("ix_ingredients_origine", table_name="ingredients")
    op.drop_table("ingredients")
    op.drop_index("ix_produits_categorie", table_name="produits")
    op.drop_table("produits")
