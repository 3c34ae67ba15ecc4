"""Blog Schemas — post validation; auteur defaults to the house byline."""

from typing import Annotated

from pydantic import Field, HttpUrl

from cynova.core.domain_types import DEFAULT_BLOG_AUTHOR, BlogCategory
from cynova.schemas.common import (
    IdListIn, IdListOut, PartialWireModel, RecordOut, WireModel,
)

Titre = Annotated[str, Field(min_length=5, max_length=200)]
Contenu = Annotated[str, Field(min_length=50, max_length=10_000)]
Auteur = Annotated[str, Field(max_length=100)]


class BlogCreate(WireModel):
    titre: Titre
    contenu: Contenu
    categorie: BlogCategory
    auteur: Auteur = DEFAULT_BLOG_AUTHOR
    image_url: HttpUrl | None = None
    produit_ids: IdListIn = Field(default_factory=list)
    tags: IdListIn = Field(default_factory=list)
    publie: bool = True


class BlogUpdate(PartialWireModel):
    titre: Titre | None = None
    contenu: Contenu | None = None
    categorie: BlogCategory | None = None
    auteur: Auteur | None = None
    image_url: HttpUrl | None = None
    produit_ids: IdListIn | None = None
    tags: IdListIn | None = None
    publie: bool | None = None


class BlogOut(RecordOut):
    titre: str
    contenu: str
    categorie: str
    auteur: str
    image_url: str | None = None
    produit_ids: IdListOut
    tags: IdListOut
    publie: bool
