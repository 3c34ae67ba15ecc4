"""Product Schemas — create/update validation and the public product shape.

Invariants:
    - ProductCreate applies defaults (actif=True, id lists "[]")
    - ProductUpdate has no defaults; absent fields are left unchanged
"""

from typing import Annotated

from pydantic import Field, HttpUrl

from cynova.core.domain_types import ProductCategory
from cynova.schemas.common import (
    IdListIn, IdListOut, PartialWireModel, Price, RecordOut, WireModel,
)

Nom = Annotated[str, Field(min_length=2, max_length=100)]
Description = Annotated[str, Field(min_length=10, max_length=500)]
Stock = Annotated[int, Field(ge=0)]
YukaScore = Annotated[int, Field(ge=0, le=100)]
Provenance = Annotated[str, Field(max_length=50)]


class ProductCreate(WireModel):
    nom: Nom
    description: Description
    prix: Price
    categorie: ProductCategory
    stock: Stock
    yuka_score: YukaScore | None = None
    provenance: Provenance | None = None
    image_url: HttpUrl | None = None
    ingredient_ids: IdListIn = Field(default_factory=list)
    bienfaits: IdListIn = Field(default_factory=list)
    quantite_ids: IdListIn = Field(default_factory=list)
    blog_ids: IdListIn = Field(default_factory=list)
    actif: bool = True


class ProductUpdate(PartialWireModel):
    nom: Nom | None = None
    description: Description | None = None
    prix: Price | None = None
    categorie: ProductCategory | None = None
    stock: Stock | None = None
    yuka_score: YukaScore | None = None
    provenance: Provenance | None = None
    image_url: HttpUrl | None = None
    ingredient_ids: IdListIn | None = None
    bienfaits: IdListIn | None = None
    quantite_ids: IdListIn | None = None
    blog_ids: IdListIn | None = None
    actif: bool | None = None


class ProductOut(RecordOut):
    nom: str
    description: str
    prix: float
    categorie: str
    stock: int
    yuka_score: int | None = None
    provenance: str | None = None
    image_url: str | None = None
    ingredient_ids: IdListOut
    bienfaits: IdListOut
    quantite_ids: IdListOut
    blog_ids: IdListOut
    actif: bool
