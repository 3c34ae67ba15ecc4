"""Ingredient Schemas."""

from typing import Annotated

from pydantic import Field

from cynova.schemas.common import PartialWireModel, RecordOut, WireModel

Nom = Annotated[str, Field(min_length=2, max_length=100)]
Origine = Annotated[str, Field(max_length=50)]
Description = Annotated[str, Field(max_length=500)]


class IngredientCreate(WireModel):
    nom: Nom
    origine: Origine | None = None
    description: Description | None = None
    bio: bool = False
    allergene: bool = False
    produit_id: str | None = None


class IngredientUpdate(PartialWireModel):
    nom: Nom | None = None
    origine: Origine | None = None
    description: Description | None = None
    bio: bool | None = None
    allergene: bool | None = None
    produit_id: str | None = None


class IngredientOut(RecordOut):
    nom: str
    origine: str | None = None
    description: str | None = None
    bio: bool
    allergene: bool
    produit_id: str | None = None
