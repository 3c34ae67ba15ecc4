"""Ingredient Service — CRUD plus origin and organic listings.

Invariants:
    - nom is unique: create checks first, the store constraint backs it up
    - bio / allergene filters compare real booleans (false filters for False)
    - Alphabetical order by nom
"""

from typing import Any

from sqlalchemy import or_

from cynova.core.pagination import PageRequest
from cynova.models.ingredient import Ingredient
from cynova.schemas.ingredient import IngredientOut
from cynova.services.resource_service import ResourceLabels, ResourceService


class IngredientService(ResourceService[Ingredient]):
    labels = ResourceLabels(
        plural="ingredients",
        singular="ingredient",
        id_label="de l'ingrédient",
        not_found="Ingrédient non trouvé",
        created="Ingrédient créé avec succès",
        updated="Ingrédient mis à jour avec succès",
        deleted="Ingrédient supprimé avec succès",
        conflict="Un ingrédient avec ce nom existe déjà",
    )
    output = IngredientOut
    unique_field = "nom"

    def default_order(self):
        return (Ingredient.nom.asc(),)

    def filters(
        self,
        *,
        q: str | None = None,
        bio: bool | None = None,
        allergene: bool | None = None,
        origine: str | None = None,
    ) -> list[Any]:
        where: list[Any] = []
        if q:
            where.append(or_(
                Ingredient.nom.contains(q, autoescape=True),
                Ingredient.description.contains(q, autoescape=True),
            ))
        if bio is not None:
            where.append(Ingredient.bio.is_(bio))
        if allergene is not None:
            where.append(Ingredient.allergene.is_(allergene))
        if origine:
            where.append(Ingredient.origine == origine)
        return where

    async def list_by_origin(self, origine: str, page: PageRequest) -> dict[str, Any]:
        return await self.list_page([Ingredient.origine == origine], page)

    async def list_organic(self, page: PageRequest) -> dict[str, Any]:
        return await self.list_page([Ingredient.bio.is_(True)], page)
