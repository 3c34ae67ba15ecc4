"""Ingredient Routes — /api/ingredients.

Invariants:
    - Static paths (/search, /bio, /origine/...) registered before /{record_id}
    - bio / allergene are parsed as booleans; "false" filters for False
"""

from fastapi import APIRouter, Depends, Query, status

from cynova.api.dependencies import get_ingredient_service, page_request
from cynova.core.pagination import PageRequest
from cynova.infrastructure.rate_limit import RouterRateLimiter
from cynova.schemas.ingredient import IngredientCreate, IngredientUpdate
from cynova.services.ingredient_service import IngredientService

limiter = RouterRateLimiter("ingredients")
router = APIRouter(
    prefix="/api/ingredients", tags=["ingredients"], dependencies=[Depends(limiter)],
)


@router.get("")
async def list_ingredients(
    bio: bool | None = Query(None),
    allergene: bool | None = Query(None),
    origine: str | None = Query(None),
    page: PageRequest = Depends(page_request),
    service: IngredientService = Depends(get_ingredient_service),
):
    """Ingredients in alphabetical order, paginated."""
    where = service.filters(bio=bio, allergene=allergene, origine=origine)
    return await service.list_page(where, page)


@router.get("/search")
async def search_ingredients(
    q: str | None = Query(None),
    bio: bool | None = Query(None),
    allergene: bool | None = Query(None),
    origine: str | None = Query(None),
    service: IngredientService = Depends(get_ingredient_service),
):
    where = service.filters(q=q, bio=bio, allergene=allergene, origine=origine)
    return await service.search_all(where)


@router.get("/bio")
async def list_organic_ingredients(
    page: PageRequest = Depends(page_request),
    service: IngredientService = Depends(get_ingredient_service),
):
    return await service.list_organic(page)


@router.get("/origine/{origine}")
async def list_ingredients_by_origin(
    origine: str,
    page: PageRequest = Depends(page_request),
    service: IngredientService = Depends(get_ingredient_service),
):
    return await service.list_by_origin(origine, page)


@router.get("/{record_id}")
async def get_ingredient(
    record_id: str, service: IngredientService = Depends(get_ingredient_service),
):
    return await service.get_by_id(record_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_ingredient(
    body: IngredientCreate,
    service: IngredientService = Depends(get_ingredient_service),
):
    return await service.create(body)


@router.put("/{record_id}")
async def update_ingredient(
    record_id: str,
    body: IngredientUpdate,
    service: IngredientService = Depends(get_ingredient_service),
):
    return await service.update(record_id, body)


@router.delete("/{record_id}")
async def delete_ingredient(
    record_id: str, service: IngredientService = Depends(get_ingredient_service),
):
    return await service.delete(record_id)
