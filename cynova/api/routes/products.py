"""Product Routes — /api/products.

Invariants:
    - Static paths (/search) registered before /{record_id}
    - Every route passes through the router's rate limiter
"""

from fastapi import APIRouter, Depends, Query, status

from cynova.api.dependencies import get_product_service, page_request
from cynova.core.domain_types import ProductCategory
from cynova.core.pagination import PageRequest
from cynova.infrastructure.rate_limit import RouterRateLimiter
from cynova.schemas.product import ProductCreate, ProductUpdate
from cynova.services.product_service import ProductService

limiter = RouterRateLimiter("products")
router = APIRouter(
    prefix="/api/products", tags=["products"], dependencies=[Depends(limiter)],
)


@router.get("")
async def list_products(
    categorie: ProductCategory | None = Query(None),
    yuka_min: int | None = Query(None, alias="yukaMin", ge=0, le=100),
    prix_max: float | None = Query(None, alias="prixMax", ge=0),
    page: PageRequest = Depends(page_request),
    service: ProductService = Depends(get_product_service),
):
    """Active products, newest first, paginated."""
    where = service.filters(
        categorie=categorie.value if categorie else None,
        yuka_min=yuka_min, prix_max=prix_max,
    )
    return await service.list_page(where, page)


@router.get("/search")
async def search_products(
    q: str | None = Query(None),
    categorie: ProductCategory | None = Query(None),
    yuka_min: int | None = Query(None, alias="yukaMin", ge=0, le=100),
    prix_min: float | None = Query(None, alias="prixMin", ge=0),
    prix_max: float | None = Query(None, alias="prixMax", ge=0),
    service: ProductService = Depends(get_product_service),
):
    """All matching active products with a count."""
    where = service.filters(
        q=q, categorie=categorie.value if categorie else None,
        yuka_min=yuka_min, prix_min=prix_min, prix_max=prix_max,
    )
    return await service.search_all(where)


@router.get("/{record_id}")
async def get_product(
    record_id: str, service: ProductService = Depends(get_product_service),
):
    return await service.get_by_id(record_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_product(
    body: ProductCreate, service: ProductService = Depends(get_product_service),
):
    return await service.create(body)


@router.put("/{record_id}")
async def update_product(
    record_id: str,
    body: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    return await service.update(record_id, body)


@router.delete("/{record_id}")
async def delete_product(
    record_id: str, service: ProductService = Depends(get_product_service),
):
    return await service.delete(record_id)
