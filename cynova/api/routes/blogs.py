"""Blog Routes — /api/blogs."""

from fastapi import APIRouter, Depends, Query, status

from cynova.api.dependencies import get_blog_service, page_request
from cynova.core.domain_types import BlogCategory
from cynova.core.pagination import PageRequest
from cynova.infrastructure.rate_limit import RouterRateLimiter
from cynova.schemas.blog import BlogCreate, BlogUpdate
from cynova.services.blog_service import BlogService

limiter = RouterRateLimiter("blogs")
router = APIRouter(
    prefix="/api/blogs", tags=["blogs"], dependencies=[Depends(limiter)],
)


@router.get("")
async def list_blogs(
    categorie: BlogCategory | None = Query(None),
    auteur: str | None = Query(None),
    publie: bool | None = Query(None),
    page: PageRequest = Depends(page_request),
    service: BlogService = Depends(get_blog_service),
):
    where = service.filters(
        categorie=categorie.value if categorie else None,
        auteur=auteur, publie=publie,
    )
    return await service.list_page(where, page)


@router.get("/search")
async def search_blogs(
    q: str | None = Query(None),
    categorie: BlogCategory | None = Query(None),
    auteur: str | None = Query(None),
    tags: str | None = Query(None),
    service: BlogService = Depends(get_blog_service),
):
    where = service.filters(
        q=q, categorie=categorie.value if categorie else None,
        auteur=auteur, tags=tags,
    )
    return await service.search_all(where)


@router.get("/categorie/{categorie}")
async def list_blogs_by_category(
    categorie: BlogCategory,
    page: PageRequest = Depends(page_request),
    service: BlogService = Depends(get_blog_service),
):
    """Published posts of one category, newest first."""
    return await service.list_by_category(categorie.value, page)


@router.get("/{record_id}")
async def get_blog(record_id: str, service: BlogService = Depends(get_blog_service)):
    return await service.get_by_id(record_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_blog(body: BlogCreate, service: BlogService = Depends(get_blog_service)):
    return await service.create(body)


@router.put("/{record_id}")
async def update_blog(
    record_id: str, body: BlogUpdate, service: BlogService = Depends(get_blog_service),
):
    return await service.update(record_id, body)


@router.delete("/{record_id}")
async def delete_blog(record_id: str, service: BlogService = Depends(get_blog_service)):
    return await service.delete(record_id)
