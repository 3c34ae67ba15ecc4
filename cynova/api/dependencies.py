"""Route Dependencies — per-request service construction and shared query params.

Invariants:
    - Every service gets a repository bound to the request's AsyncSession
    - page >= 1 and 1 <= limit <= MAX_LIMIT, otherwise a 400 validation error
"""

from fastapi import Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from cynova.core.pagination import DEFAULT_LIMIT, DEFAULT_PAGE, MAX_LIMIT, PageRequest
from cynova.infrastructure.database import get_db
from cynova.infrastructure.repository import SqlRepository
from cynova.models.blog import Blog
from cynova.models.ingredient import Ingredient
from cynova.models.product import Product
from cynova.models.user import User
from cynova.services.blog_service import BlogService
from cynova.services.ingredient_service import IngredientService
from cynova.services.product_service import ProductService
from cynova.services.user_service import UserService


def page_request(
    page: int = Query(DEFAULT_PAGE, ge=1),
    limit: int = Query(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT),
) -> PageRequest:
    return PageRequest(page=page, limit=limit)


def get_product_service(db: AsyncSession = Depends(get_db)) -> ProductService:
    return ProductService(SqlRepository(db, Product))


def get_ingredient_service(db: AsyncSession = Depends(get_db)) -> IngredientService:
    return IngredientService(SqlRepository(db, Ingredient))


def get_blog_service(db: AsyncSession = Depends(get_db)) -> BlogService:
    return BlogService(SqlRepository(db, Blog))


def get_user_service(db: AsyncSession = Depends(get_db)) -> UserService:
    return UserService(SqlRepository(db, User))
