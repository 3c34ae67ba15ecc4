"""User Routes — /api/users, including POST /login.

Invariants:
    - No response from this router ever contains the password hash
    - /login and /search registered before /{record_id}
"""

from fastapi import APIRouter, Depends, Query, status

from cynova.api.dependencies import get_user_service, page_request
from cynova.core.domain_types import UserRole
from cynova.core.pagination import PageRequest
from cynova.infrastructure.rate_limit import RouterRateLimiter
from cynova.schemas.user import LoginRequest, UserCreate, UserUpdate
from cynova.services.user_service import UserService

limiter = RouterRateLimiter("users")
router = APIRouter(
    prefix="/api/users", tags=["users"], dependencies=[Depends(limiter)],
)


@router.get("")
async def list_users(
    role: UserRole | None = Query(None),
    newsletter: bool | None = Query(None),
    page: PageRequest = Depends(page_request),
    service: UserService = Depends(get_user_service),
):
    where = service.filters(role=role.value if role else None, newsletter=newsletter)
    return await service.list_page(where, page)


@router.get("/search")
async def search_users(
    q: str | None = Query(None),
    role: UserRole | None = Query(None),
    newsletter: bool | None = Query(None),
    service: UserService = Depends(get_user_service),
):
    where = service.filters(
        q=q, role=role.value if role else None, newsletter=newsletter,
    )
    return await service.search_all(where)


@router.post("/login")
async def login(body: LoginRequest, service: UserService = Depends(get_user_service)):
    """Check email + password; 401 with one uniform body on any mismatch."""
    return await service.login(body)


@router.get("/{record_id}")
async def get_user(record_id: str, service: UserService = Depends(get_user_service)):
    return await service.get_by_id(record_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(body: UserCreate, service: UserService = Depends(get_user_service)):
    return await service.create(body)


@router.put("/{record_id}")
async def update_user(
    record_id: str, body: UserUpdate, service: UserService = Depends(get_user_service),
):
    return await service.update(record_id, body)


@router.delete("/{record_id}")
async def delete_user(record_id: str, service: UserService = Depends(get_user_service)):
    return await service.delete(record_id)
