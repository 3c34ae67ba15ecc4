"""Boundary Protocols — contract between resource services and the store.

Invariants:
    - Services depend on ResourceRepository, never on AsyncSession directly
    - Every write either succeeds or raises StoreError (core/errors.py)
    - `where` conditions are single-table predicates; no joins cross this boundary

Design Decisions:
    - Protocol over ABC: structural subtyping, fakes in tests need no inheritance
    - Async in Protocol: implementations do IO
"""

from typing import Any, Protocol, Sequence, TypeVar

ModelT = TypeVar("ModelT")


class ResourceRepository(Protocol[ModelT]):
    """Single-table CRUD + find/count — implemented by infrastructure/repository.py."""

    async def create(self, data: dict[str, Any]) -> ModelT: ...

    async def get(self, record_id: str) -> ModelT | None: ...

    async def find_one_by(self, **fields: Any) -> ModelT | None: ...

    async def update(self, record: ModelT, data: dict[str, Any]) -> ModelT: ...

    async def delete(self, record: ModelT) -> None: ...

    async def find(
        self,
        where: Sequence[Any] = (),
        *,
        order_by: Sequence[Any] = (),
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[ModelT]: ...

    async def count(self, where: Sequence[Any] = ()) -> int: ...
