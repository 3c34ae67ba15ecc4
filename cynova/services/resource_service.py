"""Resource Service — the shared validate → store → shape pipeline for every resource.

Invariants:
    - A blank identifier raises MissingIdentifierError before any lookup
    - Read/update/delete verify existence first and raise ResourceNotFoundError
    - Store UNIQUE violations on create/update become UniquenessConflictError
      with the resource's own wording; NOT_FOUND during a write becomes 404
    - Other StoreErrors propagate untouched to the global mapper
    - Paginated results never hold more than `limit` records

Design Decisions:
    - One generic class + per-resource subclasses: resources differ only in
      labels, output schema, ordering and filters
    - Page query and count query run one after the other on the request
      session (an AsyncSession must not be used concurrently)
"""

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Sequence, TypeVar

from cynova.core.errors import (
    CynovaError, ErrorContext, MissingIdentifierError, ResourceNotFoundError,
    StoreError, StoreErrorKind, UniquenessConflictError,
)
from cynova.core.pagination import PageRequest, counted, paginated
from cynova.core.repository_protocols import ResourceRepository
from cynova.schemas.common import RecordOut, WireModel

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT")


@dataclass(frozen=True)
class ResourceLabels:
    """Public wording and envelope keys for one resource."""
    plural: str
    singular: str
    id_label: str
    not_found: str
    created: str
    updated: str
    deleted: str
    conflict: str


class ResourceService(Generic[ModelT]):
    """CRUD and list operations over one ResourceRepository."""

    labels: ClassVar[ResourceLabels]
    output: ClassVar[type[RecordOut]]
    unique_field: ClassVar[str | None] = None

    def __init__(self, repository: ResourceRepository[ModelT]):
        self.repository = repository

    # ─── Hooks ───────────────────────────────────────────────────

    def default_order(self) -> Sequence[Any]:
        raise NotImplementedError

    async def prepare_create(self, data: dict[str, Any]) -> dict[str, Any]:
        return data

    async def prepare_update(self, data: dict[str, Any]) -> dict[str, Any]:
        return data

    # ─── Shaping ─────────────────────────────────────────────────

    def render(self, record: ModelT) -> dict[str, Any]:
        return self.output.render(record)

    def _context(self, record_id: str | None = None) -> ErrorContext:
        return ErrorContext(resource=self.labels.plural, record_id=record_id)

    # ─── Lookups ─────────────────────────────────────────────────

    def require_id(self, record_id: str | None) -> str:
        record_id = (record_id or "").strip()
        if not record_id:
            raise MissingIdentifierError(self.labels.id_label, self._context())
        return record_id

    async def get_or_404(self, record_id: str | None) -> ModelT:
        record_id = self.require_id(record_id)
        record = await self.repository.get(record_id)
        if record is None:
            raise ResourceNotFoundError(self.labels.not_found, self._context(record_id))
        return record

    # ─── Operations ──────────────────────────────────────────────

    async def list_page(self, where: Sequence[Any], page: PageRequest) -> dict[str, Any]:
        records = await self.repository.find(
            where, order_by=self.default_order(),
            offset=page.offset, limit=page.limit,
        )
        total = await self.repository.count(where)
        return paginated(
            self.labels.plural, [self.render(r) for r in records], page, total,
        )

    async def search_all(self, where: Sequence[Any]) -> dict[str, Any]:
        records = await self.repository.find(where, order_by=self.default_order())
        return counted(self.labels.plural, [self.render(r) for r in records])

    async def get_by_id(self, record_id: str | None) -> dict[str, Any]:
        return self.render(await self.get_or_404(record_id))

    async def create(self, payload: WireModel) -> dict[str, Any]:
        data = await self.prepare_create(payload.to_store())
        await self._reject_duplicate(data)
        try:
            record = await self.repository.create(data)
        except StoreError as e:
            translated = self._translate(e)
            if translated is None:
                raise
            raise translated from e
        logger.info(
            f"{self.labels.singular} created",
            extra={"resource": self.labels.plural, "record_id": record.id},
        )
        return {"message": self.labels.created, self.labels.singular: self.render(record)}

    async def update(self, record_id: str | None, payload: WireModel) -> dict[str, Any]:
        record = await self.get_or_404(record_id)
        record_id = record.id
        data = await self.prepare_update(payload.to_store())
        try:
            record = await self.repository.update(record, data)
        except StoreError as e:
            translated = self._translate(e, record_id)
            if translated is None:
                raise
            raise translated from e
        logger.info(
            f"{self.labels.singular} updated",
            extra={"resource": self.labels.plural, "record_id": record_id},
        )
        return {"message": self.labels.updated, self.labels.singular: self.render(record)}

    async def delete(self, record_id: str | None) -> dict[str, Any]:
        record = await self.get_or_404(record_id)
        record_id = record.id
        try:
            await self.repository.delete(record)
        except StoreError as e:
            translated = self._translate(e, record_id)
            if translated is None:
                raise
            raise translated from e
        logger.info(
            f"{self.labels.singular} deleted",
            extra={"resource": self.labels.plural, "record_id": record_id},
        )
        return {"message": self.labels.deleted}

    # ─── Internals ───────────────────────────────────────────────

    async def _reject_duplicate(self, data: dict[str, Any]) -> None:
        if self.unique_field is None or data.get(self.unique_field) is None:
            return
        existing = await self.repository.find_one_by(
            **{self.unique_field: data[self.unique_field]},
        )
        if existing is not None:
            raise UniquenessConflictError(self.labels.conflict, self._context())

    def _translate(
        self, error: StoreError, record_id: str | None = None,
    ) -> CynovaError | None:
        if error.kind is StoreErrorKind.UNIQUE_VIOLATION:
            return UniquenessConflictError(self.labels.conflict, self._context(record_id))
        if error.kind is StoreErrorKind.NOT_FOUND:
            return ResourceNotFoundError(self.labels.not_found, self._context(record_id))
        return None
