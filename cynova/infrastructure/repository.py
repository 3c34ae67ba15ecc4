"""SQL Repository — single-table CRUD over an AsyncSession with tagged store errors.

Invariants:
    - Each write commits immediately (one store call per operation) and
      refreshes the instance so server-side defaults are visible
    - IntegrityError is classified into UNIQUE / FOREIGN_KEY / OTHER
    - StaleDataError (row vanished between read and write) becomes NOT_FOUND
    - Any other SQLAlchemyError becomes StoreError(OTHER)

Design Decisions:
    - Driver codes normalized here once: PostgreSQL reports SQLSTATE 23505/23503,
      SQLite reports "UNIQUE constraint failed" / "FOREIGN KEY constraint failed"
    - Generic over the model class: resources differ only in model and ordering,
      which services pass in
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Generic, Sequence, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from cynova.core.errors import ErrorContext, StoreError, StoreErrorKind
from cynova.db.base import Base

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=Base)

_UNIQUE_SQLSTATE = "23505"
_FOREIGN_KEY_SQLSTATE = "23503"


def classify_integrity_error(exc: IntegrityError) -> StoreErrorKind:
    """Map a driver integrity error onto the closed StoreErrorKind set."""
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    text = str(orig).lower()
    if sqlstate == _UNIQUE_SQLSTATE or "unique constraint" in text:
        return StoreErrorKind.UNIQUE_VIOLATION
    if sqlstate == _FOREIGN_KEY_SQLSTATE or "foreign key constraint" in text:
        return StoreErrorKind.FOREIGN_KEY_VIOLATION
    return StoreErrorKind.OTHER


class SqlRepository(Generic[ModelT]):
    """CRUD + find/count for one ORM model."""

    def __init__(self, session: AsyncSession, model: type[ModelT]):
        self._session = session
        self._model = model

    @property
    def model(self) -> type[ModelT]:
        return self._model

    @asynccontextmanager
    async def _store_call(self, operation: str, record_id: str | None = None) -> AsyncIterator[None]:
        context = ErrorContext(resource=self._model.__tablename__, record_id=record_id)
        try:
            yield
        except IntegrityError as e:
            await self._session.rollback()
            kind = classify_integrity_error(e)
            logger.warning(
                f"Integrity error on {operation}: {kind.value}",
                extra={"resource": context.resource, "operation": operation},
            )
            raise StoreError(kind, operation, context) from e
        except StaleDataError as e:
            await self._session.rollback()
            raise StoreError(StoreErrorKind.NOT_FOUND, operation, context) from e
        except SQLAlchemyError as e:
            await self._session.rollback()
            logger.error(
                f"Store error on {operation}: {e}",
                extra={"resource": context.resource, "operation": operation},
            )
            raise StoreError(StoreErrorKind.OTHER, operation, context) from e

    async def create(self, data: dict[str, Any]) -> ModelT:
        async with self._store_call("create"):
            record = self._model(**data)
            self._session.add(record)
            await self._session.commit()
            await self._session.refresh(record)
        return record

    async def get(self, record_id: str) -> ModelT | None:
        async with self._store_call("get", record_id):
            return await self._session.get(self._model, record_id)

    async def find_one_by(self, **fields: Any) -> ModelT | None:
        conditions = [getattr(self._model, name) == value for name, value in fields.items()]
        async with self._store_call("find_one_by"):
            result = await self._session.execute(
                select(self._model).where(*conditions).limit(1),
            )
            return result.scalar_one_or_none()

    async def update(self, record: ModelT, data: dict[str, Any]) -> ModelT:
        async with self._store_call("update", record.id):
            for name, value in data.items():
                setattr(record, name, value)
            await self._session.commit()
            await self._session.refresh(record)
        return record

    async def delete(self, record: ModelT) -> None:
        async with self._store_call("delete", record.id):
            await self._session.delete(record)
            await self._session.commit()

    async def find(
        self,
        where: Sequence[Any] = (),
        *,
        order_by: Sequence[Any] = (),
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[ModelT]:
        query = select(self._model).where(*where).order_by(*order_by)
        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)
        async with self._store_call("find"):
            result = await self._session.execute(query)
            return list(result.scalars().all())

    async def count(self, where: Sequence[Any] = ()) -> int:
        query = select(func.count()).select_from(self._model).where(*where)
        async with self._store_call("count"):
            result = await self._session.execute(query)
            return int(result.scalar_one())
