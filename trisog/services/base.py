"""Service Base — shared session handling and SQLAlchemy error mapping.

Invariants:
    - Every statement a service runs goes through guard(); a SQLAlchemyError
      rolls the session back and surfaces as DatabaseError
    - commit_changes() is the only commit point of a request
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from trisog.core.errors import DatabaseError, ErrorContext

logger = logging.getLogger(__name__)


@asynccontextmanager
async def database_guard(
    db: AsyncSession, operation: str, resource: str | None = None,
) -> AsyncGenerator[None, None]:
    try:
        yield
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            f"Database error during {operation}: {e}",
            extra={"error_code": "DATABASE_ERROR", "resource": resource},
        )
        raise DatabaseError(operation, ErrorContext(resource=resource)) from e


async def commit_changes(db: AsyncSession) -> None:
    """Commit everything the request staged."""
    async with database_guard(db, "commit"):
        await db.commit()


class BaseService:
    """Holds the request session; subclasses set resource for log context."""
    resource: str = ""

    def __init__(self, db: AsyncSession):
        self.db = db

    def guard(self, operation: str):
        return database_guard(self.db, operation, self.resource)

    async def _get(self, model, entity_id: str):
        async with self.guard(f"get {self.resource}"):
            return await self.db.get(model, entity_id)

    async def _add(self, entity):
        async with self.guard(f"create {self.resource}"):
            self.db.add(entity)
            await self.db.flush()
        return entity

    async def _flush(self, operation: str) -> None:
        async with self.guard(operation):
            await self.db.flush()

    async def _delete(self, entity) -> None:
        async with self.guard(f"delete {self.resource}"):
            await self.db.delete(entity)
            await self.db.flush()


class CrudService(BaseService):
    """Plain CRUD over one model, listed in insertion (object id) order."""
    model: type

    async def list_all(self) -> list:
        async with self.guard(f"list {self.resource}"):
            result = await self.db.execute(
                select(self.model).order_by(self.model.id),
            )
            return list(result.scalars().all())

    async def get_by_id(self, entity_id: str):
        return await self._get(self.model, entity_id)

    async def get_many(self, entity_ids) -> dict:
        """Fetch rows by id, keyed by id; unknown ids are simply absent."""
        ids = list(dict.fromkeys(entity_ids))
        if not ids:
            return {}
        async with self.guard(f"get {self.resource}"):
            result = await self.db.execute(
                select(self.model).where(self.model.id.in_(ids)),
            )
            return {row.id: row for row in result.scalars().all()}

    async def create(self, **fields):
        return await self._add(self.model(**fields))

    async def update(self, entity, **fields):
        for name, value in fields.items():
            setattr(entity, name, value)
        await self._flush(f"update {self.resource}")
        return entity

    async def delete(self, entity) -> None:
        await self._delete(entity)
