"""Owner-Scoped Record Store — builds and runs every datastore statement.

Invariants:
    - Every SELECT/UPDATE/DELETE carries `user_id = :owner`; no statement is
      ever built without it
    - update/delete are single statements matching (id, user_id) with
      RETURNING, so "no row matched" is observable as None
    - Mutations commit before returning; failures roll back and surface as
      DatabaseError via translate_db_errors (no retry)
    - List filters are equality-only and restricted to the descriptor's
      declared filter fields; other query parameters are ignored

Design Decisions:
    - SQLAlchemy Core over ORM instances: rows go straight back to the client
      as dicts, no identity map needed
    - Ties on the sort key break on created_at, then id, in the list
      direction: list order is total
"""

from typing import Mapping

from sqlalchemy import Table, delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

import app.models  # noqa: F401  (registers every table on Base.metadata)
from app.core.domain_types import (
    OwnerId, Record, RecordId, SortDirection,
    ID_FIELD, OWNER_FIELD, CREATED_FIELD,
)
from app.core.resources import ResourceDescriptor
from app.db.base import Base
from app.infrastructure.database import translate_db_errors


def table_for(resource: ResourceDescriptor) -> Table:
    """Resolve the resource's table from the shared metadata."""
    return Base.metadata.tables[resource.table]


class OwnerScopedStore:
    """RecordStore implementation for one resource kind over one session."""

    def __init__(self, session: AsyncSession, resource: ResourceDescriptor):
        self._session = session
        self._resource = resource
        self._table = table_for(resource)

    def _owned(self, owner_id: OwnerId, record_id: RecordId):
        t = self._table
        return (t.c[ID_FIELD] == record_id) & (t.c[OWNER_FIELD] == owner_id)

    def _ordering(self) -> list:
        t = self._table
        columns = [t.c[self._resource.order_by]]
        if self._resource.order_by != CREATED_FIELD:
            columns.append(t.c[CREATED_FIELD])
        columns.append(t.c[ID_FIELD])
        if self._resource.direction is SortDirection.DESC:
            return [c.desc() for c in columns]
        return [c.asc() for c in columns]

    async def list(
        self, owner_id: OwnerId, filters: Mapping[str, str] | None = None,
    ) -> list[Record]:
        t = self._table
        query = select(t).where(t.c[OWNER_FIELD] == owner_id)
        for name, value in (filters or {}).items():
            if name in self._resource.filters:
                query = query.where(t.c[name] == value)
        query = query.order_by(*self._ordering())

        async with translate_db_errors("select", self._session):
            result = await self._session.execute(query)
            return [dict(row) for row in result.mappings().all()]

    async def get(self, owner_id: OwnerId, record_id: RecordId) -> Record | None:
        query = select(self._table).where(self._owned(owner_id, record_id))
        async with translate_db_errors("select", self._session):
            result = await self._session.execute(query)
            row = result.mappings().one_or_none()
        return dict(row) if row is not None else None

    async def insert(self, record: Record) -> Record:
        t = self._table
        stmt = insert(t).values(**record).returning(*t.c)
        async with translate_db_errors("insert", self._session):
            result = await self._session.execute(stmt)
            row = result.mappings().one()
            await self._session.commit()
        return dict(row)

    async def update(
        self, owner_id: OwnerId, record_id: RecordId, changes: Record,
    ) -> Record | None:
        t = self._table
        stmt = (
            update(t)
            .where(self._owned(owner_id, record_id))
            .values(**changes)
            .returning(*t.c)
        )
        async with translate_db_errors("update", self._session):
            result = await self._session.execute(stmt)
            row = result.mappings().one_or_none()
            await self._session.commit()
        return dict(row) if row is not None else None

    async def delete(self, owner_id: OwnerId, record_id: RecordId) -> RecordId | None:
        t = self._table
        stmt = (
            delete(t)
            .where(self._owned(owner_id, record_id))
            .returning(t.c[ID_FIELD])
        )
        async with translate_db_errors("delete", self._session):
            result = await self._session.execute(stmt)
            deleted = result.scalar_one_or_none()
            await self._session.commit()
        return RecordId(deleted) if deleted is not None else None
