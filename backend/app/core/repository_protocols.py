"""Boundary Protocols — contract between the request pipeline and the datastore.

Invariants:
    - Every method takes the caller's OwnerId except insert, whose record
      already carries user_id from normalization
    - update/delete match on (id, user_id) in a single statement and return
      None when no row matched
    - Implementations raise DatabaseError (core/errors.py) on store failure

Design Decisions:
    - Protocol over ABC: structural subtyping, tests can pass any fake
    - Async in Protocol: implementations do IO
"""

from typing import Mapping, Protocol

from app.core.domain_types import OwnerId, Record, RecordId


class RecordStore(Protocol):
    """Owner-scoped persistence for one resource kind."""
    async def list(
        self, owner_id: OwnerId, filters: Mapping[str, str] | None = None,
    ) -> list[Record]: ...
    async def get(self, owner_id: OwnerId, record_id: RecordId) -> Record | None: ...
    async def insert(self, record: Record) -> Record: ...
    async def update(
        self, owner_id: OwnerId, record_id: RecordId, changes: Record,
    ) -> Record | None: ...
    async def delete(self, owner_id: OwnerId, record_id: RecordId) -> RecordId | None: ...
