"""Resource Handlers — the request pipeline shared by every resource kind.

Invariants:
    - Owner id is already resolved when a handler runs (api/dependencies.py)
    - Writes go through the normalizer before touching the store
    - Exactly one store call per operation
    - None from the store on get/update/delete becomes ResourceNotFoundError
"""

import logging
from typing import Any, Mapping

from app.core.domain_types import OwnerId, Record, RecordId, ID_FIELD
from app.core.normalize import normalize_create, normalize_update
from app.core.repository_protocols import RecordStore
from app.core.resources import ResourceDescriptor
from app.core.translate_result import delete_ack, require_row

logger = logging.getLogger(__name__)


class ResourceHandlers:
    """list / get / create / update / delete for one resource kind."""

    def __init__(self, store: RecordStore, resource: ResourceDescriptor):
        self.store = store
        self.resource = resource

    def _log_extra(self, owner_id: OwnerId, record_id: str | None = None) -> dict:
        return {
            "resource": self.resource.name,
            "user_id": owner_id,
            "record_id": record_id,
        }

    async def list(
        self, owner_id: OwnerId, filters: Mapping[str, str] | None = None,
    ) -> list[Record]:
        return await self.store.list(owner_id, filters)

    async def get(self, owner_id: OwnerId, record_id: RecordId) -> Record:
        row = await self.store.get(owner_id, record_id)
        return require_row(row, self.resource, record_id)

    async def create(self, owner_id: OwnerId, payload: Any) -> Record:
        record = normalize_create(self.resource, payload, owner_id)
        row = await self.store.insert(record)
        logger.info(
            f"Created {self.resource.label.lower()}",
            extra=self._log_extra(owner_id, row[ID_FIELD]),
        )
        return row

    async def update(
        self, owner_id: OwnerId, record_id: RecordId, payload: Any,
    ) -> Record:
        normalized = normalize_update(self.resource, payload)
        if normalized.ignored:
            logger.warning(
                f"Ignoring unknown {self.resource.name} fields: "
                f"{', '.join(sorted(normalized.ignored))}",
                extra=self._log_extra(owner_id, record_id),
            )
        row = await self.store.update(owner_id, record_id, normalized.changes)
        row = require_row(row, self.resource, record_id)
        logger.info(
            f"Updated {self.resource.label.lower()}",
            extra=self._log_extra(owner_id, record_id),
        )
        return row

    async def delete(self, owner_id: OwnerId, record_id: RecordId) -> dict:
        deleted = await self.store.delete(owner_id, record_id)
        ack = delete_ack(deleted, self.resource, record_id)
        logger.info(
            f"Deleted {self.resource.label.lower()}",
            extra=self._log_extra(owner_id, record_id),
        )
        return ack
