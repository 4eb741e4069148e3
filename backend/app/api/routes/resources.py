"""Resource Routes — one CRUD router per resource descriptor.

Invariants:
    - Every route depends on get_owner_id first: no identity, no DB session,
      no store call
    - Routes never contain business logic (delegate to ResourceHandlers)
    - GET list → 200 bare array; POST → 201 row; GET/PUT one → 200 row;
      DELETE → 200 acknowledgment; unmatched (id, owner) → 404

Design Decisions:
    - Router factory over hand-written modules: the nine resource kinds differ
      only in their descriptor
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependencies import get_owner_id
from app.core.domain_types import OwnerId, RecordId
from app.core.resources import RESOURCES, ResourceDescriptor
from app.infrastructure.database import get_db
from app.schemas.common import DeleteResponse, ERROR_RESPONSES
from app.services.handle_resource import ResourceHandlers
from app.services.record_store import OwnerScopedStore


def build_resource_router(resource: ResourceDescriptor) -> APIRouter:
    """Build the list/get/create/update/delete routes for one resource kind."""
    router = APIRouter(
        prefix=f"/api/{resource.name}",
        tags=[resource.name],
        responses=ERROR_RESPONSES,
    )

    def handlers_for(db: AsyncSession) -> ResourceHandlers:
        return ResourceHandlers(OwnerScopedStore(db, resource), resource)

    @router.get("", name=f"list_{resource.table}")
    async def list_records(
        request: Request,
        owner_id: OwnerId = Depends(get_owner_id),
        db: AsyncSession = Depends(get_db),
    ) -> list[dict[str, Any]]:
        filters = {
            name: value
            for name, value in request.query_params.items()
            if name in resource.filters
        }
        return await handlers_for(db).list(owner_id, filters)

    @router.get("/{record_id}", name=f"get_{resource.table}")
    async def get_record(
        record_id: str,
        owner_id: OwnerId = Depends(get_owner_id),
        db: AsyncSession = Depends(get_db),
    ) -> dict[str, Any]:
        return await handlers_for(db).get(owner_id, RecordId(record_id))

    @router.post(
        "", status_code=status.HTTP_201_CREATED, name=f"create_{resource.table}",
    )
    async def create_record(
        owner_id: OwnerId = Depends(get_owner_id),
        payload: dict[str, Any] = Body(...),
        db: AsyncSession = Depends(get_db),
    ) -> dict[str, Any]:
        return await handlers_for(db).create(owner_id, payload)

    @router.put("/{record_id}", name=f"update_{resource.table}")
    async def update_record(
        record_id: str,
        owner_id: OwnerId = Depends(get_owner_id),
        payload: dict[str, Any] = Body(...),
        db: AsyncSession = Depends(get_db),
    ) -> dict[str, Any]:
        return await handlers_for(db).update(owner_id, RecordId(record_id), payload)

    @router.delete(
        "/{record_id}", response_model=DeleteResponse,
        name=f"delete_{resource.table}",
    )
    async def delete_record(
        record_id: str,
        owner_id: OwnerId = Depends(get_owner_id),
        db: AsyncSession = Depends(get_db),
    ):
        return await handlers_for(db).delete(owner_id, RecordId(record_id))

    return router


routers: list[APIRouter] = [
    build_resource_router(resource) for resource in RESOURCES.values()
]
