"""Result Translation — maps store outcomes onto HTTP-level results.

Invariants:
    - A None row (no row matched id AND owner) is always ResourceNotFoundError
    - Foreign-owned and non-existent ids produce the same error
    - Success bodies are the bare data: a row object, a list of rows, or the
      delete acknowledgment
"""

from app.core.domain_types import Record, RecordId
from app.core.errors import ResourceNotFoundError
from app.core.resources import ResourceDescriptor


def require_row(
    row: Record | None, resource: ResourceDescriptor, record_id: RecordId,
) -> Record:
    """Return the row or raise 404."""
    if row is None:
        raise ResourceNotFoundError(resource.label, record_id)
    return row


def delete_ack(
    deleted_id: RecordId | None, resource: ResourceDescriptor, record_id: RecordId,
) -> dict:
    """Acknowledgment body for a delete, or 404 when nothing was removed."""
    if deleted_id is None:
        raise ResourceNotFoundError(resource.label, record_id)
    return {"message": f"{resource.label} deleted", "id": deleted_id}
