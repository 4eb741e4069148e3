"""Caller Identity — resolves the owner identifier from a raw header value.

Invariants:
    - Absent, empty or whitespace-only values raise MissingIdentityError
    - The identifier is trusted as given (no verification); only surrounding
      whitespace is stripped
"""

from app.core.domain_types import OwnerId
from app.core.errors import MissingIdentityError


def resolve_owner_id(raw: str | None, header: str) -> OwnerId:
    """Return the caller's OwnerId or raise before any store access."""
    value = (raw or "").strip()
    if not value:
        raise MissingIdentityError(header)
    return OwnerId(value)
