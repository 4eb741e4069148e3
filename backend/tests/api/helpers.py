"""Shared helpers for route tests: identity headers and minimal payloads."""

from app.core.resources import ResourceDescriptor


def as_user(user_id: str) -> dict:
    """Identity header for a caller."""
    return {"x-user-id": user_id}


def minimal_payload(resource: ResourceDescriptor) -> dict:
    """Only the required fields, with plausible values."""
    return {
        name: "2026-01-15" if name in resource.date_fields else f"{name}-value"
        for name in resource.required
    }
