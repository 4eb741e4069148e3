"""Request Dependencies — caller identity for every resource route.

Invariants:
    - The identity header name comes from settings (default x-user-id)
    - A missing or blank header raises MissingIdentityError before the route
      body, the normalizer or the store run
    - The value is trusted as-is; replacing this dependency with a verified
      session/token lookup must keep returning an OwnerId
"""

from fastapi import Request

from app.config import get_settings
from app.core.domain_types import OwnerId
from app.core.identity import resolve_owner_id


async def get_owner_id(request: Request) -> OwnerId:
    header = get_settings().user_id_header
    return resolve_owner_id(request.headers.get(header), header)
