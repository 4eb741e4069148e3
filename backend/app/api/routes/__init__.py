"""Route Modules — health probes and the per-resource CRUD routers.

Invariants:
    - Each module exposes APIRouter instances with their own prefix and tags
    - Routes never contain business logic (delegate to services/)
"""
