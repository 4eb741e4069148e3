"""Infrastructure Layer — database wiring and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic except core/errors
    - Store failures leave this layer as DatabaseError, never as SQLAlchemy types
"""
