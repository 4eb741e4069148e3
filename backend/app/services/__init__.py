"""Services Layer — resource handlers and the owner-scoped record store.

Invariants:
    - Handlers orchestrate: normalize (core) → store (IO) → translate (core)
    - The store is the only module that builds SQL statements
"""
