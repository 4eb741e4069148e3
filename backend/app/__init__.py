"""India App backend — owner-scoped CRUD API for personal productivity data.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
