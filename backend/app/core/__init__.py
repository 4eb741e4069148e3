"""Core Layer — pure request-shaping logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - All functions are pure apart from injectable clock and id generation
"""
