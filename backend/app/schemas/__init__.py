"""Pydantic Schemas — response and error shapes for the OpenAPI surface.

Invariants:
    - Request bodies stay free-form dicts; the normalizer owns their validation
"""
