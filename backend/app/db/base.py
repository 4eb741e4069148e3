"""SQLAlchemy Declarative Base — shared base class and owner-scoped columns.

Invariants:
    - All models inherit from Base
    - Base.metadata is the single source of truth for table lookup by name
    - Every resource table carries id, user_id, created_at, updated_at
"""

from datetime import datetime

from sqlalchemy import String, DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class OwnedRecordMixin:
    """Server-managed columns shared by every resource table."""

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
    )
