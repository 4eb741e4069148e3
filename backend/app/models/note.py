"""Note ORM — free-text note, listed most-recently-updated first."""

from sqlalchemy import String, Text, Boolean, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, OwnedRecordMixin


class Note(OwnedRecordMixin, Base):
    __tablename__ = "notes"

    titulo: Mapped[str] = mapped_column(String(500), nullable=False)
    conteudo: Mapped[str | None] = mapped_column(Text, nullable=True)
    tags: Mapped[list | None] = mapped_column(JSON, nullable=True)
    fixada: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default="false",
    )
    project_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
