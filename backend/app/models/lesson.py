"""Lesson ORM — one lesson of a course, listed in `ordem` order."""

from sqlalchemy import String, Text, Integer, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, OwnedRecordMixin


class Lesson(OwnedRecordMixin, Base):
    __tablename__ = "lessons"

    course_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    titulo: Mapped[str] = mapped_column(String(500), nullable=False)
    ordem: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")
    duracao_minutos: Mapped[int | None] = mapped_column(Integer, nullable=True)
    concluida: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default="false",
    )
    anotacoes: Mapped[str | None] = mapped_column(Text, nullable=True)
