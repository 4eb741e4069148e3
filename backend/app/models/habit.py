"""Habit ORM — a recurring habit with streak counters.

Invariants:
    - meta_diaria is nullable (no daily target unless set)
    - streak_atual and melhor_streak start at 0; ativo starts true
    - ativo=false is a meaningful stored value, never replaced by a default
"""

from sqlalchemy import String, Text, Integer, Boolean
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, OwnedRecordMixin


class Habit(OwnedRecordMixin, Base):
    __tablename__ = "habits"

    nome: Mapped[str] = mapped_column(String(300), nullable=False)
    descricao: Mapped[str | None] = mapped_column(Text, nullable=True)
    frequencia: Mapped[str] = mapped_column(
        String(30), nullable=False, server_default="diaria",
    )
    meta_diaria: Mapped[int | None] = mapped_column(Integer, nullable=True)
    streak_atual: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default="0",
    )
    melhor_streak: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default="0",
    )
    ativo: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default="true",
    )
