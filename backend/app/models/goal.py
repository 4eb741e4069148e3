"""Goal ORM — a measurable goal with an optional checklist.

Invariants:
    - valor_atual starts at 0; valor_alvo and unidade are optional
    - checklist stores the client's array of items as-is
"""

from datetime import date

from sqlalchemy import String, Text, Float, Date, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, OwnedRecordMixin


class Goal(OwnedRecordMixin, Base):
    __tablename__ = "goals"

    titulo: Mapped[str] = mapped_column(String(500), nullable=False)
    descricao: Mapped[str | None] = mapped_column(Text, nullable=True)
    categoria: Mapped[str | None] = mapped_column(String(100), nullable=True)
    status: Mapped[str] = mapped_column(
        String(30), nullable=False, server_default="em_andamento",
    )
    valor_alvo: Mapped[float | None] = mapped_column(Float, nullable=True)
    valor_atual: Mapped[float] = mapped_column(
        Float, nullable=False, server_default="0",
    )
    unidade: Mapped[str | None] = mapped_column(String(50), nullable=True)
    prazo: Mapped[date | None] = mapped_column(Date, nullable=True)
    checklist: Mapped[list | None] = mapped_column(JSON, nullable=True)
