"""Task ORM — a to-do item, optionally attached to a project.

Invariants:
    - titulo is non-nullable
    - status defaults to "pendente"
    - subtarefas stores the client's checklist array as-is
"""

from datetime import date

from sqlalchemy import String, Text, Date, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, OwnedRecordMixin


class Task(OwnedRecordMixin, Base):
    __tablename__ = "tasks"

    titulo: Mapped[str] = mapped_column(String(500), nullable=False)
    descricao: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(30), nullable=False, server_default="pendente",
    )
    prioridade: Mapped[str | None] = mapped_column(
        String(20), nullable=True, server_default="media",
    )
    data_vencimento: Mapped[date | None] = mapped_column(Date, nullable=True)
    project_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    subtarefas: Mapped[list | None] = mapped_column(JSON, nullable=True)
