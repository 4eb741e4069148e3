"""Project ORM — groups tasks and notes."""

from datetime import date

from sqlalchemy import String, Text, Date
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, OwnedRecordMixin


class Project(OwnedRecordMixin, Base):
    __tablename__ = "projects"

    nome: Mapped[str] = mapped_column(String(300), nullable=False)
    descricao: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        String(30), nullable=False, server_default="ativo",
    )
    cor: Mapped[str | None] = mapped_column(String(20), nullable=True)
    data_inicio: Mapped[date | None] = mapped_column(Date, nullable=True)
    data_fim: Mapped[date | None] = mapped_column(Date, nullable=True)
