"""Book ORM — reading list entry with progress and rating."""

from datetime import date

from sqlalchemy import String, Text, Integer, Float, Date
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, OwnedRecordMixin


class Book(OwnedRecordMixin, Base):
    __tablename__ = "books"

    titulo: Mapped[str] = mapped_column(String(500), nullable=False)
    autor: Mapped[str | None] = mapped_column(String(300), nullable=True)
    status: Mapped[str] = mapped_column(
        String(30), nullable=False, server_default="quero_ler",
    )
    total_paginas: Mapped[int | None] = mapped_column(Integer, nullable=True)
    pagina_atual: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default="0",
    )
    avaliacao: Mapped[float | None] = mapped_column(Float, nullable=True)
    data_inicio: Mapped[date | None] = mapped_column(Date, nullable=True)
    data_fim: Mapped[date | None] = mapped_column(Date, nullable=True)
    anotacoes: Mapped[str | None] = mapped_column(Text, nullable=True)
