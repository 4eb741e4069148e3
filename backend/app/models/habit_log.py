"""HabitLog ORM — one check-in of a habit on a given day."""

from datetime import date

from sqlalchemy import String, Text, Integer, Boolean, Date
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, OwnedRecordMixin


class HabitLog(OwnedRecordMixin, Base):
    __tablename__ = "habit_logs"

    habit_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    data: Mapped[date] = mapped_column(Date, nullable=False)
    quantidade: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default="1",
    )
    concluido: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default="true",
    )
    observacao: Mapped[str | None] = mapped_column(Text, nullable=True)
