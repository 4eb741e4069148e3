"""Course ORM — an online course followed lesson by lesson.

Invariants:
    - total_aulas and aulas_concluidas are counters starting at 0
"""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, OwnedRecordMixin


class Course(OwnedRecordMixin, Base):
    __tablename__ = "courses"

    titulo: Mapped[str] = mapped_column(String(500), nullable=False)
    plataforma: Mapped[str | None] = mapped_column(String(200), nullable=True)
    instrutor: Mapped[str | None] = mapped_column(String(200), nullable=True)
    url: Mapped[str | None] = mapped_column(String(2000), nullable=True)
    status: Mapped[str] = mapped_column(
        String(30), nullable=False, server_default="em_andamento",
    )
    total_aulas: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default="0",
    )
    aulas_concluidas: Mapped[int] = mapped_column(
        Integer, nullable=False, server_default="0",
    )
