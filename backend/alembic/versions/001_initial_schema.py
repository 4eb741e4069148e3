"""Initial schema — one owner-scoped table per resource kind.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TABLES = (
    "tasks", "projects", "courses", "lessons", "books",
    "notes", "habits", "habit_logs", "goals",
)


def _owned_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.String(36), primary_key=True),
        sa.Column("user_id", sa.String(255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "tasks",
        *_owned_columns(),
        sa.Column("titulo", sa.String(500), nullable=False),
        sa.Column("descricao", sa.Text, nullable=True),
        sa.Column("status", sa.String(30), nullable=False, server_default="pendente"),
        sa.Column("prioridade", sa.String(20), nullable=True, server_default="media"),
        sa.Column("data_vencimento", sa.Date, nullable=True),
        sa.Column("project_id", sa.String(36), nullable=True),
        sa.Column("subtarefas", sa.JSON, nullable=True),
    )

    op.create_table(
        "projects",
        *_owned_columns(),
        sa.Column("nome", sa.String(300), nullable=False),
        sa.Column("descricao", sa.Text, nullable=True),
        sa.Column("status", sa.String(30), nullable=False, server_default="ativo"),
        sa.Column("cor", sa.String(20), nullable=True),
        sa.Column("data_inicio", sa.Date, nullable=True),
        sa.Column("data_fim", sa.Date, nullable=True),
    )

    op.create_table(
        "courses",
        *_owned_columns(),
        sa.Column("titulo", sa.String(500), nullable=False),
        sa.Column("plataforma", sa.String(200), nullable=True),
        sa.Column("instrutor", sa.String(200), nullable=True),
        sa.Column("url", sa.String(2000), nullable=True),
        sa.Column("status", sa.String(30), nullable=False, server_default="em_andamento"),
        sa.Column("total_aulas", sa.Integer, nullable=False, server_default="0"),
        sa.Column("aulas_concluidas", sa.Integer, nullable=False, server_default="0"),
    )

    op.create_table(
        "lessons",
        *_owned_columns(),
        sa.Column("course_id", sa.String(36), nullable=False),
        sa.Column("titulo", sa.String(500), nullable=False),
        sa.Column("ordem", sa.Integer, nullable=False, server_default="0"),
        sa.Column("duracao_minutos", sa.Integer, nullable=True),
        sa.Column("concluida", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("anotacoes", sa.Text, nullable=True),
    )
    op.create_index("ix_lessons_course_id", "lessons", ["course_id"])

    op.create_table(
        "books",
        *_owned_columns(),
        sa.Column("titulo", sa.String(500), nullable=False),
        sa.Column("autor", sa.String(300), nullable=True),
        sa.Column("status", sa.String(30), nullable=False, server_default="quero_ler"),
        sa.Column("total_paginas", sa.Integer, nullable=True),
        sa.Column("pagina_atual", sa.Integer, nullable=False, server_default="0"),
        sa.Column("avaliacao", sa.Float, nullable=True),
        sa.Column("data_inicio", sa.Date, nullable=True),
        sa.Column("data_fim", sa.Date, nullable=True),
        sa.Column("anotacoes", sa.Text, nullable=True),
    )

    op.create_table(
        "notes",
        *_owned_columns(),
        sa.Column("titulo", sa.String(500), nullable=False),
        sa.Column("conteudo", sa.Text, nullable=True),
        sa.Column("tags", sa.JSON, nullable=True),
        sa.Column("fixada", sa.Boolean, nullable=False, server_default="false"),
        sa.Column("project_id", sa.String(36), nullable=True),
    )

    op.create_table(
        "habits",
        *_owned_columns(),
        sa.Column("nome", sa.String(300), nullable=False),
        sa.Column("descricao", sa.Text, nullable=True),
        sa.Column("frequencia", sa.String(30), nullable=False, server_default="diaria"),
        sa.Column("meta_diaria", sa.Integer, nullable=True),
        sa.Column("streak_atual", sa.Integer, nullable=False, server_default="0"),
        sa.Column("melhor_streak", sa.Integer, nullable=False, server_default="0"),
        sa.Column("ativo", sa.Boolean, nullable=False, server_default="true"),
    )

    op.create_table(
        "habit_logs",
        *_owned_columns(),
        sa.Column("habit_id", sa.String(36), nullable=False),
        sa.Column("data", sa.Date, nullable=False),
        sa.Column("quantidade", sa.Integer, nullable=False, server_default="1"),
        sa.Column("concluido", sa.Boolean, nullable=False, server_default="true"),
        sa.Column("observacao", sa.Text, nullable=True),
    )
    op.create_index("ix_habit_logs_habit_id", "habit_logs", ["habit_id"])

    op.create_table(
        "goals",
        *_owned_columns(),
        sa.Column("titulo", sa.String(500), nullable=False),
        sa.Column("descricao", sa.Text, nullable=True),
        sa.Column("categoria", sa.String(100), nullable=True),
        sa.Column("status", sa.String(30), nullable=False, server_default="em_andamento"),
        sa.Column("valor_alvo", sa.Float, nullable=True),
        sa.Column("valor_atual", sa.Float, nullable=False, server_default="0"),
        sa.Column("unidade", sa.String(50), nullable=True),
        sa.Column("prazo", sa.Date, nullable=True),
        sa.Column("checklist", sa.JSON, nullable=True),
    )

    for table in TABLES:
        op.create_index(f"ix_{table}_user_id", table, ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_habit_logs_habit_id", table_name="habit_logs")
    op.drop_index("ix_lessons_course_id", table_name="lessons")
    for table in reversed(TABLES):
        op.drop_index(f"ix_{table}_user_id", table_name=table)
        op.drop_table(table)
