"""Resource Registry — declarative descriptors for every resource kind.

Invariants:
    - Each descriptor names its URL segment, table, required fields, defaults,
      field kinds, ordering and the query parameters usable as equality filters
    - Recognized fields = required fields + keys of `defaults`
    - A recognized field missing from `kinds` is TEXT
    - Descriptors are immutable and shared by all requests
    - RESOURCES is the single source of truth: routers, store and tests iterate it

Design Decisions:
    - Table referenced by name, not ORM class: core/ stays free of db/ imports;
      the store resolves the table from Base.metadata
"""

from dataclasses import dataclass, field
from typing import Any, Mapping

from app.core.domain_types import (
    SortDirection, TaskStatus, ProgressStatus, BookStatus, FieldKind,
)

INTEGER = FieldKind.INTEGER
NUMBER = FieldKind.NUMBER
BOOLEAN = FieldKind.BOOLEAN
DATE = FieldKind.DATE
JSON = FieldKind.JSON


@dataclass(frozen=True, eq=False)
class ResourceDescriptor:
    """One resource kind's schema and list behaviour."""
    name: str
    table: str
    label: str
    required: tuple[str, ...]
    defaults: Mapping[str, Any] = field(default_factory=dict)
    kinds: Mapping[str, FieldKind] = field(default_factory=dict)
    order_by: str = "created_at"
    direction: SortDirection = SortDirection.DESC
    filters: tuple[str, ...] = ()

    @property
    def fields(self) -> frozenset[str]:
        """Every client-writable field of this resource."""
        return frozenset(self.required) | frozenset(self.defaults)

    @property
    def date_fields(self) -> frozenset[str]:
        return frozenset(n for n, k in self.kinds.items() if k is DATE)

    def kind_of(self, name: str) -> FieldKind:
        return self.kinds.get(name, FieldKind.TEXT)


TASKS = ResourceDescriptor(
    name="tasks", table="tasks", label="Task",
    required=("titulo",),
    defaults={
        "descricao": None,
        "status": TaskStatus.PENDING.value,
        "prioridade": "media",
        "data_vencimento": None,
        "project_id": None,
        "subtarefas": None,
    },
    kinds={"data_vencimento": DATE, "subtarefas": JSON},
    filters=("project_id", "status"),
)

PROJECTS = ResourceDescriptor(
    name="projects", table="projects", label="Project",
    required=("nome",),
    defaults={
        "descricao": None,
        "status": "ativo",
        "cor": None,
        "data_inicio": None,
        "data_fim": None,
    },
    kinds={"data_inicio": DATE, "data_fim": DATE},
    filters=("status",),
)

COURSES = ResourceDescriptor(
    name="courses", table="courses", label="Course",
    required=("titulo",),
    defaults={
        "plataforma": None,
        "instrutor": None,
        "url": None,
        "status": ProgressStatus.IN_PROGRESS.value,
        "total_aulas": 0,
        "aulas_concluidas": 0,
    },
    kinds={"total_aulas": INTEGER, "aulas_concluidas": INTEGER},
    filters=("status",),
)

LESSONS = ResourceDescriptor(
    name="lessons", table="lessons", label="Lesson",
    required=("course_id", "titulo"),
    defaults={
        "ordem": 0,
        "duracao_minutos": None,
        "concluida": False,
        "anotacoes": None,
    },
    kinds={"ordem": INTEGER, "duracao_minutos": INTEGER, "concluida": BOOLEAN},
    order_by="ordem",
    direction=SortDirection.ASC,
    filters=("course_id",),
)

BOOKS = ResourceDescriptor(
    name="books", table="books", label="Book",
    required=("titulo",),
    defaults={
        "autor": None,
        "status": BookStatus.WANT_TO_READ.value,
        "total_paginas": None,
        "pagina_atual": 0,
        "avaliacao": None,
        "data_inicio": None,
        "data_fim": None,
        "anotacoes": None,
    },
    kinds={
        "total_paginas": INTEGER, "pagina_atual": INTEGER, "avaliacao": NUMBER,
        "data_inicio": DATE, "data_fim": DATE,
    },
    filters=("status",),
)

NOTES = ResourceDescriptor(
    name="notes", table="notes", label="Note",
    required=("titulo",),
    defaults={
        "conteudo": None,
        "tags": None,
        "fixada": False,
        "project_id": None,
    },
    kinds={"tags": JSON, "fixada": BOOLEAN},
    order_by="updated_at",
    filters=("project_id",),
)

HABITS = ResourceDescriptor(
    name="habits", table="habits", label="Habit",
    required=("nome",),
    defaults={
        "descricao": None,
        "frequencia": "diaria",
        "meta_diaria": None,
        "streak_atual": 0,
        "melhor_streak": 0,
        "ativo": True,
    },
    kinds={
        "meta_diaria": INTEGER, "streak_atual": INTEGER,
        "melhor_streak": INTEGER, "ativo": BOOLEAN,
    },
)

HABIT_LOGS = ResourceDescriptor(
    name="habit-logs", table="habit_logs", label="Habit log",
    required=("habit_id", "data"),
    defaults={
        "quantidade": 1,
        "concluido": True,
        "observacao": None,
    },
    kinds={"data": DATE, "quantidade": INTEGER, "concluido": BOOLEAN},
    order_by="data",
    filters=("habit_id",),
)

GOALS = ResourceDescriptor(
    name="goals", table="goals", label="Goal",
    required=("titulo",),
    defaults={
        "descricao": None,
        "categoria": None,
        "status": ProgressStatus.IN_PROGRESS.value,
        "valor_alvo": None,
        "valor_atual": 0,
        "unidade": None,
        "prazo": None,
        "checklist": None,
    },
    kinds={
        "valor_alvo": NUMBER, "valor_atual": NUMBER,
        "prazo": DATE, "checklist": JSON,
    },
    filters=("status",),
)


RESOURCES: dict[str, ResourceDescriptor] = {
    r.name: r
    for r in (
        TASKS, PROJECTS, COURSES, LESSONS, BOOKS,
        NOTES, HABITS, HABIT_LOGS, GOALS,
    )
}

