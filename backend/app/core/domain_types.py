"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - OwnerId is the resolved caller identifier; every store call takes one
    - RecordId is the opaque string UUID generated at creation
    - Record is the plain-dict shape of one row, as the store returns it

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Server-managed column names live here so normalizer and store agree on them
"""

from enum import Enum
from typing import Any, NewType


# ─── Identity Types ──────────────────────────────────────────────

OwnerId = NewType("OwnerId", str)
RecordId = NewType("RecordId", str)

Record = dict[str, Any]


# ─── Server-managed columns ─────────────────────────────────────

ID_FIELD = "id"
OWNER_FIELD = "user_id"
CREATED_FIELD = "created_at"
UPDATED_FIELD = "updated_at"

# Never writable through an update payload.
IMMUTABLE_FIELDS: frozenset[str] = frozenset({ID_FIELD, OWNER_FIELD, CREATED_FIELD})
SERVER_MANAGED_FIELDS: frozenset[str] = IMMUTABLE_FIELDS | {UPDATED_FIELD}


# ─── Enums ───────────────────────────────────────────────────────

class SortDirection(str, Enum):
    """List ordering direction."""
    ASC = "asc"
    DESC = "desc"


class TaskStatus(str, Enum):
    """Task lifecycle literals stored in `tasks.status`."""
    PENDING = "pendente"
    IN_PROGRESS = "em_andamento"
    DONE = "concluida"


class ProgressStatus(str, Enum):
    """Shared status literals for courses and goals."""
    IN_PROGRESS = "em_andamento"
    DONE = "concluido"
    PAUSED = "pausado"


class BookStatus(str, Enum):
    """Reading states stored in `books.status`."""
    WANT_TO_READ = "quero_ler"
    READING = "lendo"
    READ = "lido"


class FieldKind(str, Enum):
    """Storage kind of a client-writable column; drives payload coercion."""
    TEXT = "text"
    INTEGER = "integer"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "date"
    JSON = "json"
