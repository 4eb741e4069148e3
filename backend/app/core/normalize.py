"""Payload Normalization — turns untrusted request bodies into store-ready records.

Invariants:
    - normalize_create fails (and nothing is stored) if any required field is
      absent, None or blank; the error names every missing field
    - Optional fields use nullish coalescing: 0, False and "" are kept as given;
      only an absent key or an explicit null gets the default
    - id, user_id, created_at are write-once: update payloads never carry them
    - created_at == updated_at on create; updated_at is re-stamped on update
    - Unrecognized keys never reach the store (create and update alike)
    - Every stored value matches its field kind: "10" becomes 10, "false"
      becomes False, and anything unconvertible is InvalidFieldError (400)
    - Pure: the only impurities are the injectable `now` and `new_id`

Design Decisions:
    - Update whitelists recognized fields instead of only stripping the three
      immutable keys; dropped keys are reported back so the shell can log them
"""

import copy
import math
import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Any, Callable

from app.core.domain_types import (
    OwnerId, Record, RecordId,
    ID_FIELD, OWNER_FIELD, CREATED_FIELD, UPDATED_FIELD,
    IMMUTABLE_FIELDS, SERVER_MANAGED_FIELDS, FieldKind,
)
from app.core.errors import InvalidFieldError, MissingRequiredFieldError
from app.core.resources import ResourceDescriptor


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def new_record_id() -> RecordId:
    return RecordId(str(uuid.uuid4()))


@dataclass
class NormalizedUpdate:
    """Update fragment plus the keys that were dropped from the body."""
    changes: Record
    ignored: list[str] = field(default_factory=list)


def normalize_create(
    resource: ResourceDescriptor,
    payload: Any,
    owner_id: OwnerId,
    *,
    now: datetime | None = None,
    new_id: Callable[[], RecordId] = new_record_id,
) -> Record:
    """Validate required fields, apply defaults and stamp server fields."""
    body = _require_object(payload)

    missing = [name for name in resource.required if _is_blank(body.get(name))]
    if missing:
        raise MissingRequiredFieldError(resource.name, missing)

    record: Record = {name: body[name] for name in resource.required}
    for name, default in resource.defaults.items():
        value = body.get(name)
        record[name] = value if value is not None else copy.deepcopy(default)

    _coerce_fields(resource, record)

    stamp = now or utc_now()
    record[ID_FIELD] = new_id()
    record[OWNER_FIELD] = owner_id
    record[CREATED_FIELD] = stamp
    record[UPDATED_FIELD] = stamp
    return record


def normalize_update(
    resource: ResourceDescriptor,
    payload: Any,
    *,
    now: datetime | None = None,
) -> NormalizedUpdate:
    """Strip write-once and unknown keys, then stamp updated_at."""
    body = _require_object(payload)

    changes: Record = {}
    ignored: list[str] = []
    for name, value in body.items():
        if name in IMMUTABLE_FIELDS:
            continue
        if name in resource.fields:
            changes[name] = value
        elif name not in SERVER_MANAGED_FIELDS:
            ignored.append(name)

    _coerce_fields(resource, changes)
    changes[UPDATED_FIELD] = now or utc_now()
    return NormalizedUpdate(changes=changes, ignored=ignored)


def _require_object(payload: Any) -> dict:
    if not isinstance(payload, dict):
        raise InvalidFieldError("body", "expected a JSON object")
    return payload


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


_INT32_MIN, _INT32_MAX = -(2 ** 31), 2 ** 31 - 1

_TRUE_WORDS = frozenset({"true", "t", "yes", "y", "on", "1"})
_FALSE_WORDS = frozenset({"false", "f", "no", "n", "off", "0"})


def _coerce_fields(resource: ResourceDescriptor, record: Record) -> None:
    """Convert every recognized value to its field kind, in place."""
    for name in resource.fields & record.keys():
        record[name] = coerce_value(name, resource.kind_of(name), record[name])


def coerce_value(name: str, kind: FieldKind, value: Any) -> Any:
    """Convert one client value to `kind`. None passes through untouched."""
    if value is None or kind is FieldKind.JSON:
        return value
    if kind is FieldKind.DATE:
        return parse_date(name, value)
    if kind is FieldKind.TEXT:
        return _to_text(name, value)
    if kind is FieldKind.INTEGER:
        return _to_integer(name, value)
    if kind is FieldKind.NUMBER:
        return _to_number(name, value)
    return _to_boolean(name, value)


def _to_text(name: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    raise InvalidFieldError(name, f"expected text, got {value!r}")


def _to_integer(name: str, value: Any) -> int:
    result: int | None = None
    if isinstance(value, bool):
        pass
    elif isinstance(value, int):
        result = value
    elif isinstance(value, float) and value.is_integer():
        result = int(value)
    elif isinstance(value, str):
        try:
            result = int(value.strip())
        except ValueError:
            pass
    if result is None:
        raise InvalidFieldError(name, f"expected an integer, got {value!r}")
    if not _INT32_MIN <= result <= _INT32_MAX:
        raise InvalidFieldError(name, f"integer out of range: {result}")
    return result


def _to_number(name: str, value: Any) -> float:
    result: float | None = None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        result = float(value)
    elif isinstance(value, str):
        try:
            result = float(value.strip())
        except ValueError:
            pass
    if result is None or not math.isfinite(result):
        raise InvalidFieldError(name, f"expected a number, got {value!r}")
    return result


def _to_boolean(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False
    raise InvalidFieldError(name, f"expected a boolean, got {value!r}")


def parse_date(name: str, value: Any) -> date | None:
    if value is None or (isinstance(value, date) and not isinstance(value, datetime)):
        return value
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
        except ValueError:
            pass
    raise InvalidFieldError(name, f"expected an ISO-8601 date, got {value!r}")
