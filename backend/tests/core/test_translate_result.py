"""Result Translation — None rows become 404s, deletes are acknowledged."""

import pytest

from app.core.errors import ResourceNotFoundError
from app.core.resources import TASKS
from app.core.translate_result import delete_ack, require_row


def test_require_row_passes_row_through():
    row = {"id": "t1"}
    assert require_row(row, TASKS, "t1") is row


def test_require_row_raises_not_found():
    with pytest.raises(ResourceNotFoundError) as exc:
        require_row(None, TASKS, "t1")
    assert exc.value.http_status == 404
    assert exc.value.to_response()["code"] == "RESOURCE_NOT_FOUND"


def test_delete_ack():
    assert delete_ack("t1", TASKS, "t1") == {"message": "Task deleted", "id": "t1"}


def test_delete_ack_raises_when_nothing_deleted():
    with pytest.raises(ResourceNotFoundError):
        delete_ack(None, TASKS, "t1")
