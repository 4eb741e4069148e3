"""Task & Habit Scenarios — end-to-end flows through the HTTP surface.

Tests cover:
    - POST /api/tasks with only titulo → 201 and status "pendente"
    - another user lists tasks → empty list
    - PUT by another user → 404 and the task is unchanged
    - POST /api/habits without meta_diaria → null target, zero streak, active
    - no identity header → 400 and no store access
    - list ordering, related-entity filters and unknown-field handling
    - wrong-typed values converted or rejected with 400, never a store error
"""

from app.core.domain_types import TaskStatus
from tests.api.helpers import as_user


async def test_create_task_defaults_status(client):
    res = await client.post("/api/tasks", json={"titulo": "Buy milk"}, headers=as_user("u1"))
    assert res.status_code == 201
    body = res.json()
    assert body["id"]
    assert body["user_id"] == "u1"
    assert body["titulo"] == "Buy milk"
    assert body["status"] == "pendente"


async def test_other_user_sees_no_tasks(client):
    await client.post("/api/tasks", json={"titulo": "Buy milk"}, headers=as_user("u1"))
    res = await client.get("/api/tasks", headers=as_user("u2"))
    assert res.status_code == 200
    assert res.json() == []


async def test_other_user_cannot_update_task(client):
    created = (await client.post(
        "/api/tasks", json={"titulo": "Buy milk"}, headers=as_user("u1"),
    )).json()

    res = await client.put(
        f"/api/tasks/{created['id']}", json={"titulo": "Hijacked"}, headers=as_user("u2"),
    )
    assert res.status_code == 404

    res = await client.get("/api/tasks", headers=as_user("u1"))
    assert res.json()[0]["titulo"] == "Buy milk"
    assert res.json()[0]["updated_at"] == created["updated_at"]


async def test_create_habit_defaults(client):
    res = await client.post("/api/habits", json={"nome": "Drink water"}, headers=as_user("u1"))
    assert res.status_code == 201
    body = res.json()
    assert body["meta_diaria"] is None
    assert body["streak_atual"] == 0
    assert body["ativo"] is True


async def test_create_habit_keeps_falsy_values(client):
    res = await client.post(
        "/api/habits",
        json={"nome": "Paused", "ativo": False, "meta_diaria": 0},
        headers=as_user("u1"),
    )
    assert res.json()["ativo"] is False
    assert res.json()["meta_diaria"] == 0


async def test_missing_identity_header(client, db_sessions):
    res = await client.post("/api/tasks", json={"titulo": "Buy milk"})
    assert res.status_code == 400
    assert "error" in res.json()
    assert db_sessions == []


async def test_blank_identity_header(client, db_sessions):
    res = await client.get("/api/tasks", headers=as_user("   "))
    assert res.status_code == 400
    assert db_sessions == []


async def test_tasks_listed_newest_first(client):
    for title in ("first", "second", "third"):
        await client.post("/api/tasks", json={"titulo": title}, headers=as_user("u1"))

    res = await client.get("/api/tasks", headers=as_user("u1"))
    assert [t["titulo"] for t in res.json()] == ["third", "second", "first"]


async def test_habit_logs_filtered_by_habit(client):
    for habit_id, day in (("h1", "2026-10-01"), ("h1", "2026-10-03"), ("h2", "2026-10-02")):
        await client.post(
            "/api/habit-logs", json={"habit_id": habit_id, "data": day},
            headers=as_user("u1"),
        )

    res = await client.get("/api/habit-logs?habit_id=h1", headers=as_user("u1"))
    assert res.status_code == 200
    assert [log["data"] for log in res.json()] == ["2026-10-03", "2026-10-01"]

    res = await client.get("/api/habit-logs", headers=as_user("u1"))
    assert len(res.json()) == 3


async def test_lessons_filtered_by_course_in_order(client):
    for course_id, title, position in (("c1", "B", 2), ("c1", "A", 1), ("c2", "X", 1)):
        await client.post(
            "/api/lessons",
            json={"course_id": course_id, "titulo": title, "ordem": position},
            headers=as_user("u1"),
        )

    res = await client.get("/api/lessons?course_id=c1", headers=as_user("u1"))
    assert [lesson["titulo"] for lesson in res.json()] == ["A", "B"]


async def test_update_ignores_unknown_fields(client):
    created = (await client.post(
        "/api/tasks", json={"titulo": "T"}, headers=as_user("u1"),
    )).json()

    res = await client.put(
        f"/api/tasks/{created['id']}",
        json={"status": "concluida", "not_a_column": "x"},
        headers=as_user("u1"),
    )
    assert res.status_code == 200
    assert res.json()["status"] == "concluida"
    assert "not_a_column" not in res.json()


async def test_task_with_subtasks_and_due_date(client):
    subtasks = [{"texto": "leite", "feito": False}, {"texto": "pão", "feito": True}]
    res = await client.post(
        "/api/tasks",
        json={"titulo": "Mercado", "subtarefas": subtasks, "data_vencimento": "2026-10-20"},
        headers=as_user("u1"),
    )
    assert res.status_code == 201
    assert res.json()["subtarefas"] == subtasks
    assert res.json()["data_vencimento"] == "2026-10-20"


async def test_invalid_date_is_client_error(client):
    res = await client.post(
        "/api/goals", json={"titulo": "G", "prazo": "someday"}, headers=as_user("u1"),
    )
    assert res.status_code == 400
    assert res.json()["code"] == "INVALID_FIELD"


async def test_create_converts_string_values(client):
    res = await client.post(
        "/api/habits", json={"nome": "x", "ativo": "false", "meta_diaria": "3"},
        headers=as_user("u1"),
    )
    assert res.status_code == 201
    assert res.json()["ativo"] is False
    assert res.json()["meta_diaria"] == 3


async def test_create_with_unconvertible_value_is_client_error(client):
    res = await client.post(
        "/api/courses", json={"titulo": "C", "total_aulas": "ten"},
        headers=as_user("u1"),
    )
    assert res.status_code == 400
    assert res.json()["code"] == "INVALID_FIELD"
    assert res.json()["details"] == {"field": "total_aulas"}

    res = await client.get("/api/courses", headers=as_user("u1"))
    assert res.json() == []


async def test_update_with_wrong_typed_values(client):
    created = (await client.post(
        "/api/courses", json={"titulo": "C"}, headers=as_user("u1"),
    )).json()
    url = f"/api/courses/{created['id']}"

    res = await client.put(url, json={"aulas_concluidas": "4"}, headers=as_user("u1"))
    assert res.status_code == 200
    assert res.json()["aulas_concluidas"] == 4

    res = await client.put(url, json={"total_aulas": True}, headers=as_user("u1"))
    assert res.status_code == 400
    assert res.json()["code"] == "INVALID_FIELD"

    res = await client.get(url, headers=as_user("u1"))
    assert res.json()["total_aulas"] == 0
    assert res.json()["aulas_concluidas"] == 4


async def test_tasks_filtered_by_status(client):
    for title in ("open", "working", "finished"):
        await client.post("/api/tasks", json={"titulo": title}, headers=as_user("u1"))
    tasks = (await client.get("/api/tasks", headers=as_user("u1"))).json()
    by_title = {t["titulo"]: t["id"] for t in tasks}

    for title, status in (
        ("working", TaskStatus.IN_PROGRESS), ("finished", TaskStatus.DONE),
    ):
        await client.put(
            f"/api/tasks/{by_title[title]}", json={"status": status.value},
            headers=as_user("u1"),
        )

    res = await client.get(
        f"/api/tasks?status={TaskStatus.DONE.value}", headers=as_user("u1"),
    )
    assert [t["titulo"] for t in res.json()] == ["finished"]
    res = await client.get(
        f"/api/tasks?status={TaskStatus.PENDING.value}", headers=as_user("u1"),
    )
    assert [t["titulo"] for t in res.json()] == ["open"]
