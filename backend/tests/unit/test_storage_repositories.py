"""Unit tests for the collection-backed repositories and their stored record shape."""

import asyncio
import json
from datetime import datetime, timezone

import pytest

from avocado.domain.entities import Comment, Project, Role, Task, TaskPriority, TaskStatus, User
from avocado.domain.exceptions import EntityNotFoundError, StorageDecodeError
from avocado.infrastructure.storage import CollectionStorage
from avocado.infrastructure.storage.repositories import (
    StorageCommentRepository,
    StorageProjectRepository,
    StorageSessionStore,
    StorageTaskRepository,
    StorageUserRepository,
)
from tests.unit.fakes import InMemoryKeyValueStore

CREATED = datetime(2025, 10, 9, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def storage(store: InMemoryKeyValueStore) -> CollectionStorage:
    return CollectionStorage(store)


# ── Record shape ──


@pytest.mark.asyncio
async def test_task_record_uses_camel_case_and_millis(store, storage):
    repo = StorageTaskRepository(storage)
    await repo.create(Task(id="t1", project_id="p1", title="Draft plan", created_at=CREATED))

    stored = json.loads(store.data["avocado_tasks"])
    assert stored == [
        {
            "id": "t1",
            "projectId": "p1",
            "title": "Draft plan",
            "status": "TODO",
            "priority": "MEDIUM",
            "createdAt": 1760011200000,
        }
    ]


@pytest.mark.asyncio
async def test_project_round_trip(storage):
    repo = StorageProjectRepository(storage)
    created = await repo.create(Project(id="p1", owner_id="u1", name="Launch", created_at=CREATED))

    assert created.created_at == CREATED
    assert await repo.get_by_id("p1") == created
    assert await repo.get_by_id("missing") is None


@pytest.mark.asyncio
async def test_comment_record_snapshots_author(store, storage):
    repo = StorageCommentRepository(storage)
    await repo.create(
        Comment(
            id="c1",
            task_id="t1",
            user_id="u1",
            user_name="admin",
            user_avatar="https://example.test/a.png",
            content="Looks good",
            created_at=CREATED,
        )
    )

    stored = json.loads(store.data["avocado_comments"])[0]
    assert stored["taskId"] == "t1"
    assert stored["userName"] == "admin"
    assert stored["userAvatar"] == "https://example.test/a.png"


# ── Behaviour ──


@pytest.mark.asyncio
async def test_user_upsert_matches_exact_email(store, storage):
    repo = StorageUserRepository(storage)
    first, created = await repo.upsert_by_email(
        User(id="u1", name="ana", email="ana@avocado.com", role=Role.ADMIN)
    )
    assert created
    assert first.id == "u1"

    again, created = await repo.upsert_by_email(
        User(id="u2", name="ana", email="ana@avocado.com", role=Role.CLIENT)
    )
    assert not created
    assert again.id == "u1"
    assert again.role is Role.CLIENT

    _, created = await repo.upsert_by_email(
        User(id="u3", name="ANA", email="ANA@avocado.com", role=Role.ADMIN)
    )
    assert created
    assert [u["id"] for u in json.loads(store.data["avocado_users"])] == ["u1", "u3"]


@pytest.mark.asyncio
async def test_gathered_upserts_keep_one_user_per_email(store, storage):
    repo = StorageUserRepository(storage)

    results = await asyncio.gather(
        *(repo.upsert_by_email(User.from_email("ana@avocado.com")) for _ in range(5))
    )

    assert len({user.id for user, _ in results}) == 1
    assert [created for _, created in results].count(True) == 1
    assert len(json.loads(store.data["avocado_users"])) == 1


@pytest.mark.asyncio
async def test_task_filters_keep_storage_order(storage):
    repo = StorageTaskRepository(storage)
    for task_id, project_id in [("a", "p1"), ("b", "p2"), ("c", "p1")]:
        await repo.create(Task(id=task_id, project_id=project_id, title=task_id))

    assert [t.id for t in await repo.get_by_project("p1")] == ["a", "c"]


@pytest.mark.asyncio
async def test_task_update_fields_merges_into_stored_record(store, storage):
    repo = StorageTaskRepository(storage)
    await repo.create(Task(id="a", project_id="p1", title="a", description="notes", created_at=CREATED))

    updated = await repo.update_fields("a", {"status": TaskStatus.DONE, "description": None})

    assert updated.status is TaskStatus.DONE
    assert updated.description is None
    assert updated.created_at == CREATED
    stored = json.loads(store.data["avocado_tasks"])[0]
    assert stored["status"] == "DONE"
    assert "description" not in stored


@pytest.mark.asyncio
async def test_gathered_field_updates_all_apply(storage):
    repo = StorageTaskRepository(storage)
    await repo.create(Task(id="a", project_id="p1", title="a"))

    await asyncio.gather(
        repo.update_fields("a", {"status": TaskStatus.DONE}),
        repo.update_fields("a", {"priority": TaskPriority.URGENT}),
        repo.update_fields("a", {"assignee_id": "u7"}),
    )

    [task] = await repo.get_by_project("p1")
    assert task.status is TaskStatus.DONE
    assert task.priority is TaskPriority.URGENT
    assert task.assignee_id == "u7"


@pytest.mark.asyncio
async def test_task_update_missing_leaves_collection_unchanged(store, storage):
    repo = StorageTaskRepository(storage)
    await repo.create(Task(id="a", project_id="p1", title="a"))
    before = store.data["avocado_tasks"]

    with pytest.raises(EntityNotFoundError):
        await repo.update_fields("zzz", {"status": TaskStatus.DONE})

    assert store.data["avocado_tasks"] == before


@pytest.mark.asyncio
async def test_task_update_rejects_fixed_fields(store, storage):
    repo = StorageTaskRepository(storage)
    await repo.create(Task(id="a", project_id="p1", title="a"))
    before = store.data["avocado_tasks"]

    with pytest.raises(ValueError):
        await repo.update_fields("a", {"project_id": "p2"})

    assert store.data["avocado_tasks"] == before


@pytest.mark.asyncio
async def test_task_bulk_and_project_deletes(storage):
    repo = StorageTaskRepository(storage)
    for task_id, project_id in [("a", "p1"), ("b", "p1"), ("c", "p2"), ("d", "p2")]:
        await repo.create(Task(id=task_id, project_id=project_id, title=task_id))

    assert await repo.delete_many(["a", "c", "missing"]) == 2
    assert await repo.delete_by_project("p2") == 1
    assert [t.id for t in await repo.get_by_project("p1")] == ["b"]
    assert await repo.get_by_project("p2") == []


@pytest.mark.asyncio
async def test_unknown_enum_value_is_a_decode_error(store, storage):
    store.data["avocado_tasks"] = json.dumps(
        [{"id": "a", "projectId": "p1", "title": "a", "status": "BLOCKED", "priority": "LOW", "createdAt": 0}]
    )

    with pytest.raises(StorageDecodeError) as exc_info:
        await StorageTaskRepository(storage).get_by_project("p1")

    assert "BLOCKED" in str(exc_info.value)


@pytest.mark.asyncio
async def test_missing_field_is_a_decode_error(store, storage):
    store.data["avocado_projects"] = json.dumps([{"id": "p1", "name": "no owner", "createdAt": 0}])

    with pytest.raises(StorageDecodeError):
        await StorageProjectRepository(storage).get_all()


@pytest.mark.asyncio
async def test_session_store_save_load_clear(storage):
    sessions = StorageSessionStore(storage)
    user = User(id="u1", name="client", email="client@avocado.com", role=Role.CLIENT, avatar="x")

    assert await sessions.load() is None
    await sessions.save(user)
    assert await sessions.load() == user
    await sessions.clear()
    assert await sessions.load() is None


def test_task_statuses_and_priorities_are_closed_sets():
    assert [s.value for s in TaskStatus] == ["TODO", "IN_PROGRESS", "REVIEW", "DONE"]
    assert [p.value for p in TaskPriority] == ["LOW", "MEDIUM", "HIGH", "URGENT"]
