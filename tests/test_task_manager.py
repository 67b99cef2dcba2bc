# tests/test_task_manager.py

from __future__ import annotations

import json

import pytest

from task_tracker.tasks.task_codec import dump_tasks, load_tasks
from task_tracker.tasks.task_manager import STORAGE_KEY, TaskManager
from task_tracker.tasks.task_models import CorruptPersistedStateError, Task

from .fakes import FixedClock, RecordingKeyValueStore, SequentialIds


def _ids(tasks) -> list[str]:
    return [t.id for t in tasks]


def test_reference_scenario(manager: TaskManager) -> None:
    a = manager.add_task("A", "", "High")
    b = manager.add_task("B", "", "Medium")
    c = manager.add_task("C", "", "High")

    assert [t.title for t in manager.tasks] == ["A", "B", "C"]
    assert all(not t.completed for t in manager.tasks)

    manager.toggle_task_completion(a.id)
    assert a.completed is True

    assert manager.list_tasks("completed") == ["A [High] - ✅ Done"]
    assert manager.list_tasks("pending") == ["B [Medium] - ❌ Pending", "C [High] - ❌ Pending"]

    manager.remove_task(b.id)
    assert _ids(manager.tasks) == [a.id, c.id]
    assert manager.list_tasks("all") == ["A [High] - ✅ Done", "C [High] - ❌ Pending"]


def test_construct_reads_store_once_and_starts_empty(store: RecordingKeyValueStore) -> None:
    manager = TaskManager(store)
    assert store.reads == [STORAGE_KEY]
    assert store.writes == []
    assert len(manager) == 0
    assert manager.list_tasks() == []


def test_add_task_defaults_priority_and_persists(manager: TaskManager, store: RecordingKeyValueStore) -> None:
    task = manager.add_task("Only title", "")
    assert task.priority == "Medium"
    assert store.writes[-1][0] == STORAGE_KEY
    assert json.loads(store.data[STORAGE_KEY])[0]["id"] == task.id


def test_every_mutation_writes_full_snapshot(manager: TaskManager, store: RecordingKeyValueStore) -> None:
    manager.add_task("A", "")
    manager.add_task("B", "")
    assert len(store.writes) == 2
    assert len(json.loads(store.writes[-1][1])) == 2


def test_ids_unique_even_when_factory_repeats(store: RecordingKeyValueStore) -> None:
    ids = SequentialIds("dup", "dup", "dup", "other")
    manager = TaskManager(store, id_factory=ids, clock=FixedClock())
    first = manager.add_task("A", "")
    second = manager.add_task("B", "")
    assert first.id == "dup"
    assert second.id == "other"


def test_removed_ids_are_not_reused(store: RecordingKeyValueStore) -> None:
    manager = TaskManager(store, id_factory=SequentialIds("x1", "x1", "x2"), clock=FixedClock())
    first = manager.add_task("A", "")
    manager.remove_task(first.id)
    second = manager.add_task("B", "")
    assert second.id == "x2"


def test_many_adds_produce_distinct_ids(store: RecordingKeyValueStore) -> None:
    manager = TaskManager(store)
    tasks = [manager.add_task(f"task {i}", "") for i in range(200)]
    assert len({t.id for t in tasks}) == 200


def test_remove_missing_id_is_noop_but_still_persists(manager: TaskManager, store: RecordingKeyValueStore) -> None:
    manager.add_task("A", "")
    writes_before = len(store.writes)

    manager.remove_task("nope")

    assert len(manager) == 1
    assert len(store.writes) == writes_before + 1


def test_remove_twice_is_idempotent(manager: TaskManager) -> None:
    a = manager.add_task("A", "")
    manager.add_task("B", "")

    manager.remove_task(a.id)
    after_first = [t.to_record() for t in manager.tasks]
    manager.remove_task(a.id)
    assert [t.to_record() for t in manager.tasks] == after_first


def test_toggle_missing_id_does_not_write(manager: TaskManager, store: RecordingKeyValueStore) -> None:
    manager.add_task("A", "")
    writes_before = len(store.writes)

    assert manager.toggle_task_completion("nope") is None
    assert len(store.writes) == writes_before


def test_toggle_twice_restores_flag(manager: TaskManager, store: RecordingKeyValueStore) -> None:
    a = manager.add_task("A", "")
    manager.toggle_task_completion(a.id)
    manager.toggle_task_completion(a.id)
    assert a.completed is False
    assert json.loads(store.data[STORAGE_KEY])[0]["completed"] is False


def test_completed_and_pending_partition_collection(manager: TaskManager) -> None:
    tasks = [manager.add_task(name, "") for name in "ABCDE"]
    for t in tasks[::2]:
        manager.toggle_task_completion(t.id)

    done = set(_ids(manager.filter_tasks("completed")))
    pending = set(_ids(manager.filter_tasks("pending")))
    assert done | pending == set(_ids(manager.tasks))
    assert done & pending == set()


def test_unknown_filter_lists_everything(manager: TaskManager) -> None:
    a = manager.add_task("A", "", "High")
    manager.add_task("B", "", "Low")
    manager.toggle_task_completion(a.id)

    assert manager.list_tasks("bogus") == manager.list_tasks("all")
    assert manager.list_tasks() == manager.list_tasks("all")


def test_list_tasks_has_no_store_side_effects(manager: TaskManager, store: RecordingKeyValueStore) -> None:
    manager.add_task("A", "")
    writes_before = len(store.writes)
    manager.list_tasks("all")
    manager.list_tasks("pending")
    assert len(store.writes) == writes_before


def test_new_manager_rehydrates_exact_state(store: RecordingKeyValueStore) -> None:
    first = TaskManager(store)
    a = first.add_task("A", "alpha", "High")
    first.add_task("B", "", "Custom")
    first.toggle_task_completion(a.id)

    second = TaskManager(store)
    assert [t.to_record() for t in second.tasks] == [t.to_record() for t in first.tasks]


def test_codec_round_trip_preserves_order_and_fields() -> None:
    tasks = [
        Task(id="z9", title="Ünïcode ✓", description="line\nbreak", priority="High", created_at="t0", completed=True),
        Task(id="a1", title="", description="", priority="Medium", created_at="t1", completed=False),
    ]
    data = dump_tasks(tasks)
    assert dump_tasks(tasks) == data
    assert load_tasks(data) == tasks


def test_load_from_storage_keeps_ids_and_timestamps(store: RecordingKeyValueStore) -> None:
    record = {
        "id": "persisted",
        "title": "Saved",
        "description": "",
        "priority": "Low",
        "createdAt": "1/2/2024, 10:00:00 AM",
        "completed": True,
    }
    store.data[STORAGE_KEY] = json.dumps([record])

    manager = TaskManager(store, id_factory=SequentialIds("persisted", "fresh"))
    assert manager.tasks[0].to_record() == record

    added = manager.add_task("New", "")
    assert added.id == "fresh"


@pytest.mark.parametrize(
    "blob",
    [
        "{not json",
        '{"id": "a"}',
        '[{"id": "a"}]',
        json.dumps(
            [
                {"id": "a", "title": "", "description": "", "priority": "M", "createdAt": "", "completed": False},
                {"id": "a", "title": "", "description": "", "priority": "M", "createdAt": "", "completed": False},
            ]
        ),
    ],
)
def test_corrupt_storage_fails_loudly(store: RecordingKeyValueStore, blob: str) -> None:
    store.data[STORAGE_KEY] = blob
    with pytest.raises(CorruptPersistedStateError):
        TaskManager(store)


def test_empty_stored_value_is_treated_as_absent(store: RecordingKeyValueStore) -> None:
    store.data[STORAGE_KEY] = ""
    assert len(TaskManager(store)) == 0


def test_tasks_view_is_a_snapshot(manager: TaskManager) -> None:
    manager.add_task("A", "")
    view = manager.tasks
    manager.add_task("B", "")
    assert len(view) == 1
    assert len(manager.tasks) == 2


def test_clear_wipes_tasks_but_keeps_ids_reserved(store: RecordingKeyValueStore) -> None:
    manager = TaskManager(store, id_factory=SequentialIds("c1", "c1", "c2"), clock=FixedClock("fixed"))
    first = manager.add_task("A", "")

    manager.clear()

    assert len(manager) == 0
    assert store.get_item(STORAGE_KEY) is None
    second = manager.add_task("B", "")
    assert first.id == "c1"
    assert second.id == "c2"
    assert second.created_at == "fixed"
