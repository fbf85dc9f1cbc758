import asyncio
import json
from inventory_service.infrastructure.repositories.inventory_repository_json import JsonInventoryRepository


def run(coro):
    return asyncio.run(coro)


def test_load_missing_file_starts_empty(tmp_path):
    repo = JsonInventoryRepository(tmp_path / "inventory.json")
    assert repo.load() == 0
    assert repo.next_id == 1
    assert run(repo.get_all()) == []


def test_next_id_resumes_after_max(tmp_path):
    path = tmp_path / "inventory.json"
    path.write_text(json.dumps([
        {"id": 3, "name": "a", "description": "", "photo": None},
        {"id": 7, "name": "b", "description": "", "photo": None},
        {"id": 5, "name": "c", "description": "", "photo": None},
    ]))
    repo = JsonInventoryRepository(path)
    assert repo.load() == 3

    item = run(repo.create(name="d"))
    assert item.id == 8
    assert [i.id for i in run(repo.get_all())] == [3, 7, 5, 8]


def test_corrupt_file_is_treated_as_empty(tmp_path):
    path = tmp_path / "inventory.json"
    path.write_text("{not json")
    repo = JsonInventoryRepository(path)
    assert repo.load() == 0
    assert repo.next_id == 1


def test_non_array_file_is_treated_as_empty(tmp_path):
    path = tmp_path / "inventory.json"
    path.write_text(json.dumps({"id": 1, "name": "x"}))
    repo = JsonInventoryRepository(path)
    assert repo.load() == 0


def test_bad_records_are_skipped(tmp_path):
    path = tmp_path / "inventory.json"
    path.write_text(json.dumps([
        {"id": 2, "name": "ok"},
        {"id": "x", "name": "bad id"},
        "not a record",
    ]))
    repo = JsonInventoryRepository(path)
    assert repo.load() == 1
    item = run(repo.get_by_id(2))
    assert item.name == "ok"
    assert item.description == ""
    assert item.photo is None
    assert repo.next_id == 3


def test_duplicate_ids_keep_first_record(tmp_path):
    path = tmp_path / "inventory.json"
    path.write_text(json.dumps([
        {"id": 1, "name": "a"},
        {"id": 1, "name": "b"},
    ]))
    repo = JsonInventoryRepository(path)
    assert repo.load() == 1
    assert [i.name for i in run(repo.get_all())] == ["a"]

    assert run(repo.delete(1)) is True
    assert run(repo.get_by_id(1)) is None
    assert run(repo.create(name="c")).id == 2


def test_every_mutation_writes_snapshot(tmp_path):
    path = tmp_path / "inventory.json"
    repo = JsonInventoryRepository(path)
    repo.load()

    item = run(repo.create(name="Chair", description="wooden", photo="1-chair.jpg"))
    assert json.loads(path.read_text()) == [
        {"id": 1, "name": "Chair", "description": "wooden", "photo": "1-chair.jpg"}
    ]

    item.name = "Stool"
    run(repo.update(item))
    assert json.loads(path.read_text())[0]["name"] == "Stool"

    assert run(repo.delete(1)) is True
    assert json.loads(path.read_text()) == []


def test_snapshot_is_pretty_printed(tmp_path):
    path = tmp_path / "inventory.json"
    repo = JsonInventoryRepository(path)
    repo.load()
    run(repo.create(name="Desk"))
    assert path.read_text().startswith("[\n  {\n")


def test_ids_are_not_reused_after_delete(tmp_path):
    repo = JsonInventoryRepository(tmp_path / "inventory.json")
    repo.load()
    first = run(repo.create(name="a"))
    run(repo.delete(first.id))
    second = run(repo.create(name="b"))
    assert second.id == first.id + 1


def test_write_failure_is_swallowed(tmp_path):
    # Parent directory does not exist, so every snapshot write fails
    repo = JsonInventoryRepository(tmp_path / "missing" / "inventory.json")
    repo.load()
    item = run(repo.create(name="Lamp"))
    assert item.id == 1
    assert repo.save() is False
    assert run(repo.get_by_id(1)).name == "Lamp"


def test_delete_unknown_returns_false(tmp_path):
    repo = JsonInventoryRepository(tmp_path / "inventory.json")
    repo.load()
    assert run(repo.delete(42)) is False
