from frontend.storage import JsonFileStorage, MemoryStorage


def test_memory_storage():
    storage = MemoryStorage({"token": "abc"})
    assert storage.get("token") == "abc"
    storage.set("username", "alice")
    storage.remove("token")
    storage.remove("token")
    assert storage.get("token") is None
    assert storage.get("username") == "alice"


def test_json_file_storage_persists_across_instances(tmp_path):
    path = tmp_path / "session" / "session.json"
    JsonFileStorage(str(path)).set("token", "abc")
    assert JsonFileStorage(str(path)).get("token") == "abc"

    JsonFileStorage(str(path)).remove("token")
    assert JsonFileStorage(str(path)).get("token") is None


def test_json_file_storage_ignores_corrupt_file(tmp_path):
    path = tmp_path / "session.json"
    path.write_text("{not json")
    storage = JsonFileStorage(str(path))
    assert storage.get("token", "default") == "default"
    storage.set("token", "fresh")
    assert storage.get("token") == "fresh"
