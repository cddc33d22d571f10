import json
from unittest.mock import patch

import pytest

from domain.errors import PersistenceError
from storage.json_storage import JsonFileStorage, empty_document


def test_read_missing_file_returns_empty_document(tmp_path):
    storage = JsonFileStorage(tmp_path / "db.json")

    assert storage.read() == empty_document()
    assert not storage.exists()


@pytest.mark.parametrize(
    "content",
    [
        "not json at all",
        "",
        "[]",
        '{"books": {}}',
        '{"shelves": []}',
        '{"books": [1, 2]}',
        '{"books": [{"id": "a1", "name": null}]}',
        '{"books": [{"name": "No id"}]}',
        '{"books": [{"id": 7, "name": "Numeric id"}]}',
        '{"books": [{"id": "a1", "name": "Dune"}, {"id": "b2"}]}',
    ],
)
def test_read_malformed_file_returns_empty_document(tmp_path, content):
    path = tmp_path / "db.json"
    path.write_text(content, encoding="utf-8")

    assert JsonFileStorage(path).read() == {"books": []}


def test_write_then_read(tmp_path):
    path = tmp_path / "db.json"
    storage = JsonFileStorage(path)
    document = {"books": [{"id": "a1", "name": "Dune"}, {"id": "b2", "name": "Émile"}]}

    storage.write(document)

    assert storage.read() == document
    assert "Émile" in path.read_text(encoding="utf-8")


def test_write_overwrites_whole_file(tmp_path):
    path = tmp_path / "db.json"
    storage = JsonFileStorage(path)
    storage.write({"books": [{"id": "a1", "name": "Dune"}, {"id": "b2", "name": "Emma"}]})

    storage.write({"books": [{"id": "b2", "name": "Emma"}]})

    assert json.loads(path.read_text(encoding="utf-8")) == {"books": [{"id": "b2", "name": "Emma"}]}
    assert not (tmp_path / "db.json.tmp").exists()


def test_write_creates_parent_directory(tmp_path):
    path = tmp_path / "nested" / "data" / "db.json"

    JsonFileStorage(path).write({"books": []})

    assert path.exists()


def test_write_failure_raises_persistence_error(tmp_path):
    path = tmp_path / "db.json"
    storage = JsonFileStorage(path)

    with patch("storage.json_storage.os.replace", side_effect=OSError("disk full")):
        with pytest.raises(PersistenceError) as excinfo:
            storage.write({"books": []})

    assert isinstance(excinfo.value.cause, OSError)
    assert not path.exists()
    assert not (tmp_path / "db.json.tmp").exists()


def test_unserializable_document_raises_persistence_error(tmp_path):
    storage = JsonFileStorage(tmp_path / "db.json")

    with pytest.raises(PersistenceError):
        storage.write({"books": [{"id": "a1", "name": "Dune", "blob": object()}]})
