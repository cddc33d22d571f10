"""
JSON file storage for the books collection.

The whole collection lives in one document:

    {"books": [{"id": "...", "name": "...", ...}, ...]}

Reads are forgiving (a missing or unreadable file is an empty collection).
Writes replace the file in one step and raise on failure.
"""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List

from domain.errors import PersistenceError

logger = logging.getLogger(__name__)

COLLECTION_KEY = "books"


def empty_document() -> Dict[str, List[Dict[str, Any]]]:
    return {COLLECTION_KEY: []}


class JsonFileStorage:
    """
    Local JSON file backend.

    Nothing is written until `write` is called, so loading a missing file
    does not create it.
    """

    def __init__(self, path: str | os.PathLike = "db.json"):
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> Dict[str, List[Dict[str, Any]]]:
        """
        Load the document from disk.

        Returns an empty document when the file is absent, is not valid
        JSON, or does not have a `books` list of objects.
        """
        if not self.path.exists():
            logger.warning("Books file %s not found, starting empty", self.path)
            return empty_document()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Books file %s is unreadable (%s), starting empty", self.path, e)
            return empty_document()

        if not _is_valid_document(data):
            logger.warning("Books file %s has an unexpected shape, starting empty", self.path)
            return empty_document()

        return data

    def write(self, document: Dict[str, List[Dict[str, Any]]]) -> None:
        """
        Overwrite the file with `document`.

        The payload goes to a sibling temp file first and is moved into
        place with `os.replace`, so readers never see a half-written file.

        Raises:
            PersistenceError: if serializing or writing fails
        """
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(document, f, indent=2, ensure_ascii=False)
                f.write("\n")
            os.replace(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            logger.exception("Failed to write books file %s", self.path)
            tmp_path.unlink(missing_ok=True)
            raise PersistenceError(self.path, e) from e


def _is_valid_document(data: Any) -> bool:
    if not isinstance(data, dict):
        return False
    books = data.get(COLLECTION_KEY)
    if not isinstance(books, list):
        return False
    return all(_is_valid_record(b) for b in books)


def _is_valid_record(record: Any) -> bool:
    return (
        isinstance(record, dict)
        and isinstance(record.get("id"), str)
        and isinstance(record.get("name"), str)
    )
