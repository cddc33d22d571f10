"""
Book repository backed by a single JSON file.

The repository keeps the working copy of the collection in memory and
writes the whole collection back to disk after every change. A change is
only reported as done once the file has been written.
"""
import logging
import threading
from typing import Any, Dict, List, Optional

from domain.errors import BookAlreadyExistsError, BookNotFoundError
from domain.models import Book
from storage.json_storage import COLLECTION_KEY, JsonFileStorage

logger = logging.getLogger(__name__)


class BooksRepository:
    """CRUD operations for books."""

    def __init__(self, storage: JsonFileStorage):
        self.storage = storage
        self._books: List[Book] = []
        self._initialized = False
        # held across "mutate in memory + write file"
        self._lock = threading.RLock()

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> None:
        """
        Load the collection from the backing file.

        A missing or malformed file gives an empty collection. Nothing is
        written here. Only the first call has any effect.
        """
        with self._lock:
            if self._initialized:
                return
            document = self.storage.read()
            self._books = [Book.from_dict(b) for b in document[COLLECTION_KEY]]
            self._initialized = True
            logger.info("Loaded %d books from %s", len(self._books), self.storage.path)

    def list_books(self) -> List[Book]:
        with self._lock:
            return list(self._books)

    def get_book(self, book_id: str) -> Optional[Book]:
        with self._lock:
            for book in self._books:
                if book.id == book_id:
                    return book
        return None

    def create_book(self, fields: Dict[str, Any]) -> Book:
        """
        Append a new book built from `fields` and persist.

        The id is always generated here. A client-supplied `id` is not
        stored, but an existing book with that id still counts as a
        duplicate, as does an existing book with the same name.

        Raises:
            ValueError: `name` is missing or empty
            BookAlreadyExistsError: id or name collision
            PersistenceError: the file could not be written
        """
        name = fields.get("name")
        if not isinstance(name, str) or not name:
            raise ValueError("Book name is required")

        extra = {k: v for k, v in fields.items() if k not in ("id", "name")}
        book = Book(id=Book.generate_id(), name=name, extra=extra)
        requested_id = fields.get("id")

        with self._lock:
            for existing in self._books:
                if existing.name == name:
                    raise BookAlreadyExistsError(name=name)
                if existing.id in (book.id, requested_id):
                    raise BookAlreadyExistsError(book_id=existing.id)

            self._books.append(book)
            try:
                self.persist()
            except Exception:
                self._books.pop()
                raise

        logger.info("Created book %s (%s)", book.id, book.name)
        return book

    def update_book_name(self, book_id: str, name: str) -> Book:
        """
        Rename a book in place and persist. Other fields are untouched and
        name uniqueness is not checked.

        Raises:
            BookNotFoundError: no book with `book_id`
            PersistenceError: the file could not be written
        """
        with self._lock:
            book = self.get_book(book_id)
            if book is None:
                raise BookNotFoundError(book_id)

            previous = book.name
            book.name = name
            try:
                self.persist()
            except Exception:
                book.name = previous
                raise

        logger.info("Renamed book %s to %s", book_id, name)
        return book

    def delete_book(self, book_id: str) -> None:
        """
        Remove every book with `book_id` and persist.

        Raises:
            BookNotFoundError: no book with `book_id`
            PersistenceError: the file could not be written
        """
        with self._lock:
            matches = [b for b in self._books if b.id == book_id]
            if not matches:
                raise BookNotFoundError(book_id)

            previous = self._books
            self._books = [b for b in self._books if b.id != book_id]
            try:
                self.persist()
            except Exception:
                self._books = previous
                raise

        logger.info("Deleted book %s", book_id)

    def persist(self) -> None:
        """Overwrite the backing file with the full collection."""
        with self._lock:
            document = {COLLECTION_KEY: [b.to_dict() for b in self._books]}
            self.storage.write(document)
            logger.debug("Wrote %d books to %s", len(self._books), self.storage.path)
