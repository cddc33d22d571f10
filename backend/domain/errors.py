"""
Errors raised by the books store.

Route handlers translate these into HTTP responses; nothing here knows
about HTTP.
"""


class BookStoreError(Exception):
    """Base class for store failures."""


class BookAlreadyExistsError(BookStoreError):
    """A new book collides with an existing id or name."""

    def __init__(self, name: str | None = None, book_id: str | None = None):
        self.name = name
        self.book_id = book_id
        super().__init__("Book already exists")


class BookNotFoundError(BookStoreError):
    """No book with the requested id."""

    def __init__(self, book_id: str):
        self.book_id = book_id
        super().__init__(f"Book {book_id} was not found")


class PersistenceError(BookStoreError):
    """The backing JSON file could not be written."""

    def __init__(self, path, cause: Exception | None = None):
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to write {path}: {cause}")
