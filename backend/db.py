"""
Store setup for the FastAPI backend.
Builds the JSON-file backed books repository and hands it to routes.
"""
from pathlib import Path

from fastapi import Request

from repositories import BooksRepository
from storage.json_storage import JsonFileStorage


def init_store(path: str | Path) -> BooksRepository:
    """Create a repository for `path` and load it."""
    store = BooksRepository(JsonFileStorage(path))
    store.initialize()
    return store


def get_store(request: Request) -> BooksRepository:
    """FastAPI dependency returning the repository owned by the app."""
    return request.app.state.store
