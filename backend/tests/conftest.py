import sys
from pathlib import Path

import pytest

# Ensure the backend package root is on sys.path for direct pytest runs
BACKEND_ROOT = Path(__file__).resolve().parents[1]
if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "db.json"


@pytest.fixture
def store(db_path):
    from db import init_store

    return init_store(db_path)


@pytest.fixture
def app(store):
    from api.main import create_app
    from settings import get_settings

    return create_app(get_settings(), store=store)


@pytest.fixture
def client(app):
    from fastapi.testclient import TestClient

    return TestClient(app)
