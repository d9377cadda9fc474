# tests/conftest.py
"""
Pytest configuration and fixtures.
Adds server/ to sys.path so `import main` style imports work, and points the
service at a throwaway SQLite database before anything imports `database`.
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
server_root = project_root / "server"
if str(server_root) not in sys.path:
    sys.path.insert(0, str(server_root))

os.environ["DATABASE_URL"] = f"sqlite:///{Path(tempfile.mkdtemp()) / 'test_app.db'}"


@pytest.fixture
def sql_engine(tmp_path):
    from database import create_db_engine, init_db

    engine = create_db_engine(f"sqlite:///{tmp_path / 'users.db'}")
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(sql_engine):
    from sqlalchemy.orm import sessionmaker

    return sessionmaker(bind=sql_engine, autocommit=False, autoflush=False)


@pytest.fixture
def sql_store(session_factory):
    from core.store import SqlCredentialStore

    db = session_factory()
    try:
        yield SqlCredentialStore(db)
    finally:
        db.close()


@pytest.fixture
def memory_store():
    from core.store import InMemoryCredentialStore

    return InMemoryCredentialStore()


@pytest.fixture
def client(memory_store):
    from fastapi.testclient import TestClient
    from api.auth import get_store
    from main import app

    app.dependency_overrides[get_store] = lambda: memory_store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
