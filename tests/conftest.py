"""
Shared fixtures: an isolated store, storage directory and session file
per test, plus a TestClient wired to them.
"""
import io

import pytest
from fastapi.testclient import TestClient

from glbcatalog.access.models import ModelAccess
from glbcatalog.access.users import UserAccess
from glbcatalog.auth.session_store import SessionStore
from glbcatalog.catalog.workflow import ModelWorkflow
from glbcatalog.config import Settings
from glbcatalog.db.seed import seed_default_users
from glbcatalog.db.session import Database
from glbcatalog.main import create_app


@pytest.fixture
def settings(tmp_path):
    return Settings(
        database_url=f"sqlite:///{tmp_path / 'test.db'}",
        storage_dir=str(tmp_path / "glb_models"),
        session_file=str(tmp_path / "session.json"),
        worker_pool_size=4,
        copy_buffer_size=1024,
    )


@pytest.fixture
def database(settings):
    db = Database(settings.database_url)
    db.create_all()
    yield db
    db.dispose()


@pytest.fixture
def users(database):
    access = UserAccess(database)
    seed_default_users(access)
    return access


@pytest.fixture
def models(database):
    return ModelAccess(database)


@pytest.fixture
def sessions(settings):
    return SessionStore(settings.session_file)


@pytest.fixture
def clock():
    """Deterministic millisecond clock, advancing by one per call."""
    class Clock:
        def __init__(self):
            self.now = 1_700_000_000_000

        def __call__(self):
            value = self.now
            self.now += 1
            return value

    return Clock()


@pytest.fixture
def workflow(models, settings, clock):
    return ModelWorkflow(models, settings.storage_dir, buffer_size=1024, clock=clock)


@pytest.fixture
def glb_bytes():
    return b"glTF" + b"\x00" * 1496


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as c:
        yield c


def login(client, username, password):
    return client.post("/auth/login", json={"username": username, "password": password})


@pytest.fixture
def admin_client(client):
    assert login(client, "admin", "admin123").status_code == 200
    return client


@pytest.fixture
def user_client(client):
    assert login(client, "user", "user123").status_code == 200
    return client


def upload(client, filename, data):
    return client.post("/models", files={"file": (filename, io.BytesIO(data), "model/gltf-binary")})
