from __future__ import annotations

from pathlib import Path
import sys


import pytest
from fastapi.testclient import TestClient


# Ensure the repository root (parent of ./tests) is importable during pytest collection.
# This avoids ModuleNotFoundError for imports like `import couchdb_connector...` under pytest import modes
# that don't automatically prepend the cwd/rootdir to sys.path.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from couchdb_connector import BasicAuth, Connector, DatabaseProperties, HttpReader, HttpWriter  # noqa: E402
from tests.fake_couchdb import create_fake_couchdb  # noqa: E402

COUCHDB_ENV_VARS = (
    "COUCHDB_PROTOCOL",
    "COUCHDB_HOST",
    "COUCHDB_PORT",
    "COUCHDB_DATABASE",
    "COUCHDB_USER",
    "COUCHDB_PASSWORD",
    "COUCHDB_TIMEOUT",
)


@pytest.fixture
def db_props() -> DatabaseProperties:
    return DatabaseProperties(database="test_db")


@pytest.fixture
def couch_app():
    return create_fake_couchdb()


@pytest.fixture
def couch_client(couch_app):
    """
    TestClient is an httpx.Client, so the reader/writer talk to the fake server in-process.
    """
    with TestClient(couch_app) as client:
        yield client


@pytest.fixture
def connector(couch_client) -> Connector:
    return Connector(HttpReader(couch_client), HttpWriter(couch_client))


@pytest.fixture
def admin_auth() -> BasicAuth:
    return BasicAuth(user="admin", password="s3cret")


@pytest.fixture
def secured_couch_app(admin_auth: BasicAuth):
    return create_fake_couchdb(credentials=admin_auth.as_tuple())


@pytest.fixture
def secured_connector(secured_couch_app):
    with TestClient(secured_couch_app) as client:
        yield Connector(HttpReader(client), HttpWriter(client))


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """
    Unset COUCHDB_* for the test. Each name is registered with monkeypatch first
    so values a test loads from a .env file are undone as well.
    """
    for name in COUCHDB_ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
