from __future__ import annotations

from couchdb_connector import BasicAuth, Connector, DatabaseProperties, get_settings


def test_defaults(clean_env):
    s = get_settings()
    assert s.db_properties() == DatabaseProperties(
        protocol="http", hostname="localhost", port=5984, database="couchdb_connector"
    )
    assert s.basic_auth() is None
    assert s.timeout == 10.0


def test_environment_overrides(clean_env, monkeypatch):
    monkeypatch.setenv("COUCHDB_PROTOCOL", "HTTPS")
    monkeypatch.setenv("COUCHDB_HOST", "couch.internal")
    monkeypatch.setenv("COUCHDB_PORT", "6984")
    monkeypatch.setenv("COUCHDB_DATABASE", "orders")
    monkeypatch.setenv("COUCHDB_USER", "admin")
    monkeypatch.setenv("COUCHDB_PASSWORD", "s3cret")
    monkeypatch.setenv("COUCHDB_TIMEOUT", "2.5")

    s = get_settings()
    props = s.db_properties()
    assert (props.protocol, props.hostname, props.port, props.database) == ("https", "couch.internal", 6984, "orders")
    assert s.basic_auth() == BasicAuth(user="admin", password="s3cret")
    assert s.timeout == 2.5


def test_user_without_password_means_no_auth(clean_env, monkeypatch):
    monkeypatch.setenv("COUCHDB_USER", "admin")
    assert get_settings().basic_auth() is None


def test_env_file_is_loaded_but_environment_wins(clean_env, monkeypatch, tmp_path):
    env_file = tmp_path / "local.env"
    env_file.write_text("COUCHDB_HOST=from-file\nCOUCHDB_DATABASE=file_db\n", encoding="utf-8")
    monkeypatch.setenv("COUCHDB_DATABASE", "env_db")

    s = get_settings(env_file)
    assert s.hostname == "from-file"
    assert s.database == "env_db"


def test_password_is_hidden_from_repr():
    auth = BasicAuth(user="admin", password="s3cret")
    assert "s3cret" not in repr(auth)


def test_connector_from_settings(clean_env, monkeypatch):
    monkeypatch.setenv("COUCHDB_TIMEOUT", "1.5")
    connector = Connector.from_settings(get_settings())
    assert connector._reader._http.timeout == 1.5
    assert connector._writer._http.timeout == 1.5
