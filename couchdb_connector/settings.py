from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .types import BasicAuth, DatabaseProperties


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return float(raw)


@dataclass(frozen=True)
class Settings:
    # Target server / database
    protocol: str
    hostname: str
    port: int
    database: str

    # Optional basic auth
    user: str | None
    password: str | None

    # Per-request timeout (seconds), handed to httpx
    timeout: float

    def db_properties(self) -> DatabaseProperties:
        return DatabaseProperties(
            protocol=self.protocol,
            hostname=self.hostname,
            port=self.port,
            database=self.database,
        )

    def basic_auth(self) -> BasicAuth | None:
        if not self.user or self.password is None:
            return None
        return BasicAuth(user=self.user, password=self.password)


def get_settings(env_file: str | Path | None = None) -> Settings:
    """
    Build settings from COUCHDB_* environment variables.

    If env_file is given it is loaded first; variables already set in the
    environment take precedence over the file.
    """
    if env_file is not None:
        load_dotenv(env_file)

    protocol = os.getenv("COUCHDB_PROTOCOL", "http").strip().lower()
    hostname = os.getenv("COUCHDB_HOST", "localhost").strip()
    port = _env_int("COUCHDB_PORT", 5984)
    database = os.getenv("COUCHDB_DATABASE", "couchdb_connector").strip()

    user = os.getenv("COUCHDB_USER") or None
    password = os.getenv("COUCHDB_PASSWORD")

    timeout = _env_float("COUCHDB_TIMEOUT", 10.0)

    return Settings(
        protocol=protocol,
        hostname=hostname,
        port=port,
        database=database,
        user=user,
        password=password,
        timeout=timeout,
    )
