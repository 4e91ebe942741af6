from __future__ import annotations

from typing import Protocol

from .types import BasicAuth, DatabaseProperties, RawResponse, WriteResponse


class DocumentReader(Protocol):
    """
    Low-level read side: deals in JSON text, never in maps.
    """

    def get(self, db_props: DatabaseProperties, doc_id: str, auth: BasicAuth | None = None) -> RawResponse:
        """Fetch the document stored under doc_id."""
        ...

    def fetch_uuid(self, db_props: DatabaseProperties, auth: BasicAuth | None = None) -> RawResponse:
        """Ask the server for one fresh UUID ({"uuids": [...]})."""
        ...


class DocumentWriter(Protocol):
    """
    Low-level write side. Implementations may include response headers on some outcomes.
    """

    def create(
        self, db_props: DatabaseProperties, json_doc: str, doc_id: str, auth: BasicAuth | None = None
    ) -> WriteResponse:
        ...

    def update(
        self, db_props: DatabaseProperties, json_doc: str, doc_id: str, auth: BasicAuth | None = None
    ) -> WriteResponse:
        ...

    def destroy(
        self, db_props: DatabaseProperties, doc_id: str, rev: str, auth: BasicAuth | None = None
    ) -> WriteResponse:
        ...
