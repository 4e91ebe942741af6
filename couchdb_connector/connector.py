from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping

from .errors import MissingDocumentIdError
from .interfaces import DocumentReader, DocumentWriter
from .json_codec import as_json, as_map
from .reader import HttpReader
from .transport import DEFAULT_TIMEOUT
from .types import BasicAuth, DatabaseProperties, RawResponse, RawResponseWithHeaders, Result, WriteResponse
from .writer import HttpWriter

if TYPE_CHECKING:
    from .settings import Settings

logger = logging.getLogger(__name__)


def handle_write_response(response: WriteResponse) -> Result:
    """
    Give every write outcome the same shape: {"payload": <body map>, "headers": <header map>}.
    Outcomes without headers get an empty header map.
    """
    if isinstance(response, RawResponseWithHeaders):
        return Result(response.status, {"payload": as_map(response.body), "headers": as_map(response.headers)})
    if isinstance(response, RawResponse):
        return Result(response.status, {"payload": as_map(response.body), "headers": {}})
    raise TypeError(f"unexpected write response: {response!r}")


class Connector:
    """
    Primary interface for reading and writing CouchDB documents as dicts.

    Works in maps on both sides; use HttpReader / HttpWriter directly to deal
    in JSON text. Every method takes optional basic auth credentials and
    returns a Result; transport and database failures come back as
    Status.ERROR results rather than exceptions.
    """

    def __init__(self, reader: DocumentReader | None = None, writer: DocumentWriter | None = None) -> None:
        self._reader = reader if reader is not None else HttpReader()
        self._writer = writer if writer is not None else HttpWriter()

    @classmethod
    def from_settings(cls, settings: "Settings") -> "Connector":
        return cls(HttpReader(timeout=settings.timeout), HttpWriter(timeout=settings.timeout))

    def get(self, db_props: DatabaseProperties, doc_id: str, *, auth: BasicAuth | None = None) -> Result:
        """Retrieve the document stored under doc_id."""
        status, body = self._reader.get(db_props, doc_id, auth)
        return Result(status, as_map(body))

    def fetch_uuid(self, db_props: DatabaseProperties, *, auth: BasicAuth | None = None) -> Result:
        """
        Fetch a single server-generated UUID for a subsequent create.
        The payload holds a one-element list under "uuids".
        """
        status, body = self._reader.fetch_uuid(db_props, auth)
        return Result(status, as_map(body))

    def create(
        self,
        db_props: DatabaseProperties,
        doc: Mapping[str, Any],
        doc_id: str,
        *,
        auth: BasicAuth | None = None,
    ) -> Result:
        """
        Create a new document under the given id.

        No existence check is made: the caller must make sure the id is not
        already taken. Pass a UUID, or use create_generate when uniqueness
        cannot be guaranteed.
        """
        return handle_write_response(self._writer.create(db_props, as_json(doc), doc_id, auth))

    def create_generate(
        self,
        db_props: DatabaseProperties,
        doc: Mapping[str, Any],
        *,
        auth: BasicAuth | None = None,
    ) -> Result:
        """
        Create a new document under a server-generated id.

        Costs an extra round trip (fetch the UUID, then create) compared to
        supplying an id. If the UUID request fails, that failure is returned
        in the write result shape and nothing is created.
        """
        fetched = self.fetch_uuid(db_props, auth=auth)
        if not fetched.ok:
            logger.info("COUCHDB CREATE_GENERATE: uuid fetch failed: %s", fetched.payload)
            return Result(fetched.status, {"payload": fetched.payload, "headers": {}})
        doc_id = fetched.payload["uuids"][0]
        return self.create(db_props, doc, doc_id, auth=auth)

    def update(
        self,
        db_props: DatabaseProperties,
        doc: Mapping[str, Any],
        *,
        auth: BasicAuth | None = None,
    ) -> Result:
        """
        Update the given document, which must contain an "_id" field (and the
        current "_rev"). Raises MissingDocumentIdError before any request is
        made if "_id" is absent.
        """
        if "_id" not in doc:
            raise MissingDocumentIdError()
        return handle_write_response(self._writer.update(db_props, as_json(doc), doc["_id"], auth))

    def destroy(
        self,
        db_props: DatabaseProperties,
        doc_id: str,
        rev: str,
        *,
        auth: BasicAuth | None = None,
    ) -> Result:
        """Delete the document at doc_id; rev must be its current revision."""
        return handle_write_response(self._writer.destroy(db_props, doc_id, rev, auth))


_default_connector = Connector(HttpReader(timeout=DEFAULT_TIMEOUT), HttpWriter(timeout=DEFAULT_TIMEOUT))


def get(db_props: DatabaseProperties, doc_id: str, *, auth: BasicAuth | None = None) -> Result:
    return _default_connector.get(db_props, doc_id, auth=auth)


def fetch_uuid(db_props: DatabaseProperties, *, auth: BasicAuth | None = None) -> Result:
    return _default_connector.fetch_uuid(db_props, auth=auth)


def create(
    db_props: DatabaseProperties, doc: Mapping[str, Any], doc_id: str, *, auth: BasicAuth | None = None
) -> Result:
    return _default_connector.create(db_props, doc, doc_id, auth=auth)


def create_generate(db_props: DatabaseProperties, doc: Mapping[str, Any], *, auth: BasicAuth | None = None) -> Result:
    return _default_connector.create_generate(db_props, doc, auth=auth)


def update(db_props: DatabaseProperties, doc: Mapping[str, Any], *, auth: BasicAuth | None = None) -> Result:
    return _default_connector.update(db_props, doc, auth=auth)


def destroy(db_props: DatabaseProperties, doc_id: str, rev: str, *, auth: BasicAuth | None = None) -> Result:
    return _default_connector.destroy(db_props, doc_id, rev, auth=auth)
