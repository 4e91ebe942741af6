from __future__ import annotations

import httpx

from .interfaces import DocumentWriter
from .transport import DEFAULT_TIMEOUT, HttpTransport, transport_failure
from .types import BasicAuth, DatabaseProperties, RawResponse, RawResponseWithHeaders, Status, WriteResponse
from .url_helper import document_url

# 202 means the write was accepted but not yet committed to a quorum.
CREATED_CODES = (201, 202)
DELETED_CODES = (200, 202)


class HttpWriter(DocumentWriter):
    """
    Creates, updates and deletes documents over CouchDB's HTTP API.

    Successful creates/updates come back with the response headers (Location,
    ETag, ...); every other outcome is a plain (status, body) pair.
    """

    def __init__(self, client: httpx.Client | None = None, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._http = HttpTransport(client, timeout=timeout)

    def create(
        self, db_props: DatabaseProperties, json_doc: str, doc_id: str, auth: BasicAuth | None = None
    ) -> WriteResponse:
        return self._put(document_url(db_props, doc_id), json_doc, auth=auth)

    def update(
        self, db_props: DatabaseProperties, json_doc: str, doc_id: str, auth: BasicAuth | None = None
    ) -> WriteResponse:
        # CouchDB updates are PUTs of the full document, _rev included.
        return self._put(document_url(db_props, doc_id), json_doc, auth=auth)

    def destroy(
        self, db_props: DatabaseProperties, doc_id: str, rev: str, auth: BasicAuth | None = None
    ) -> WriteResponse:
        url = document_url(db_props, doc_id)
        try:
            response = self._http.request("DELETE", url, auth=auth, params={"rev": rev})
        except httpx.HTTPError as e:
            return transport_failure("DELETE", url, e)
        status = Status.OK if response.status_code in DELETED_CODES else Status.ERROR
        return RawResponse(status, response.text)

    def _put(self, url: str, json_doc: str, *, auth: BasicAuth | None) -> WriteResponse:
        try:
            response = self._http.request("PUT", url, auth=auth, content=json_doc)
        except httpx.HTTPError as e:
            return transport_failure("PUT", url, e)
        if response.status_code in CREATED_CODES:
            return RawResponseWithHeaders(Status.OK, response.text, list(response.headers.multi_items()))
        return RawResponse(Status.ERROR, response.text)
