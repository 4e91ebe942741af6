from __future__ import annotations

import httpx

from .interfaces import DocumentReader
from .transport import DEFAULT_TIMEOUT, HttpTransport, transport_failure
from .types import BasicAuth, DatabaseProperties, RawResponse, Status
from .url_helper import document_url, uuids_url


class HttpReader(DocumentReader):
    """
    Reads documents and UUIDs over CouchDB's HTTP API, returning raw JSON text.
    """

    def __init__(self, client: httpx.Client | None = None, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._http = HttpTransport(client, timeout=timeout)

    def get(self, db_props: DatabaseProperties, doc_id: str, auth: BasicAuth | None = None) -> RawResponse:
        return self._get(document_url(db_props, doc_id), auth=auth)

    def fetch_uuid(self, db_props: DatabaseProperties, auth: BasicAuth | None = None) -> RawResponse:
        return self._get(uuids_url(db_props), auth=auth, params={"count": 1})

    def _get(self, url: str, *, auth: BasicAuth | None, params: dict | None = None) -> RawResponse:
        try:
            response = self._http.request("GET", url, auth=auth, params=params)
        except httpx.HTTPError as e:
            return transport_failure("GET", url, e)
        status = Status.OK if response.status_code == 200 else Status.ERROR
        return RawResponse(status, response.text)
