from __future__ import annotations

import json
import logging
from typing import Any, Mapping

import httpx

from .types import BasicAuth, RawResponse, Status

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0
JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


class HttpTransport:
    """
    Thin wrapper around httpx shared by the reader and writer.

    With an injected client, requests go through it and it is never closed here.
    Without one, every request opens and closes its own client, so nothing is
    shared between calls.
    """

    def __init__(self, client: httpx.Client | None = None, *, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = client
        self._timeout = timeout

    @property
    def timeout(self) -> float:
        return self._timeout

    def request(
        self,
        method: str,
        url: str,
        *,
        auth: BasicAuth | None = None,
        content: str | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> httpx.Response:
        kwargs: dict[str, Any] = {"headers": JSON_HEADERS}
        if content is not None:
            kwargs["content"] = content.encode("utf-8")
        if params:
            kwargs["params"] = dict(params)
        if auth is not None:
            kwargs["auth"] = auth.as_tuple()

        if self._client is not None:
            response = self._client.request(method, url, **kwargs)
        else:
            with httpx.Client(timeout=self._timeout) as client:
                response = client.request(method, url, **kwargs)
        logger.debug("COUCHDB %s: url=%s status=%s", method, url, response.status_code)
        return response


def transport_failure(method: str, url: str, exc: httpx.HTTPError) -> RawResponse:
    """
    Turn an httpx failure into an error outcome with a CouchDB-style JSON body.
    """
    logger.warning("COUCHDB %s: transport failure for %s: %r", method, url, exc)
    body = json.dumps({"error": "transport_error", "reason": str(exc) or exc.__class__.__name__})
    return RawResponse(Status.ERROR, body)
