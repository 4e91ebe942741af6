from __future__ import annotations

from .async_connector import AsyncConnector
from .connector import (
    Connector,
    create,
    create_generate,
    destroy,
    fetch_uuid,
    get,
    handle_write_response,
    update,
)
from .errors import CouchDBConnectorError, DocumentDecodeError, MissingDocumentIdError
from .reader import HttpReader
from .settings import Settings, get_settings
from .types import BasicAuth, DatabaseProperties, RawResponse, RawResponseWithHeaders, Result, Status
from .writer import HttpWriter

__all__ = [
    "AsyncConnector",
    "Connector",
    "create",
    "create_generate",
    "destroy",
    "fetch_uuid",
    "get",
    "handle_write_response",
    "update",
    "CouchDBConnectorError",
    "DocumentDecodeError",
    "MissingDocumentIdError",
    "HttpReader",
    "HttpWriter",
    "Settings",
    "get_settings",
    "BasicAuth",
    "DatabaseProperties",
    "RawResponse",
    "RawResponseWithHeaders",
    "Result",
    "Status",
]
