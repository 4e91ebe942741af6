from __future__ import annotations

import asyncio
from typing import Any, Mapping

from .connector import Connector
from .errors import MissingDocumentIdError
from .types import BasicAuth, DatabaseProperties, Result


class AsyncConnector:
    """
    Async wrapper around the blocking Connector.
    Uses asyncio.to_thread to avoid blocking the event loop on network I/O.
    """

    def __init__(self, connector: Connector | None = None) -> None:
        self._connector = connector if connector is not None else Connector()

    async def get(self, db_props: DatabaseProperties, doc_id: str, *, auth: BasicAuth | None = None) -> Result:
        return await asyncio.to_thread(self._connector.get, db_props, doc_id, auth=auth)

    async def fetch_uuid(self, db_props: DatabaseProperties, *, auth: BasicAuth | None = None) -> Result:
        return await asyncio.to_thread(self._connector.fetch_uuid, db_props, auth=auth)

    async def create(
        self,
        db_props: DatabaseProperties,
        doc: Mapping[str, Any],
        doc_id: str,
        *,
        auth: BasicAuth | None = None,
    ) -> Result:
        return await asyncio.to_thread(self._connector.create, db_props, doc, doc_id, auth=auth)

    async def create_generate(
        self,
        db_props: DatabaseProperties,
        doc: Mapping[str, Any],
        *,
        auth: BasicAuth | None = None,
    ) -> Result:
        return await asyncio.to_thread(self._connector.create_generate, db_props, doc, auth=auth)

    async def update(
        self,
        db_props: DatabaseProperties,
        doc: Mapping[str, Any],
        *,
        auth: BasicAuth | None = None,
    ) -> Result:
        # Fail on the caller's task, not inside the worker thread.
        if "_id" not in doc:
            raise MissingDocumentIdError()
        return await asyncio.to_thread(self._connector.update, db_props, doc, auth=auth)

    async def destroy(
        self,
        db_props: DatabaseProperties,
        doc_id: str,
        rev: str,
        *,
        auth: BasicAuth | None = None,
    ) -> Result:
        return await asyncio.to_thread(self._connector.destroy, db_props, doc_id, rev, auth=auth)
