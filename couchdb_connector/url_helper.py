from __future__ import annotations

from urllib.parse import quote

from .types import DatabaseProperties

DESIGN_PREFIX = "_design/"


def server_url(db_props: DatabaseProperties) -> str:
    return f"{db_props.protocol}://{db_props.hostname}:{db_props.port}"


def database_url(db_props: DatabaseProperties) -> str:
    return f"{server_url(db_props)}/{quote(db_props.database, safe='')}"


def document_url(db_props: DatabaseProperties, doc_id: str) -> str:
    # Design doc ids keep their slash; everything else is a single path segment.
    if doc_id.startswith(DESIGN_PREFIX):
        encoded = DESIGN_PREFIX + quote(doc_id[len(DESIGN_PREFIX):], safe="")
    else:
        encoded = quote(doc_id, safe="")
    return f"{database_url(db_props)}/{encoded}"


def uuids_url(db_props: DatabaseProperties) -> str:
    return f"{server_url(db_props)}/_uuids"
