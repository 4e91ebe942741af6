from __future__ import annotations


class CouchDBConnectorError(Exception):
    pass


class MissingDocumentIdError(CouchDBConnectorError, ValueError):
    """Raised when a document handed to ``update`` carries no ``_id`` field."""

    def __init__(self, message: str = 'the document to be updated must contain an "_id" field'):
        super().__init__(message)


class DocumentDecodeError(CouchDBConnectorError, ValueError):
    """Raised when a response body is not valid JSON."""
