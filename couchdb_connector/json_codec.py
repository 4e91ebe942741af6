from __future__ import annotations

import json
from typing import Any, Iterable, Mapping

from .errors import DocumentDecodeError


def as_json(doc: Mapping[str, Any]) -> str:
    """
    Serialize a document map to JSON text for the wire.
    """
    return json.dumps(dict(doc), separators=(",", ":"), ensure_ascii=False)


def as_map(value: str | bytes | Mapping[str, Any] | Iterable[tuple[str, str]] | None) -> dict[str, Any]:
    """
    Convert a response body (JSON text) or a header collection into a dict.

    - JSON text / bytes: decoded; empty or whitespace-only bodies give {}.
    - Mappings: shallow-copied into a plain dict.
    - Iterables of (name, value) pairs: collected into a dict, later names win.

    Raises DocumentDecodeError for malformed JSON or JSON that is not an object.
    """
    if value is None:
        return {}
    if isinstance(value, bytes):
        value = value.decode("utf-8")
    if isinstance(value, str):
        if not value.strip():
            return {}
        try:
            decoded = json.loads(value)
        except json.JSONDecodeError as e:
            raise DocumentDecodeError(f"response body is not valid JSON: {e.msg}") from e
        if not isinstance(decoded, dict):
            raise DocumentDecodeError(f"expected a JSON object, got {type(decoded).__name__}")
        return decoded
    if isinstance(value, Mapping):
        return dict(value)
    return {str(k): v for k, v in value}
