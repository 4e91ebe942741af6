from __future__ import annotations

from enum import Enum
from typing import Any, NamedTuple, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field


class DatabaseProperties(BaseModel):
    """
    Identifies a target database. Immutable; passed through unchanged on every call.
    """

    model_config = ConfigDict(frozen=True)

    protocol: str = "http"
    hostname: str = "localhost"
    port: int = 5984
    database: str


class BasicAuth(BaseModel):
    model_config = ConfigDict(frozen=True)

    user: str
    password: str = Field(repr=False)

    def as_tuple(self) -> tuple[str, str]:
        return (self.user, self.password)


class Status(str, Enum):
    OK = "ok"
    ERROR = "error"


class Result(NamedTuple):
    """
    Uniform outcome of every connector call.

    Unpacks like the raw pair: ``status, payload = connector.get(...)``.
    Write operations carry ``{"payload": {...}, "headers": {...}}`` as payload.
    """

    status: Status
    payload: dict[str, Any]

    @property
    def ok(self) -> bool:
        return self.status is Status.OK


class RawResponse(NamedTuple):
    status: Status
    body: str


class RawResponseWithHeaders(NamedTuple):
    status: Status
    body: str
    headers: Sequence[tuple[str, str]]


# What a DocumentWriter hands back: headers are only present on some outcomes.
WriteResponse = Union[RawResponse, RawResponseWithHeaders]
