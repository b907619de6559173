"""Explicit outcome of a Query Client call."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class FailureKind(str, Enum):
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"
    MALFORMED_RESPONSE = "malformed_response"


@dataclass(frozen=True)
class QuerySuccess(Generic[T]):
    """Transported response. GraphQL ``errors`` live inside ``page``."""

    page: T


@dataclass(frozen=True)
class QueryFailure:
    kind: FailureKind
    detail: str
    status_code: int | None = None

    def __str__(self) -> str:
        if self.status_code is not None:
            return f"{self.kind.value} ({self.status_code}): {self.detail}"
        return f"{self.kind.value}: {self.detail}"


QueryResult = Union[QuerySuccess[T], QueryFailure]
