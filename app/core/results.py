"""Explicit result types for upstream calls."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class ErrorKind(str, Enum):
    RATE_LIMITED = "rate_limited"
    UPSTREAM_UNAVAILABLE = "upstream_unavailable"
    DECODE_ERROR = "decode_error"
    NOT_FOUND = "not_found"
    RETRIES_EXHAUSTED = "retries_exhausted"
    VALIDATION_FAILED = "validation_failed"


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    kind: ErrorKind
    message: str
    status: int | None = None


Result = Union[Ok[T], Failure]


def classify_status(status: int) -> ErrorKind | None:
    """Map an HTTP status to a failure kind, or ``None`` for a usable response."""
    if status == 429:
        return ErrorKind.RATE_LIMITED
    if status == 404:
        return ErrorKind.NOT_FOUND
    if 400 <= status < 500:
        return ErrorKind.VALIDATION_FAILED
    if status >= 500:
        return ErrorKind.UPSTREAM_UNAVAILABLE
    return None
