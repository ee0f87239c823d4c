"""Codec for the upstream ``{data, status, error}`` response envelope."""

from __future__ import annotations

import logging
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.results import ErrorKind, Failure, Ok, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    data: T | None = None
    status: str | None = None
    error: str | None = None


def decode_envelope(raw: Any, payload_type: Any) -> Result[Envelope[Any]]:
    """Decode a parsed JSON body into ``Envelope[payload_type]``.

    A body without ``data`` decodes to an envelope whose ``data`` is ``None``;
    it is never turned into an empty payload here.
    """
    if not isinstance(raw, dict):
        return Failure(ErrorKind.DECODE_ERROR, f"Expected a JSON object envelope, got {type(raw).__name__}")

    try:
        return Ok(Envelope[payload_type].model_validate(raw))
    except ValidationError as e:
        logger.debug("Envelope validation failed: %s", e)
        return Failure(ErrorKind.DECODE_ERROR, f"Malformed envelope: {e.error_count()} validation error(s)")


def encode_body(model: BaseModel) -> dict[str, Any]:
    return model.model_dump(mode="json", exclude_none=True)
