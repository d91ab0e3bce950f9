"""Request body dependency for record payloads."""

import math
from typing import Any

from fastapi import Body

from flatfile_api.domain.exceptions import InvalidPayloadError


def _has_non_finite(value: Any) -> bool:
    if isinstance(value, float):
        return not math.isfinite(value)
    if isinstance(value, dict):
        return any(_has_non_finite(v) for v in value.values())
    if isinstance(value, list):
        return any(_has_non_finite(v) for v in value)
    return False


async def record_payload(payload: dict[str, Any] | None = Body(None)) -> dict[str, Any]:
    """The JSON object sent by the client; a missing body is an empty payload.

    ``NaN`` and ``Infinity`` are accepted by the JSON parser but cannot be
    written back as JSON, so they are rejected here.
    """
    payload = payload or {}
    if _has_non_finite(payload):
        raise InvalidPayloadError("Invalid request body: numbers must be finite")
    return payload
