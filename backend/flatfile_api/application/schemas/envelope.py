"""Pydantic DTOs for the uniform response envelope."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from flatfile_api.domain.entities import Record


class RecordEnvelope(BaseModel):
    """Single-record success response: ``{status, data: {<name>: {...}}}``."""

    status: Literal["success"] = "success"
    data: dict[str, dict[str, Any]] = Field(..., examples=[{"user": {"id": "1", "name": "Ada"}}])


class RecordListEnvelope(BaseModel):
    """Collection success response: ``{status, results, data: {<plural>: [...]}}``."""

    status: Literal["success"] = "success"
    results: int
    data: dict[str, list[dict[str, Any]]]


class MessageEnvelope(BaseModel):
    """Plain informational success response."""

    status: Literal["success"] = "success"
    message: str
    endpoints: dict[str, str] | None = None


class ErrorEnvelope(BaseModel):
    """Failure response. ``stack`` is only filled in development."""

    status: Literal["error"] = "error"
    statusCode: int
    message: str
    stack: str | None = None


def success(name: str, record: Record) -> RecordEnvelope:
    return RecordEnvelope(data={name: record.to_dict()})


def success_list(name: str, records: list[Record]) -> RecordListEnvelope:
    return RecordListEnvelope(
        results=len(records),
        data={name: [r.to_dict() for r in records]},
    )
