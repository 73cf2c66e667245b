"""
QuickNotes Backend: Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the API contract between clients and backend.
How:   The POST /notes decoder validates raw JSON into NoteCreateParams;
       route handlers wrap results in Envelope; OpenAPI docs are generated
       from the same models.

Envelope contract:
    Success: {"data": <payload>}                       (error omitted)
    Failure: {"data": null, "error": {"code", "message"}}
"""

from typing import Any, Generic, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator

from quicknotes.models.note import Note

T = TypeVar("T")


# ══════════════════════════════════════════════════════════════════════════
# Request Models: What the client sends
# ══════════════════════════════════════════════════════════════════════════


class NoteCreateParams(BaseModel):
    """
    What:  Body of POST /notes.
    How:   Strings are kept raw (no trimming). A missing or null field decodes
           as "" so the service reports it as an empty title/content; a field
           of any other JSON type fails validation and becomes body_invalid.
           Unknown fields are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    title: StrictStr = Field(default="", description="Note title (required, non-empty)")
    content: StrictStr = Field(default="", description="Note body (required, non-empty)")

    @field_validator("title", "content", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        return "" if v is None else v


# ══════════════════════════════════════════════════════════════════════════
# Response Models: What the API returns to clients
# ══════════════════════════════════════════════════════════════════════════


class ErrorBody(BaseModel):
    """
    Example:
        {"code": "note_not_found", "message": "Note not found: 7"}
    """

    code: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")


class Envelope(BaseModel, Generic[T]):
    """
    Uniform response wrapper for every notes endpoint.

    Exactly one of `data` / `error` is meaningful; `error` is dropped from the
    JSON on success by responses.render_envelope().
    """

    data: Optional[T] = Field(default=None, description="Success payload, null on error")
    error: Optional[ErrorBody] = Field(default=None, description="Present only on failure")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""

    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently held in memory")
    uptime_seconds: float = Field(description="Seconds since service started")


# Concrete envelopes, used for OpenAPI documentation of each route
NoteEnvelope = Envelope[Note]
NoteListEnvelope = Envelope[List[Note]]
ErrorEnvelope = Envelope[None]
