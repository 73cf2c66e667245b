"""
QuickNotes Backend: Note Domain Model
========================================

What:  The Note entity held by NoteStore and returned by every notes endpoint.
How:   Frozen Pydantic model; serialized with camelCase aliases
       ({"id", "title", "content", "createdAt"}).
Who:   Created only by NoteStore.add(); read by services and routes.

Lifecycle:
    1. Created by POST /notes after title/content validation
    2. Appended to the store; never updated, never deleted
    3. Lost on process restart (no persistence)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class Note(BaseModel):
    """
    A short text note.

    Invariants:
        - id is the store size at creation time, so ids are 0, 1, 2, ...
        - title and content are non-empty
        - created_at is UTC and non-decreasing across creations
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(ge=0, description="Server-assigned identifier")
    title: str = Field(min_length=1, description="Note title")
    content: str = Field(min_length=1, description="Note body text")
    created_at: datetime = Field(
        alias="createdAt",
        description="When the note was created (UTC, RFC 3339)",
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r}, created_at='{self.created_at}')>"
