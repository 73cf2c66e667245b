"""
QuickNotes Backend: Notes Route Handlers
===========================================

What:  GET /notes (list), GET /notes/{id} (detail), POST /notes (create).
How:   Resolves the NoteService attached to the app, calls it, wraps the result
       in the response envelope. Errors raised by the service propagate to the
       global handlers in main.py, which render the error envelope.
Who:   Called by the web and mobile clients.

Status codes:
    200  every success, including create
    400  body_invalid, note_id_invalid
    404  note_not_found
    422  note_title_invalid, note_content_invalid
"""

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import Response
from pydantic import ValidationError as PydanticValidationError

from quicknotes.exceptions import BodyInvalidError
from quicknotes.responses import render_envelope
from quicknotes.schemas.note import (
    ErrorEnvelope,
    NoteCreateParams,
    NoteEnvelope,
    NoteListEnvelope,
)
from quicknotes.services.note_service import NoteService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])


def get_note_service(request: Request) -> NoteService:
    """Dependency: the NoteService owned by the running application."""
    return request.app.state.note_service


async def read_create_params(request: Request) -> NoteCreateParams:
    """
    Decode the POST /notes body.

    The raw body is parsed here instead of declaring NoteCreateParams as a
    body parameter, so malformed input maps to body_invalid (400) rather than
    FastAPI's default 422 validation response.

    Raises:
        BodyInvalidError: Body is not JSON, not an object, or has non-string fields.
    """
    raw = await request.body()
    try:
        payload = json.loads(raw)
    except ValueError:
        raise BodyInvalidError() from None

    if payload is None:
        payload = {}

    try:
        return NoteCreateParams.model_validate(payload)
    except PydanticValidationError:
        raise BodyInvalidError() from None


@router.get(
    "/notes",
    response_model=NoteListEnvelope,
    responses={
        200: {"description": "Every note, in creation order", "model": NoteListEnvelope},
    },
    summary="List all notes",
)
async def list_notes(service: NoteService = Depends(get_note_service)) -> Response:
    return render_envelope(NoteListEnvelope(data=service.list_notes()))


@router.get(
    "/notes/{note_id}",
    response_model=NoteEnvelope,
    responses={
        200: {"description": "The requested note", "model": NoteEnvelope},
        400: {"description": "Identifier is not a base-10 integer", "model": ErrorEnvelope},
        404: {"description": "Note not found", "model": ErrorEnvelope},
    },
    summary="Get a single note by ID",
)
async def get_note(note_id: str, service: NoteService = Depends(get_note_service)) -> Response:
    """
    Get one note.

    Args:
        note_id: Raw path segment. Declared as str so that non-numeric values
                 reach NoteService and produce note_id_invalid.
    """
    return render_envelope(NoteEnvelope(data=service.get_note(note_id)))


@router.post(
    "/notes",
    response_model=NoteEnvelope,
    responses={
        200: {"description": "The created note", "model": NoteEnvelope},
        400: {"description": "Body is not valid JSON", "model": ErrorEnvelope},
        422: {"description": "Title or content is empty", "model": ErrorEnvelope},
    },
    summary="Create a note",
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": NoteCreateParams.model_json_schema()}},
        },
    },
)
async def create_note(
    params: NoteCreateParams = Depends(read_create_params),
    service: NoteService = Depends(get_note_service),
) -> Response:
    note = service.create_note(params)
    return render_envelope(NoteEnvelope(data=note))
