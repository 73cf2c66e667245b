"""
QuickNotes Backend: Error Codes & Exception Hierarchy
========================================================

What:  The closed set of error codes the API can return, their HTTP statuses,
       and one exception class per code.
How:   Each exception carries an `ErrorCode` and a human-readable message.
       The global handlers registered in main.py catch QuickNotesError, look
       the status up in STATUS_CODES and render the error envelope.
Who:   Raised by NoteService / NoteStore and by the POST /notes body decoder.

Exception Hierarchy:
    QuickNotesError (base, carries `code`)
    ├── BodyInvalidError          body_invalid          → 400
    ├── NoteIDInvalidError        note_id_invalid       → 400
    ├── NoteNotFoundError         note_not_found        → 404
    ├── NoteTitleInvalidError     note_title_invalid    → 422
    ├── NoteContentInvalidError   note_content_invalid  → 422
    └── InternalError             internal              → 500

None of these are retryable: the same request always fails the same way.
"""

from enum import Enum
from typing import Dict


class ErrorCode(str, Enum):
    """Stable machine-readable error codes, serialized as their string value."""

    BODY_INVALID = "body_invalid"
    INTERNAL = "internal"
    NOTE_CONTENT_INVALID = "note_content_invalid"
    NOTE_ID_INVALID = "note_id_invalid"
    NOTE_NOT_FOUND = "note_not_found"
    NOTE_TITLE_INVALID = "note_title_invalid"


STATUS_CODES: Dict[ErrorCode, int] = {
    ErrorCode.BODY_INVALID: 400,
    ErrorCode.INTERNAL: 500,
    ErrorCode.NOTE_CONTENT_INVALID: 422,
    ErrorCode.NOTE_ID_INVALID: 400,
    ErrorCode.NOTE_NOT_FOUND: 404,
    ErrorCode.NOTE_TITLE_INVALID: 422,
}


def status_for(code: ErrorCode) -> int:
    """HTTP status for an error code; 500 for anything outside the table."""
    return STATUS_CODES.get(code, 500)


class QuickNotesError(Exception):
    """
    Base exception for all API errors.

    Attributes:
        code:     ErrorCode identifying the failure category
        message:  User-facing description (returned in the envelope)
    """

    code: ErrorCode = ErrorCode.INTERNAL
    default_message: str = "Internal error"

    def __init__(self, message: str = ""):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return status_for(self.code)

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class BodyInvalidError(QuickNotesError):
    """Request body could not be decoded into the expected JSON object."""

    code = ErrorCode.BODY_INVALID
    default_message = "Request body is not valid JSON"


class NoteIDInvalidError(QuickNotesError):
    """
    The `{id}` path parameter is not a base-10 integer.

    Raised before any lookup happens, so the result does not depend on
    what the store contains.
    """

    code = ErrorCode.NOTE_ID_INVALID

    def __init__(self, raw_id: str):
        super().__init__(f"Note ID is invalid: {raw_id}")
        self.raw_id = raw_id


class NoteNotFoundError(QuickNotesError):
    """No note in the store has the requested identifier."""

    code = ErrorCode.NOTE_NOT_FOUND

    def __init__(self, raw_id: str):
        super().__init__(f"Note not found: {raw_id}")
        self.raw_id = raw_id


class NoteTitleInvalidError(QuickNotesError):
    code = ErrorCode.NOTE_TITLE_INVALID
    default_message = "Note title can not be empty"


class NoteContentInvalidError(QuickNotesError):
    code = ErrorCode.NOTE_CONTENT_INVALID
    default_message = "Note content can not be empty"


class InternalError(QuickNotesError):
    """
    Catch-all for failures that have no code of their own.

    The message is always generic; details go to the server log only.
    """

    code = ErrorCode.INTERNAL
    default_message = "Internal error"
