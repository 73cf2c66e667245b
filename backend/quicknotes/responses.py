"""
QuickNotes Backend: Envelope Rendering
=========================================

What:  Turns Envelope models and QuickNotesError instances into HTTP responses.
How:   Dumps the envelope with camelCase aliases, drops `error` on success and
       returns a JSONResponse (Content-Type: application/json).
Who:   Route handlers (success) and the exception handlers in main.py (failure).

Encoding failure:
    If the payload cannot be serialized the envelope contract cannot be kept.
    The failure is logged and a plain-text 500 is returned instead.
"""

import logging

from starlette.responses import JSONResponse, PlainTextResponse, Response

from quicknotes.exceptions import QuickNotesError
from quicknotes.schemas.note import Envelope, ErrorBody, ErrorEnvelope

logger = logging.getLogger(__name__)

INTERNAL_SERVER_ERROR_TEXT = "Internal Server Error"


def render_envelope(envelope: Envelope, status_code: int = 200) -> Response:
    try:
        content = envelope.model_dump(mode="json", by_alias=True)
        if envelope.error is None:
            content.pop("error", None)
        return JSONResponse(content=content, status_code=status_code)
    except (TypeError, ValueError) as e:
        logger.error("Error sending JSON response: %s", str(e), exc_info=True)
        return PlainTextResponse(INTERNAL_SERVER_ERROR_TEXT, status_code=500)


def error_response(exc: QuickNotesError) -> Response:
    """Error envelope with the status mapped from the error's code."""
    envelope = ErrorEnvelope(error=ErrorBody(code=exc.code.value, message=exc.message))
    return render_envelope(envelope, status_code=exc.status_code)
