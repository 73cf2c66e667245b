"""
QuickNotes Backend: Unexpected Error Middleware
=================================================

What:  Turns any exception that escapes a route into the `internal` (500)
       error envelope.
How:   Wraps call_next; QuickNotesError never reaches here because FastAPI's
       exception handlers (main.py) answer it further in.
When:  Innermost middleware, so the 500 response still flows back through
       CORS, request logging and request ID like any other response.

Stack traces are logged server-side only; the client sees "Internal error".
"""

import logging

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from quicknotes.exceptions import InternalError
from quicknotes.middleware.request_id import request_id_var
from quicknotes.responses import error_response

logger = logging.getLogger("quicknotes.main")


class UnexpectedErrorMiddleware(BaseHTTPMiddleware):
    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            rid = request_id_var.get("")
            logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=exc)
            internal = InternalError()
            logger.error("[%s] API request error: %s [%d]", rid, internal, internal.status_code)
            return error_response(internal)
