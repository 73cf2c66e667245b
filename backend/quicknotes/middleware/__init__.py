# Middleware package init
"""
QuickNotes Backend: Middleware Package
========================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → [Unexpected Error] → Route Handler

    Request ID runs first so every log line of the request, including the
    access log, carries the same correlation ID. Unexpected Error sits
    innermost so a 500 still passes back through the other three.
"""
