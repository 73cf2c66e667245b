"""
QuickNotes Backend: Health Check Route
=========================================

What:  Liveness endpoint for container and load balancer health checks.
How:   The service has no external dependencies, so being able to answer is
       the health signal; the response also reports the in-memory note count.
"""

import logging
import time

from fastapi import APIRouter, Depends

from quicknotes import __version__
from quicknotes.routes.notes import get_note_service
from quicknotes.schemas.note import HealthResponse
from quicknotes.services.note_service import NoteService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(service: NoteService = Depends(get_note_service)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=service.store.count,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
