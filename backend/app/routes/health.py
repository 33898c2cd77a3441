"""
Notes API — Health Check Route
===============================

What:  Health check endpoint for monitoring and load balancer checks.
Why:   Docker and load balancers need an unauthenticated way to ask whether
       the process is serving requests.
How:   The only dependency is the in-memory store, which is up whenever the
       process is, so the status is always "healthy". The note count and
       ownership policy are included for operators.
"""

import logging
import time

from fastapi import APIRouter, Depends, Request

from app import __version__
from app.dependencies import get_note_store
from app.schemas.note import HealthResponse
from app.storage import NoteStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    request: Request,
    store: NoteStore = Depends(get_note_store),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=len(store),
        ownership_policy=request.app.state.settings.ownership_policy.value,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
