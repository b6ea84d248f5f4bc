"""
Hello Server — Health Check Route
===================================

What:  Liveness endpoint for process supervisors and load balancers.
How:   There are no external dependencies to probe, so a response at all
       means healthy; the body adds version, counter value and uptime.
"""

import time

from fastapi import APIRouter, Depends, Request

from hello_server import __version__
from hello_server.schemas.api import HealthResponse
from hello_server.state import RequestCounter, get_counter

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    request: Request,
    counter: RequestCounter = Depends(get_counter),
) -> HealthResponse:
    started_at = request.app.state.started_at
    return HealthResponse(
        status="healthy",
        version=__version__,
        requests_counted=counter.value,
        uptime_seconds=round(time.monotonic() - started_at, 2),
    )
