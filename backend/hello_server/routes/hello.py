"""
Hello Server — Greeting and Counter Routes
============================================

GET /hello/{name}   Plain-text greeting built from the path segment.
GET /count          Bumps the process-wide counter and reports the new value.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from hello_server.state import RequestCounter, get_counter

router = APIRouter(tags=["Hello"])


@router.get(
    "/hello/{name}",
    response_class=PlainTextResponse,
    summary="Greet by name",
)
async def greet(name: str) -> str:
    return f"Hello {name}!"


@router.get(
    "/count",
    response_class=PlainTextResponse,
    summary="Count requests to this endpoint",
    description="Every call increments the shared counter; the first call returns 1.",
)
async def count(counter: RequestCounter = Depends(get_counter)) -> str:
    return f"Hello, count: {counter.increment()}"
