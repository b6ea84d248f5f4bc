"""
Hello Server — Pydantic Request/Response Schemas
==================================================

What:  The JSON contracts of the tutorial endpoints.
How:   FastAPI validates request bodies against these models (422 on mismatch)
       and serializes return values through them.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Records — POST /record/create
# ══════════════════════════════════════════════════════════════════════════


class CreateRecord(BaseModel):
    """Request body for POST /record/create."""
    name: str = Field(description="Name to store on the record")


class RecordCreated(BaseModel):
    """
    What:  The record as created.
    Note:  Nothing is persisted; `id` is the fixed demo identifier and `ts`
           is the creation time in UTC.
    """
    id: int = Field(description="Record identifier")
    name: str = Field(description="Name echoed from the request")
    ts: datetime = Field(description="Creation timestamp (UTC ISO 8601)")


# ══════════════════════════════════════════════════════════════════════════
# Fallible endpoint — POST /try
# ══════════════════════════════════════════════════════════════════════════


class TryBody(BaseModel):
    """Request and success-response body for POST /try."""
    success: bool = Field(description="false makes the handler reject the request")


# ══════════════════════════════════════════════════════════════════════════
# Query parsing — GET /query
# ══════════════════════════════════════════════════════════════════════════


class QueryEcho(BaseModel):
    """The query-string values GET /query extracted, echoed back as JSON."""
    name: str
    age: Optional[int] = None
    tags: List[str] = Field(default_factory=list)


# ══════════════════════════════════════════════════════════════════════════
# Operational
# ══════════════════════════════════════════════════════════════════════════


class HealthResponse(BaseModel):
    """Liveness report for GET /health."""
    status: str = Field(description="Always 'healthy' while the process serves requests")
    version: str = Field(description="Package version")
    requests_counted: int = Field(description="Current value of the /count counter")
    uptime_seconds: float = Field(description="Seconds since the app was created")


class ErrorResponse(BaseModel):
    """
    JSON error body used by the global exception handlers.

    RequestFailedError is the exception: its body is plain text.
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable description")
    details: Dict[str, Any] = Field(default_factory=dict)
    request_id: str = Field(default="", description="Correlation ID (X-Request-ID)")
