"""
Hello Server — JSON Record Routes
===================================

What:  JSON body extraction and JSON responses.

POST /record/create
    Body CreateRecord → RecordCreated with the fixed demo id and a UTC
    timestamp. Nothing is stored.

POST /try
    Body TryBody. {"success": true} is echoed back with 200.
    {"success": false} raises RequestFailedError, which the global handler
    renders as 400 with the plain-text body "request failed".
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter

from hello_server.exceptions import RequestFailedError
from hello_server.schemas.api import CreateRecord, RecordCreated, TryBody

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Records"])

DEMO_RECORD_ID = 1234


@router.post(
    "/record/create",
    response_model=RecordCreated,
    summary="Create a record",
)
async def create_record(payload: CreateRecord) -> RecordCreated:
    record = RecordCreated(
        id=DEMO_RECORD_ID,
        name=payload.name,
        ts=datetime.now(timezone.utc),
    )
    logger.debug("Created record %d for %r", record.id, record.name)
    return record


@router.post(
    "/try",
    response_model=TryBody,
    responses={400: {"description": "Rejected request", "content": {"text/plain": {}}}},
    summary="Succeed or fail on demand",
)
async def try_request(payload: TryBody) -> TryBody:
    """
    Echo the body when `success` is true, otherwise fail the request.

    The failure is an exception, not a hand-built response: it travels the
    framework's error pathway and is converted by the RequestFailedError
    handler registered in main.py.
    """
    if not payload.success:
        raise RequestFailedError()
    return payload
