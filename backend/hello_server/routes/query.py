"""
Hello Server — Query-String Route
===================================

GET /query?name=ada&age=36&tag=math&tag=engines

Extraction is FastAPI's: `age` must parse as a non-negative int and `tag`
may repeat. Type errors get the framework's 422; a name that is only
whitespace is rejected with ValidationError (400).
"""

from typing import List, Optional

from fastapi import APIRouter, Query

from hello_server.exceptions import ValidationError
from hello_server.schemas.api import ErrorResponse, QueryEcho

router = APIRouter(tags=["Query"])


@router.get(
    "/query",
    response_model=QueryEcho,
    responses={400: {"description": "Blank name", "model": ErrorResponse}},
    summary="Parse and echo query parameters",
)
async def parse_query(
    name: str = Query(description="Who is asking"),
    age: Optional[int] = Query(default=None, ge=0, description="Optional age in years"),
    tag: List[str] = Query(default=[], description="Repeatable tag"),
) -> QueryEcho:
    if not name.strip():
        raise ValidationError(message="Query parameter 'name' must not be blank", field="name")
    return QueryEcho(name=name, age=age, tags=tag)
