"""
Notes API — Welcome and Health Check Routes
=============================================

What:  GET / (welcome message) and GET /health (dependency probe).
Why:   Container health checks and load balancers need a cheap endpoint that
       says whether the service can actually reach its database.

Status levels:
    - healthy:   Database answers SELECT 1 (HTTP 200)
    - unhealthy: Database unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Response

from notes_api import __version__
from notes_api.database import check_connection
from notes_api.exceptions import StoreError
from notes_api.schemas.note import HealthResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

WELCOME_MESSAGE = "Welcome to the Notes API. Take notes quickly and keep track of them."

_start_time = time.time()


@router.get("/", response_model=MessageResponse, summary="Welcome message")
async def welcome() -> MessageResponse:
    return MessageResponse(message=WELCOME_MESSAGE)


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
    summary="Service health check",
)
async def health_check(response: Response) -> HealthResponse:
    db_status = "connected"
    overall = "healthy"

    try:
        await check_connection()
    except StoreError as e:
        db_status = "disconnected"
        overall = "unhealthy"
        response.status_code = 503
        logger.warning("Health check: database unreachable: %s", e.context.get("detail", e.message))

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
