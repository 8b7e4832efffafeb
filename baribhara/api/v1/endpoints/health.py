"""Health check endpoint. No auth; used for liveness and readiness probes."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from baribhara.infrastructure.persistence import database
from baribhara.schemas.health import HealthResponse

router = APIRouter()


@router.get(
    "",
    response_model=HealthResponse,
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
)
async def health_check(request: Request) -> HealthResponse | JSONResponse:
    """Report database, cache and event publisher availability.

    200 while the database answers (cache and events degrade gracefully);
    503 when it does not.
    """
    cache = getattr(request.app.state, "cache", None)
    publisher = getattr(request.app.state, "event_publisher", None)
    result = HealthResponse(
        database=await database.ping(),
        cache=bool(cache and cache.is_available()),
        events=bool(publisher and publisher.is_available()),
    )
    if not (result.database and result.cache and result.events):
        result.status = "degraded"
    if not result.database:
        return JSONResponse(status_code=503, content=result.model_dump())
    return result
