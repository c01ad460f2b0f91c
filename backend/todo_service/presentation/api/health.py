"""
Health Router - liveness and readiness probes.

/health       all checks (database)
/health/ready ready to take traffic (database)
/health/live  process is up; no checks
/             plain-text notice, the API itself is gRPC
"""

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, PlainTextResponse
from dishka.integrations.fastapi import FromDishka, inject

from todo_service.infrastructure.persistence.database import DatabaseSessionManager

ROOT_MESSAGE = "Communication with gRPC endpoints must be made through a gRPC client."

router = APIRouter(tags=["health"])


async def _database_report(db: DatabaseSessionManager) -> JSONResponse:
    healthy = await db.health_check()
    state = "Healthy" if healthy else "Unhealthy"
    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": state, "checks": {"database": state}},
    )


@router.get("/", response_class=PlainTextResponse)
async def root():
    return ROOT_MESSAGE


@router.get("/health")
@inject
async def health(db: FromDishka[DatabaseSessionManager]):
    return await _database_report(db)


@router.get("/health/ready")
@inject
async def ready(db: FromDishka[DatabaseSessionManager]):
    return await _database_report(db)


@router.get("/health/live")
async def live():
    return {"status": "Healthy"}
