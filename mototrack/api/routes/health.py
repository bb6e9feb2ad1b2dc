"""Operational endpoints: health check and Prometheus metrics."""
import time

from fastapi import APIRouter, Depends, status
from fastapi.responses import Response
from pydantic import BaseModel, Field
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from mototrack.config.settings import get_settings
from mototrack.core.logging import get_logger
from mototrack.core.metrics import render_metrics
from mototrack.db.database import get_db

logger = get_logger(__name__)
router = APIRouter()
settings = get_settings()


class HealthCheckResponse(BaseModel):
    status: str = Field(..., description="healthy or unhealthy")
    app: str
    version: str
    database: dict


async def check_database_health(db: AsyncSession) -> tuple[bool, float]:
    """Run ``SELECT 1`` and return (healthy, response time in ms)."""
    try:
        start_time = time.time()
        await db.execute(text("SELECT 1"))
        return True, (time.time() - start_time) * 1000
    except SQLAlchemyError as e:
        logger.error("database_health_check_failed", error=str(e))
        return False, 0.0


@router.get("/health", response_model=HealthCheckResponse)
async def health_check(response: Response, db: AsyncSession = Depends(get_db)):
    healthy, response_time = await check_database_health(db)
    if not healthy:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthCheckResponse(
        status="healthy" if healthy else "unhealthy",
        app=settings.app_name,
        version=settings.app_version,
        database={
            "healthy": healthy,
            "response_time_ms": round(response_time, 2),
        },
    )


@router.get("/metrics", include_in_schema=False)
async def prometheus_metrics():
    return Response(
        content=render_metrics(),
        media_type="text/plain; version=0.0.4; charset=utf-8",
    )
