"""
Health check endpoints.
"""

import time

import aiosqlite
from fastapi import APIRouter, Depends

from src.api.dependencies import get_app_settings
from src.application.dto.responses import ComponentHealthResponse, HealthResponse
from src.config import Settings
from src.core.exceptions import StorageError

router = APIRouter(prefix="/api/health", tags=["health"])

# Track startup time
_start_time = time.time()


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """
    Basic health check.

    Returns service status and uptime.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
    )


@router.get("/db", response_model=HealthResponse)
async def db_health(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """
    Database health check.

    Tests SQLite connectivity and reports the applied schema version.
    """
    from src.infrastructure.storage.sqlite import get_pool
    from src.infrastructure.storage.sqlite.migrations import get_current_version

    schema_version = None

    try:
        pool = await get_pool()
        start = time.time()
        async with pool.acquire() as conn:
            await conn.execute("SELECT 1")
            schema_version = await get_current_version(conn)
        latency = (time.time() - start) * 1000

        db_status = ComponentHealthResponse(
            name="sqlite",
            available=True,
            latency_ms=latency,
        )

    except (aiosqlite.Error, OSError, StorageError) as e:
        db_status = ComponentHealthResponse(
            name="sqlite",
            available=False,
            error=str(e),
        )

    return HealthResponse(
        status="healthy" if db_status.available else "unhealthy",
        version=settings.app_version,
        uptime_seconds=time.time() - _start_time,
        database=db_status,
        schema_version=schema_version,
    )
