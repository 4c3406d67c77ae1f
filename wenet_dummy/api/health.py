"""
Health and metrics of the component.
"""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from ..dependencies import get_engine
from ..observability import HealthStatus

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(engine=Depends(get_engine)) -> JSONResponse:
    """Reply 200 when the component is healthy, 503 otherwise."""
    health_status = await engine.get_health_status()
    status_code = (
        status.HTTP_200_OK
        if health_status["status"] == HealthStatus.HEALTHY.value
        else status.HTTP_503_SERVICE_UNAVAILABLE
    )
    return JSONResponse(status_code=status_code, content=health_status)


@router.get("/metrics")
async def metrics(engine=Depends(get_engine)) -> dict:
    return engine.get_metrics()
