"""Endpoints de health check."""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness: verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness: o runtime de navegação foi montado pelo lifespan."""
    runtime = getattr(request.app.state, "navigation", None)
    ready = runtime is not None
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "app_coordinator": "ok" if ready else "not_configured",
            "session_monitor": (
                "running"
                if ready and runtime.session_monitor is not None and runtime.session_monitor.running
                else "idle"
            ),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)
