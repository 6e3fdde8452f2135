"""Endpoints de sessão: login, logout, expiração e reautenticação."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from api.routes.dependencies import get_active_runtime
from api.routes.schemas import LoginRequest, SessionResponse
from app.bootstrap import NavigationRuntime

router = APIRouter()

Runtime = Annotated[NavigationRuntime, Depends(get_active_runtime)]


def _session_response(runtime: NavigationRuntime) -> SessionResponse:
    return SessionResponse(
        is_authenticated=runtime.coordinator.is_authenticated,
        navigation=runtime.coordinator.snapshot().to_dict(),
    )


@router.post("/login", response_model=SessionResponse)
async def login(body: LoginRequest, runtime: Runtime) -> SessionResponse:
    """Autentica; um deep link pendente é despachado ao abrir o gate."""
    authenticated = await runtime.auth_service.login(body.username, body.password)
    if not authenticated:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid_credentials",
        )
    if runtime.session_monitor is not None:
        runtime.session_monitor.start()
    return _session_response(runtime)


@router.post("/logout", response_model=SessionResponse)
async def logout(runtime: Runtime) -> SessionResponse:
    if runtime.session_monitor is not None:
        runtime.session_monitor.stop()
    runtime.coordinator.logout()
    return _session_response(runtime)


@router.post("/expired", response_model=SessionResponse)
async def session_expired(runtime: Runtime) -> SessionResponse:
    """Força expiração (ex: 401 de um backend) e apresenta o interstitial."""
    if runtime.session_monitor is not None:
        runtime.session_monitor.stop()
    runtime.expire_session()
    return _session_response(runtime)


@router.post("/reauthenticate", response_model=SessionResponse)
async def reauthenticate(runtime: Runtime) -> SessionResponse:
    runtime.coordinator.request_reauthentication()
    return _session_response(runtime)
