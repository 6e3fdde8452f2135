"""Dependências FastAPI compartilhadas pelos routers."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from app.bootstrap import NavigationRuntime


async def get_runtime(request: Request) -> NavigationRuntime:
    """Retorna o runtime de navegação montado no lifespan.

    Leituras (snapshot, views) usam esta dependência e não contam como
    atividade. Roda no event loop, thread dona do App Coordinator.

    Raises:
        HTTPException: 503 se o lifespan ainda não montou o runtime.
    """
    runtime = getattr(request.app.state, "navigation", None)
    if runtime is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="navigation_runtime_not_ready",
        )
    return runtime


async def get_active_runtime(request: Request) -> NavigationRuntime:
    """Como get_runtime, registrando o comando como atividade do usuário."""
    runtime = await get_runtime(request)
    if runtime.session_monitor is not None:
        runtime.session_monitor.touch()
    return runtime
