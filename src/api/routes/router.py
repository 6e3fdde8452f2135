"""Agregador de rotas: registra todos os routers da API.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.deeplinks.router import router as deeplinks_router
from api.routes.health.router import router as health_router
from api.routes.navigation.router import router as navigation_router
from api.routes.session.router import router as session_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(deeplinks_router, prefix="/deeplinks", tags=["deeplinks"])
    api_router.include_router(navigation_router, prefix="/navigation", tags=["navigation"])
    api_router.include_router(session_router, prefix="/session", tags=["session"])

    return api_router
