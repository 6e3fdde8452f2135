"""Rotas HTTP da API.

Estrutura:
- routes/deeplinks/: entrada de deep links
- routes/navigation/: snapshot, abas, pop/truncate/dismiss e views
- routes/session/: login, logout, expiração e reautenticação
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
