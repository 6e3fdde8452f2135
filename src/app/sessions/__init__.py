"""Módulo de sessão autenticada.

Exporta o monitor de inatividade que dispara a expiração de sessão.
"""

from app.sessions.timeout import SessionTimeoutMonitor

__all__ = [
    "SessionTimeoutMonitor",
]
