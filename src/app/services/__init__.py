"""Serviços de aplicação.

Colaboradores em memória do núcleo de navegação.
"""

from app.services.auth_service import InMemoryAuthService
from app.services.auth_state import AuthStateStream, Subscription
from app.services.background_tasks import (
    active_task_count,
    drain_background_tasks,
    schedule_background_task,
)

__all__ = [
    "AuthStateStream",
    "InMemoryAuthService",
    "Subscription",
    "active_task_count",
    "drain_background_tasks",
    "schedule_background_task",
]
