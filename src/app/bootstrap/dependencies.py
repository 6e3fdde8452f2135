"""Factories do núcleo de navegação: criação e wiring.

Centraliza a criação do App Coordinator, do serviço de auth e do
monitor de inatividade a partir das settings de ambiente.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.coordinators import AppCoordinator
from app.services import InMemoryAuthService
from app.sessions import SessionTimeoutMonitor
from config.settings import get_navigation_settings, get_session_settings

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.coordinators import CoordinatorRegistry
    from app.protocols.auth_service import AuthServiceProtocol
    from config.settings import NavigationSettings, SessionSettings

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Coordinator
# ──────────────────────────────────────────────────────────────────────────────


def create_auth_service() -> AuthServiceProtocol:
    """Cria o serviço de auth (em memória; não há backend remoto)."""
    return InMemoryAuthService()


def build_app_coordinator(
    auth_service: AuthServiceProtocol | None = None,
    *,
    settings: NavigationSettings | None = None,
    registry: CoordinatorRegistry | None = None,
) -> AppCoordinator:
    """Cria o App Coordinator com as settings de navegação do ambiente.

    Args:
        auth_service: Fonte de auth (cria InMemoryAuthService se None)
        settings: Settings de navegação (lidas do ambiente se None)
        registry: Arena de coordinators (padrão do processo se None)

    Returns:
        AppCoordinator inscrito no estado de autenticação
    """
    return AppCoordinator(
        auth_service or create_auth_service(),
        settings=settings or get_navigation_settings(),
        registry=registry,
    )


# ──────────────────────────────────────────────────────────────────────────────
# Sessão
# ──────────────────────────────────────────────────────────────────────────────


def build_session_expiry_handler(
    coordinator: AppCoordinator,
    auth_service: AuthServiceProtocol,
) -> Callable[[], None]:
    """Cria o handler de expiração de sessão.

    A navegação é resetada primeiro (gatilho session_expired na FSM);
    em seguida a fonte de auth é marcada como expirada, o que chega ao
    coordinator como transição reflexiva e é ignorado.
    """

    def handle_session_expired() -> None:
        coordinator.session_expired()
        auth_service.expire_session()

    return handle_session_expired


def build_session_monitor(
    on_expired: Callable[[], None],
    settings: SessionSettings | None = None,
) -> SessionTimeoutMonitor | None:
    """Cria o monitor de inatividade (None se desabilitado)."""
    session_settings = settings or get_session_settings()
    if not session_settings.monitor_enabled:
        logger.info("session_monitor_disabled")
        return None
    return SessionTimeoutMonitor(session_settings.timeout_seconds, on_expired)


@dataclass(slots=True)
class NavigationRuntime:
    """Objetos de processo montados pelo composition root."""

    auth_service: AuthServiceProtocol
    coordinator: AppCoordinator
    expire_session: Callable[[], None]
    session_monitor: SessionTimeoutMonitor | None = None

    def close(self) -> None:
        if self.session_monitor is not None:
            self.session_monitor.stop()
        self.coordinator.close()


def bind_monitor_to_auth_source(
    coordinator: AppCoordinator,
    monitor: SessionTimeoutMonitor,
) -> Callable[[], None]:
    """Para o monitor quando a fonte de auth encerra a sessão.

    Returns:
        Função que desfaz o vínculo
    """

    def handle_auth_changed(is_authenticated: bool) -> None:
        if not is_authenticated:
            monitor.stop()

    return coordinator.add_auth_listener(handle_auth_changed)


def build_navigation_runtime(
    auth_service: AuthServiceProtocol | None = None,
) -> NavigationRuntime:
    """Monta serviço de auth, App Coordinator e monitor de sessão."""
    service = auth_service or create_auth_service()
    coordinator = build_app_coordinator(service)
    expire_session = build_session_expiry_handler(coordinator, service)
    monitor = build_session_monitor(expire_session)
    if monitor is not None:
        bind_monitor_to_auth_source(coordinator, monitor)
    return NavigationRuntime(
        auth_service=service,
        coordinator=coordinator,
        expire_session=expire_session,
        session_monitor=monitor,
    )
