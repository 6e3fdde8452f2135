"""
App Coordinator: raiz da árvore de coordinators.

Responsabilidades:
- Possui os seis coordinators de feature (criados uma vez, nunca destruídos)
- Seleção de aba
- Gate de autenticação com buffer de deep link pendente (último vence)
- Despacho de rotas parseadas para o coordinator da feature
- Reset global de navegação em logout e expiração de sessão

Toda mutação roda na thread que criou o coordinator.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from app.coordinators.accounts import AccountsCoordinator
from app.coordinators.auth import AuthCoordinator
from app.coordinators.cards import CardsCoordinator
from app.coordinators.home import HomeCoordinator
from app.coordinators.more import MoreCoordinator
from app.coordinators.registry import DEFAULT_REGISTRY
from app.coordinators.transfer import TransferCoordinator
from app.observability import record_deep_link, record_navigation_reset
from app.services.background_tasks import schedule_background_task
from config.logging import log_collaborator_failure
from config.settings.navigation import NavigationSettings
from fsm import AuthState, create_auth_fsm
from routing.deeplinks import ParseError, parse_deep_link
from routing.routes.features import AppTab, Feature, tab_for_feature
from utils.errors import AuthServiceError, ConfinementError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.coordinators.base import FeatureCoordinator
    from app.coordinators.registry import CoordinatorRegistry
    from app.protocols.auth_service import AuthServiceProtocol
    from fsm import AuthStateMachine
    from routing.routes.root import RootRoute
    from routing.types import NavigationItem, NavigationSnapshot

logger = logging.getLogger(__name__)

# Classe de coordinator por feature
COORDINATOR_CLASSES: dict[Feature, type[FeatureCoordinator]] = {
    Feature.HOME: HomeCoordinator,
    Feature.ACCOUNTS: AccountsCoordinator,
    Feature.TRANSFER: TransferCoordinator,
    Feature.CARDS: CardsCoordinator,
    Feature.MORE: MoreCoordinator,
    Feature.AUTH: AuthCoordinator,
}


class DeepLinkOutcome(StrEnum):
    """Desfecho de um deep link recebido."""

    DEFERRED = "deferred"
    DISPATCHED = "dispatched"
    REJECTED = "rejected"


@dataclass(frozen=True, slots=True)
class DeepLinkResult:
    """
    Resultado de handle_deep_link.

    Attributes:
        outcome: Adiado (sem sessão), despachado ou rejeitado
        route: Rota despachada (se DISPATCHED)
        error: Erro de parsing (se REJECTED)
    """

    outcome: DeepLinkOutcome
    route: RootRoute | None = None
    error: ParseError | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "outcome": self.outcome.value,
            "route_id": self.route.route_id if self.route else None,
            "error": self.error.to_log_dict() if self.error else None,
        }


@dataclass(frozen=True, slots=True)
class AppSnapshot:
    """Estado completo do app para a camada de view."""

    is_authenticated: bool
    selected_tab: AppTab
    has_pending_deep_link: bool
    session_expired_modal: NavigationItem | None
    features: dict[Feature, NavigationSnapshot] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_authenticated": self.is_authenticated,
            "selected_tab": self.selected_tab.value,
            "has_pending_deep_link": self.has_pending_deep_link,
            "session_expired_modal": (
                self.session_expired_modal.to_log_dict() if self.session_expired_modal else None
            ),
            "features": {
                feature.value: snapshot.to_dict() for feature, snapshot in self.features.items()
            },
        }


class AppCoordinator:
    """Coordinator raiz do app."""

    def __init__(
        self,
        auth_service: AuthServiceProtocol,
        *,
        settings: NavigationSettings | None = None,
        registry: CoordinatorRegistry | None = None,
    ) -> None:
        """
        Cria os coordinators de feature e inscreve no estado de auth.

        Args:
            auth_service: Fonte de estado de autenticação
            settings: Settings de navegação (defaults se None)
            registry: Arena de coordinators (usa DEFAULT_REGISTRY se None)
        """
        self._settings = settings or NavigationSettings()
        self._auth_service = auth_service
        self._registry = registry if registry is not None else DEFAULT_REGISTRY
        self._owner_thread = threading.get_ident()
        # Loop dono: publicações de auth vindas de outra thread são reagendadas nele
        try:
            self._owner_loop: asyncio.AbstractEventLoop | None = asyncio.get_running_loop()
        except RuntimeError:
            self._owner_loop = None
        self._auth_listeners: list[Callable[[bool], None]] = []
        self._key = self._registry.register(self)
        self._fsm: AuthStateMachine = create_auth_fsm(is_authenticated=False, owner="app")
        self._selected_tab = self._settings.tab
        self._pending_deep_link: str | None = None
        self._session_expired_modal: NavigationItem | None = None
        self._coordinators: dict[Feature, FeatureCoordinator] = {
            feature: cls(
                registry=self._registry,
                parent_key=self._key,
                max_stack_depth=self._settings.max_stack_depth,
            )
            for feature, cls in COORDINATOR_CLASSES.items()
        }
        self._subscription = auth_service.subscribe(self._receive_auth_state)
        logger.info(
            "app_coordinator_created",
            extra={"registry_key": self._key, "selected_tab": self._selected_tab.value},
        )

    # Estado

    @property
    def is_authenticated(self) -> bool:
        return self._fsm.is_authenticated

    @property
    def auth_state(self) -> AuthState:
        return self._fsm.current_state

    @property
    def auth_history(self) -> list[dict[str, Any]]:
        """Histórico de transições de autenticação (seguro para logs)."""
        return self._fsm.get_history_summary()

    @property
    def selected_tab(self) -> AppTab:
        return self._selected_tab

    @property
    def pending_deep_link(self) -> str | None:
        return self._pending_deep_link

    @property
    def session_expired_modal(self) -> NavigationItem | None:
        return self._session_expired_modal

    @property
    def registry_key(self) -> int:
        return self._key

    @property
    def home(self) -> HomeCoordinator:
        return self._coordinators[Feature.HOME]  # type: ignore[return-value]

    @property
    def accounts(self) -> AccountsCoordinator:
        return self._coordinators[Feature.ACCOUNTS]  # type: ignore[return-value]

    @property
    def transfer(self) -> TransferCoordinator:
        return self._coordinators[Feature.TRANSFER]  # type: ignore[return-value]

    @property
    def cards(self) -> CardsCoordinator:
        return self._coordinators[Feature.CARDS]  # type: ignore[return-value]

    @property
    def more(self) -> MoreCoordinator:
        return self._coordinators[Feature.MORE]  # type: ignore[return-value]

    @property
    def auth(self) -> AuthCoordinator:
        return self._coordinators[Feature.AUTH]  # type: ignore[return-value]

    def coordinator_for(self, feature: Feature) -> FeatureCoordinator:
        """Coordinator dono da feature."""
        return self._coordinators[feature]

    def snapshot(self) -> AppSnapshot:
        """Estado completo (abas, gate de auth e pilhas)."""
        return AppSnapshot(
            is_authenticated=self.is_authenticated,
            selected_tab=self._selected_tab,
            has_pending_deep_link=self._pending_deep_link is not None,
            session_expired_modal=self._session_expired_modal,
            features={
                feature: coordinator.snapshot()
                for feature, coordinator in self._coordinators.items()
            },
        )

    def add_auth_listener(self, listener: Callable[[bool], None]) -> Callable[[], None]:
        """
        Observa mudanças de auth vindas da fonte (login ou sign-out externo).

        Chamado na thread dona, só quando a FSM de fato transita.

        Returns:
            Função que remove o listener
        """
        self._auth_listeners.append(listener)

        def remove() -> None:
            if listener in self._auth_listeners:
                self._auth_listeners.remove(listener)

        return remove

    # Deep links

    def handle_deep_link(self, uri: str) -> DeepLinkResult:
        """
        Recebe um deep link externo.

        Sem sessão, o link fica pendente (substituindo qualquer anterior)
        e nenhuma pilha muda. Com sessão, é parseado e despachado; erro
        de parsing é registrado e o estado fica intacto.
        """
        self._ensure_owner_thread()
        if not self.is_authenticated:
            replaced = self._pending_deep_link is not None
            self._pending_deep_link = uri
            logger.info("deep_link_deferred", extra={"replaced_pending": replaced})
            record_deep_link(DeepLinkOutcome.DEFERRED.value)
            return DeepLinkResult(outcome=DeepLinkOutcome.DEFERRED)
        return self._process_deep_link(uri)

    def dispatch(self, route: RootRoute) -> None:
        """
        Seleciona a aba da feature e encaminha a sub-rota, se houver.

        Auth não tem aba: a aba atual é mantida.
        """
        self._ensure_owner_thread()
        tab = tab_for_feature(route.feature)
        if tab is not None:
            self._selected_tab = tab
        if route.route is not None:
            self._coordinators[route.feature].handle_deep_link(route.route)
        logger.info(
            "route_dispatched",
            extra={
                "feature": route.feature.value,
                "route_id": route.route_id,
                "selected_tab": self._selected_tab.value,
            },
        )

    def switch_tab(self, tab: AppTab) -> None:
        self._ensure_owner_thread()
        if tab is self._selected_tab:
            return
        logger.debug(
            "tab_switched",
            extra={"from_tab": self._selected_tab.value, "to_tab": tab.value},
        )
        self._selected_tab = tab

    # Sessão

    def logout(self) -> None:
        """
        Logout otimista.

        O logout remoto roda em background e sua falha só é registrada;
        a navegação é resetada imediatamente, sem rollback.
        """
        self._ensure_owner_thread()
        logger.info("logout_started")
        self._reset_navigation("logout")
        self._fsm.transition(AuthState.UNAUTHENTICATED, "logout")
        schedule_background_task(name="auth_logout", coroutine=self._remote_logout())
        logger.info("logout_completed_locally")

    def session_expired(self) -> None:
        """
        Expiração de sessão: reset completo e interstitial bloqueante.

        A navegação é limpa antes de apresentar o interstitial. Chamadas
        repetidas mantêm o mesmo item apresentado.
        """
        self._ensure_owner_thread()
        current = self._session_expired_modal
        self._reset_navigation("session_expired")
        self._fsm.transition(AuthState.UNAUTHENTICATED, "session_expired")
        self._session_expired_modal = self.auth.show_session_expired(current)
        logger.info(
            "session_expired_presented",
            extra={"already_presented": current is self._session_expired_modal},
        )

    def request_reauthentication(self) -> None:
        """Única ação do interstitial: fecha e leva o Auth à tela de login."""
        self._ensure_owner_thread()
        if self._session_expired_modal is None:
            return
        self._session_expired_modal = None
        self.auth.reset()
        logger.info("reauthentication_requested")

    def close(self) -> None:
        """Cancela a inscrição de auth e libera a chave na arena (teardown)."""
        self._subscription.cancel()
        self._registry.release(self._key)
        logger.info("app_coordinator_closed", extra={"registry_key": self._key})

    # Internos

    async def _remote_logout(self) -> None:
        try:
            await self._auth_service.logout()
        except AuthServiceError as exc:
            log_collaborator_failure(logger, "auth_service", "logout", exc)

    def _receive_auth_state(self, is_authenticated: bool) -> None:
        """Entrada do stream de auth.

        Publicação em outra thread é reagendada no loop dono. Sem loop
        dono, a violação de confinamento propaga para quem publicou.
        """
        if threading.get_ident() == self._owner_thread or self._owner_loop is None:
            self._on_auth_changed(is_authenticated)
            return
        logger.debug(
            "auth_state_marshalled",
            extra={"is_authenticated": is_authenticated, "registry_key": self._key},
        )
        self._owner_loop.call_soon_threadsafe(self._apply_marshalled_auth_state, is_authenticated)

    def _apply_marshalled_auth_state(self, is_authenticated: bool) -> None:
        # close() pode ter rodado entre a publicação e o callback
        if not self._subscription.active:
            return
        self._on_auth_changed(is_authenticated)

    def _on_auth_changed(self, is_authenticated: bool) -> None:
        self._ensure_owner_thread()
        if not is_authenticated:
            result = self._fsm.transition(AuthState.UNAUTHENTICATED, "auth_source_signed_out")
            if result.success:
                self._notify_auth_listeners(False)
            return

        result = self._fsm.transition(AuthState.AUTHENTICATED, "login_succeeded")
        if not result.success:
            return

        self._notify_auth_listeners(True)
        self._session_expired_modal = None
        pending, self._pending_deep_link = self._pending_deep_link, None
        logger.info("auth_gate_opened", extra={"has_pending_deep_link": pending is not None})
        if pending is not None:
            self._process_deep_link(pending)

    def _notify_auth_listeners(self, is_authenticated: bool) -> None:
        for listener in list(self._auth_listeners):
            try:
                listener(is_authenticated)
            except Exception as exc:
                logger.error(
                    "auth_listener_failed",
                    extra={"is_authenticated": is_authenticated, "error_type": type(exc).__name__},
                )

    def _process_deep_link(self, uri: str) -> DeepLinkResult:
        result = parse_deep_link(uri, scheme=self._settings.deep_link_scheme)
        if not result.success or result.route is None:
            error = result.error
            logger.warning(
                "deep_link_parse_failed",
                extra=error.to_log_dict() if error else {},
            )
            record_deep_link(
                DeepLinkOutcome.REJECTED.value,
                error_kind=error.kind.value if error else None,
            )
            return DeepLinkResult(outcome=DeepLinkOutcome.REJECTED, error=error)

        self.dispatch(result.route)
        record_deep_link(DeepLinkOutcome.DISPATCHED.value, feature=result.route.feature.value)
        return DeepLinkResult(outcome=DeepLinkOutcome.DISPATCHED, route=result.route)

    def _reset_navigation(self, reason: str) -> None:
        for coordinator in self._coordinators.values():
            coordinator.reset()
        self._selected_tab = self._settings.tab
        self._pending_deep_link = None
        logger.info(
            "navigation_reset",
            extra={"reason": reason, "selected_tab": self._selected_tab.value},
        )
        record_navigation_reset(reason, len(self._coordinators))

    def _ensure_owner_thread(self) -> None:
        current = threading.get_ident()
        if current != self._owner_thread:
            raise ConfinementError(type(self).__name__, self._owner_thread, current)
