"""
Engine genérica de coordinator de feature.

Cada feature (Home, Accounts, Transfer, Cards, More, Auth) é uma
subclasse que só define `feature` e seus métodos cross-feature. Pilha,
slots modais, reconstrução por deep link e construção de views são
comuns e dirigidos pelas tabelas de routing.ancestry.

Toda mutação é confinada à thread que criou o coordinator.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING, ClassVar

from config.settings.navigation import DEFAULT_MAX_STACK_DEPTH
from routing.ancestry import replay_chain, view_name
from routing.routes.root import ROOT_ROUTES
from routing.types import NavigationItem, NavigationSnapshot, ViewHandle
from utils.errors import ConfinementError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.coordinators.app_coordinator import AppCoordinator
    from app.coordinators.registry import CoordinatorRegistry
    from routing.routes.base import FeatureRoute
    from routing.routes.features import AppTab, Feature

logger = logging.getLogger(__name__)


class FeatureCoordinator:
    """
    Dono da pilha de navegação e dos slots modais de uma feature.

    Attributes:
        navigation_stack: Itens na ordem visual (0 = mais próximo da raiz)
        sheet: Item apresentado como sheet
        full_screen: Item apresentado em tela cheia
        revision: Incrementado a cada mudança publicada
    """

    feature: ClassVar[Feature]

    def __init__(
        self,
        *,
        registry: CoordinatorRegistry | None = None,
        parent_key: int | None = None,
        max_stack_depth: int = DEFAULT_MAX_STACK_DEPTH,
    ) -> None:
        """
        Inicializa o coordinator.

        Args:
            registry: Arena onde o pai está registrado
            parent_key: Chave do App Coordinator na arena
            max_stack_depth: Limite de itens na pilha
        """
        if max_stack_depth < 1:
            raise ValueError(f"max_stack_depth deve ser >= 1, recebido: {max_stack_depth}")
        self._registry = registry
        self._parent_key = parent_key
        self._max_stack_depth = max_stack_depth
        self._owner_thread = threading.get_ident()
        self._stack: list[NavigationItem] = []
        self._sheet: NavigationItem | None = None
        self._full_screen: NavigationItem | None = None
        self._revision = 0
        self._listeners: list[Callable[[NavigationSnapshot], None]] = []

    # Estado

    @property
    def navigation_stack(self) -> tuple[NavigationItem, ...]:
        return tuple(self._stack)

    @property
    def routes(self) -> tuple[FeatureRoute, ...]:
        """Rotas da pilha na ordem visual."""
        return tuple(item.route for item in self._stack)

    @property
    def sheet(self) -> NavigationItem | None:
        return self._sheet

    @property
    def full_screen(self) -> NavigationItem | None:
        return self._full_screen

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def max_stack_depth(self) -> int:
        return self._max_stack_depth

    @property
    def parent(self) -> AppCoordinator | None:
        """App Coordinator resolvido pela arena (None se liberado)."""
        if self._registry is None:
            return None
        return self._registry.resolve(self._parent_key)

    def snapshot(self) -> NavigationSnapshot:
        """Cópia imutável do estado atual."""
        return NavigationSnapshot(
            feature=self.feature,
            stack=tuple(self._stack),
            sheet=self._sheet,
            full_screen=self._full_screen,
            revision=self._revision,
        )

    def add_listener(
        self, listener: Callable[[NavigationSnapshot], None]
    ) -> Callable[[], None]:
        """
        Registra observador de mudanças.

        O listener recebe o snapshot final de cada operação pública que
        alterou o estado (nunca estados intermediários).

        Returns:
            Função que remove o listener
        """
        self._listeners.append(listener)

        def remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return remove

    # Pilha

    def push(self, route: FeatureRoute) -> bool:
        """
        Empilha a rota.

        Returns:
            True se empilhou; False se a rota é de outra feature ou a
            pilha atingiu max_stack_depth
        """
        self._ensure_owner_thread()
        before = self._state_key()
        pushed = self._append(route)
        self._publish_if_changed(before)
        return pushed

    def pop(self) -> NavigationItem | None:
        """Remove o topo; no-op com pilha vazia."""
        self._ensure_owner_thread()
        if not self._stack:
            logger.debug("navigation_pop_empty", extra={"feature": self.feature.value})
            return None
        before = self._state_key()
        item = self._stack.pop()
        self._publish_if_changed(before)
        return item

    def pop_to_root(self) -> None:
        """Esvazia a pilha (idempotente)."""
        self._ensure_owner_thread()
        before = self._state_key()
        self._stack.clear()
        self._publish_if_changed(before)

    def truncate(self, length: int) -> None:
        """
        Mantém apenas o prefixo de `length` itens.

        Ponto de entrada da camada de view para back-navigation. No-op
        se length >= tamanho da pilha; negativo esvazia.
        """
        self._ensure_owner_thread()
        if length >= len(self._stack):
            return
        before = self._state_key()
        del self._stack[max(length, 0):]
        self._publish_if_changed(before)

    # Modais

    def present(self, route: FeatureRoute, full_screen: bool = False) -> bool:
        """
        Apresenta a rota no slot correspondente, substituindo o anterior.

        Returns:
            True se apresentou; False se a rota é de outra feature
        """
        self._ensure_owner_thread()
        if not self._owns(route, "present"):
            return False
        before = self._state_key()
        item = NavigationItem(route)
        if full_screen:
            self._full_screen = item
        else:
            self._sheet = item
        logger.debug(
            "navigation_present",
            extra={
                "feature": self.feature.value,
                "route_id": route.route_id,
                "full_screen": full_screen,
            },
        )
        self._publish_if_changed(before)
        return True

    def dismiss(self) -> None:
        """Limpa os dois slots modais."""
        self._ensure_owner_thread()
        before = self._state_key()
        self._sheet = None
        self._full_screen = None
        self._publish_if_changed(before)

    def reset(self) -> None:
        """Esvazia pilha e slots modais numa única mudança publicada."""
        self._ensure_owner_thread()
        before = self._state_key()
        self._stack.clear()
        self._sheet = None
        self._full_screen = None
        self._publish_if_changed(before)

    # Deep link

    def handle_deep_link(self, route: FeatureRoute) -> bool:
        """
        Substitui a pilha pela cadeia de ancestrais da rota.

        Sempre esvazia a pilha antes; observadores veem apenas o estado
        final.

        Returns:
            True se a rota pertence à feature e foi reconstruída
        """
        self._ensure_owner_thread()
        if not self._owns(route, "handle_deep_link"):
            return False
        before = self._state_key()
        self._stack.clear()
        for step in replay_chain(route):
            self._append(step)
        logger.info(
            "navigation_deep_link_handled",
            extra={
                "feature": self.feature.value,
                "route_id": route.route_id,
                "stack_depth": len(self._stack),
            },
        )
        self._publish_if_changed(before)
        return True

    # Views

    def build(self, route: FeatureRoute) -> ViewHandle | None:
        """Mapeia a rota para um pedido de view (None para rota de outra feature)."""
        if not self._owns(route, "build"):
            return None
        return ViewHandle(feature=self.feature, view=view_name(route), params=route.params())

    def root_view(self) -> ViewHandle:
        """Pedido de view da tela raiz da feature."""
        root = ROOT_ROUTES[self.feature]
        return ViewHandle(feature=self.feature, view=view_name(root), params=root.params())

    # Cross-feature

    def _navigate_across(self, tab: AppTab, route: FeatureRoute | None = None) -> bool:
        """
        Troca de aba via pai e, opcionalmente, empilha no coordinator alvo.

        Não passa por handle_deep_link: a pilha alvo não é limpa.
        """
        parent = self.parent
        if parent is None:
            logger.debug(
                "cross_feature_parent_unavailable",
                extra={"feature": self.feature.value, "target_tab": tab.value},
            )
            return False
        parent.switch_tab(tab)
        if route is not None:
            parent.coordinator_for(route.feature).push(route)
        return True

    # Internos

    def _append(self, route: FeatureRoute) -> bool:
        if not self._owns(route, "push"):
            return False
        if len(self._stack) >= self._max_stack_depth:
            logger.warning(
                "navigation_stack_depth_exceeded",
                extra={
                    "feature": self.feature.value,
                    "route_id": route.route_id,
                    "max_stack_depth": self._max_stack_depth,
                },
            )
            return False
        self._stack.append(NavigationItem(route))
        logger.debug(
            "navigation_push",
            extra={
                "feature": self.feature.value,
                "route_id": route.route_id,
                "stack_depth": len(self._stack),
            },
        )
        return True

    def _owns(self, route: FeatureRoute, operation: str) -> bool:
        if route.feature is self.feature:
            return True
        logger.warning(
            "navigation_foreign_route_ignored",
            extra={
                "feature": self.feature.value,
                "route_feature": route.feature.value,
                "route_id": route.route_id,
                "operation": operation,
            },
        )
        return False

    def _ensure_owner_thread(self) -> None:
        current = threading.get_ident()
        if current != self._owner_thread:
            raise ConfinementError(type(self).__name__, self._owner_thread, current)

    def _state_key(self) -> tuple[object, ...]:
        return (
            tuple(item.item_id for item in self._stack),
            self._sheet.item_id if self._sheet else None,
            self._full_screen.item_id if self._full_screen else None,
        )

    def _publish_if_changed(self, before: tuple[object, ...]) -> None:
        if self._state_key() == before:
            return
        self._revision += 1
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception as exc:
                logger.error(
                    "navigation_listener_failed",
                    extra={"feature": self.feature.value, "error_type": type(exc).__name__},
                )
