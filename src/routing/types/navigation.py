"""
Tipos de estado de navegação.

NavigationItem envolve uma rota de feature com identidade própria
(usada para diff de listas e chave de apresentação modal). ViewHandle
é o pedido de construção de view entregue à camada de UI.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

from routing.routes.base import FeatureRoute
from routing.routes.features import Feature


def _new_item_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True, slots=True, eq=False)
class NavigationItem:
    """
    Item da pilha de navegação ou de um slot modal.

    Igualdade e hash usam apenas item_id: dois itens com a mesma rota
    continuam distintos (a mesma tela pode aparecer duas vezes na pilha).

    Attributes:
        route: Rota envolvida (de qualquer feature)
        item_id: Identidade estável do item
    """

    route: FeatureRoute
    item_id: str = field(default_factory=_new_item_id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NavigationItem):
            return NotImplemented
        return self.item_id == other.item_id

    def __hash__(self) -> int:
        return hash(self.item_id)

    @property
    def feature(self) -> Feature:
        """Feature dona da rota."""
        return self.route.feature

    def to_log_dict(self) -> dict[str, Any]:
        """Representação segura para logs e respostas."""
        return {
            "item_id": self.item_id,
            "route_id": self.route.route_id,
            "route": type(self.route).__name__,
            "params": self.route.params(),
        }


@dataclass(frozen=True, slots=True)
class ViewHandle:
    """
    Pedido de construção de view.

    Attributes:
        feature: Feature dona da view
        view: Nome da view (ex: account_detail)
        params: Parâmetros da rota
    """

    feature: Feature
    view: str
    params: dict[str, Any] = field(default_factory=dict)

    def __hash__(self) -> int:
        return hash((self.feature, self.view, tuple(sorted(self.params.items()))))


@dataclass(frozen=True, slots=True)
class NavigationSnapshot:
    """
    Cópia imutável do estado de um coordinator.

    Attributes:
        feature: Feature do coordinator
        stack: Pilha (índice 0 = mais próximo da raiz)
        sheet: Item apresentado como sheet
        full_screen: Item apresentado em tela cheia
        revision: Contador de mudanças publicadas
    """

    feature: Feature
    stack: tuple[NavigationItem, ...] = ()
    sheet: NavigationItem | None = None
    full_screen: NavigationItem | None = None
    revision: int = 0

    @property
    def routes(self) -> tuple[FeatureRoute, ...]:
        """Rotas da pilha, na ordem visual."""
        return tuple(item.route for item in self.stack)

    @property
    def top(self) -> NavigationItem | None:
        """Item visível (topo da pilha)."""
        return self.stack[-1] if self.stack else None

    def to_dict(self) -> dict[str, Any]:
        """Serialização para respostas HTTP e logs."""
        return {
            "feature": self.feature.value,
            "stack": [item.to_log_dict() for item in self.stack],
            "sheet": self.sheet.to_log_dict() if self.sheet else None,
            "full_screen": self.full_screen.to_log_dict() if self.full_screen else None,
            "revision": self.revision,
        }
