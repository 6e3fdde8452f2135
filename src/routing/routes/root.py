"""
Rota raiz (RootRoute): união das seis features.

Cada RootRoute seleciona uma feature e, opcionalmente, uma rota dentro
dela. Sem sub-rota, a navegação apenas aterrissa na raiz da feature.
"""

from __future__ import annotations

from dataclasses import dataclass

from routing.routes.accounts import ACCOUNTS_ROUTES, AccountsList
from routing.routes.auth import AUTH_ROUTES, Login
from routing.routes.base import FeatureRoute
from routing.routes.cards import CARDS_ROUTES, CardsList
from routing.routes.features import Feature
from routing.routes.home import HOME_ROUTES, HomeDashboard
from routing.routes.more import MORE_ROUTES, MoreMenu
from routing.routes.transfer import TRANSFER_ROUTES, TransferHome

# Todas as variantes por feature (usado para checagens de exaustividade)
ROUTES_BY_FEATURE: dict[Feature, tuple[type[FeatureRoute], ...]] = {
    Feature.HOME: HOME_ROUTES,
    Feature.ACCOUNTS: ACCOUNTS_ROUTES,
    Feature.TRANSFER: TRANSFER_ROUTES,
    Feature.CARDS: CARDS_ROUTES,
    Feature.MORE: MORE_ROUTES,
    Feature.AUTH: AUTH_ROUTES,
}

# Tela raiz de cada feature (base da pilha de navegação, nunca empilhada)
ROOT_ROUTES: dict[Feature, FeatureRoute] = {
    Feature.HOME: HomeDashboard(),
    Feature.ACCOUNTS: AccountsList(),
    Feature.TRANSFER: TransferHome(),
    Feature.CARDS: CardsList(),
    Feature.MORE: MoreMenu(),
    Feature.AUTH: Login(),
}


@dataclass(frozen=True, slots=True)
class RootRoute:
    """
    Destino de navegação no nível do app.

    Attributes:
        feature: Feature de destino (define a aba)
        route: Rota dentro da feature (None = raiz da feature)
    """

    feature: Feature
    route: FeatureRoute | None = None

    def __post_init__(self) -> None:
        """Valida que a sub-rota pertence à feature."""
        if self.route is not None and self.route.feature is not self.feature:
            raise ValueError(
                f"Rota {type(self.route).__name__} não pertence à feature {self.feature.value}"
            )

    @property
    def route_id(self) -> str:
        """Identificador estável (igual ao da sub-rota, ou app-<feature>)."""
        if self.route is None:
            return f"app-{self.feature.value}"
        return self.route.route_id

    @property
    def path(self) -> str | None:
        """Caminho canônico do deep link (None se a sub-rota não é linkável)."""
        if self.route is None:
            return self.feature.value
        return self.route.path

    def to_uri(self, scheme: str = "bankapp") -> str | None:
        """
        Renderiza o deep link canônico da rota.

        Rotas raiz de feature (ex: AccountsList) renderizam o caminho da
        feature; ao serem parseadas voltam como RootRoute(feature, None).

        Args:
            scheme: Scheme registrado do app

        Returns:
            URI (ex: bankapp://accounts/ACC1) ou None se não linkável
        """
        path = self.path
        if path is None:
            return None
        return f"{scheme}://{path}"


def is_root_route(route: FeatureRoute) -> bool:
    """Verifica se a rota é a tela raiz da sua feature."""
    return ROOT_ROUTES[route.feature] == route
