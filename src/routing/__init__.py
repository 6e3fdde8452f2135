"""
Módulo routing: rotas, deep links e reconstrução de pilha.

Camada pura (sem estado) sobre a qual os coordinators operam.

Estrutura:
    - routes/: Features, abas e variantes de rota por feature
    - deeplinks/: Parser de URIs bankapp:// para RootRoute
    - types/: NavigationItem, ViewHandle, NavigationSnapshot
    - ancestry/: Tabelas de reconstrução de pilha e de views
"""

from routing.ancestry import (
    replay_chain,
    validate_replay_tables,
    validate_view_tables,
    view_name,
)
from routing.deeplinks import (
    DEFAULT_SCHEME,
    ParseError,
    ParseErrorKind,
    ParseResult,
    parse_deep_link,
)
from routing.routes import (
    DEFAULT_TAB,
    ROOT_ROUTES,
    AppTab,
    Feature,
    FeatureRoute,
    RootRoute,
    feature_for_tab,
    tab_for_feature,
)
from routing.types import NavigationItem, NavigationSnapshot, ViewHandle

__all__ = [
    "DEFAULT_SCHEME",
    "DEFAULT_TAB",
    "ROOT_ROUTES",
    "AppTab",
    "Feature",
    "FeatureRoute",
    "NavigationItem",
    "NavigationSnapshot",
    "ParseError",
    "ParseErrorKind",
    "ParseResult",
    "RootRoute",
    "ViewHandle",
    "feature_for_tab",
    "parse_deep_link",
    "replay_chain",
    "tab_for_feature",
    "validate_replay_tables",
    "validate_view_tables",
    "view_name",
]
