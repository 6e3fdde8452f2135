"""
Features e abas do app bancário.

Cada feature possui um coordinator próprio e uma família fechada de rotas.
Apenas cinco features aparecem como abas; autenticação é apresentada
por cima das abas e não possui aba própria.
"""

from enum import StrEnum


class Feature(StrEnum):
    """
    Features navegáveis do app.

    O valor de cada membro é também o primeiro segmento do deep link
    (ex: bankapp://accounts/...).
    """

    HOME = "home"
    ACCOUNTS = "accounts"
    TRANSFER = "transfer"
    CARDS = "cards"
    MORE = "more"
    AUTH = "auth"

    def __str__(self) -> str:
        return self.value


class AppTab(StrEnum):
    """Abas da TabView principal (uma por feature, exceto AUTH)."""

    HOME = "home"
    ACCOUNTS = "accounts"
    TRANSFER = "transfer"
    CARDS = "cards"
    MORE = "more"

    def __str__(self) -> str:
        return self.value


# Aba selecionada na inicialização e após logout
DEFAULT_TAB: AppTab = AppTab.HOME


def tab_for_feature(feature: Feature) -> AppTab | None:
    """
    Retorna a aba correspondente à feature.

    Args:
        feature: Feature de destino

    Returns:
        AppTab correspondente, ou None para AUTH (sem aba)
    """
    if feature is Feature.AUTH:
        return None
    return AppTab(feature.value)


def feature_for_tab(tab: AppTab) -> Feature:
    """Retorna a feature dona da aba."""
    return Feature(tab.value)
