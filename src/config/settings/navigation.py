"""Settings de navegação (deep links e pilhas dos coordinators)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from routing.routes.features import DEFAULT_TAB, AppTab

# Scheme registrado do app
DEFAULT_DEEP_LINK_SCHEME = "bankapp"

# Profundidade máxima de pilha por coordinator
DEFAULT_MAX_STACK_DEPTH = 50


@dataclass(frozen=True)
class NavigationSettings:
    """Configurações de navegação.

    Attributes:
        deep_link_scheme: Scheme aceito pelo parser de deep links
        max_stack_depth: Limite de itens na pilha de cada feature
        default_tab: Aba selecionada no início e após logout
    """

    deep_link_scheme: str = DEFAULT_DEEP_LINK_SCHEME
    max_stack_depth: int = DEFAULT_MAX_STACK_DEPTH
    default_tab: str = DEFAULT_TAB.value

    @property
    def tab(self) -> AppTab:
        """Aba padrão como AppTab (assume settings validadas)."""
        return AppTab(self.default_tab)

    def validate(self) -> list[str]:
        """Valida configurações de navegação.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.deep_link_scheme or not self.deep_link_scheme.isalnum():
            errors.append(f"DEEP_LINK_SCHEME inválido: {self.deep_link_scheme!r}")

        if self.max_stack_depth < 1:
            errors.append("NAVIGATION_MAX_STACK_DEPTH deve ser >= 1")

        valid_tabs = {tab.value for tab in AppTab}
        if self.default_tab not in valid_tabs:
            errors.append(
                f"DEFAULT_TAB inválida: {self.default_tab}. "
                f"Válidas: {', '.join(sorted(valid_tabs))}"
            )

        return errors


def _load_navigation_from_env() -> NavigationSettings:
    """Carrega NavigationSettings de variáveis de ambiente."""
    return NavigationSettings(
        deep_link_scheme=os.getenv("DEEP_LINK_SCHEME", DEFAULT_DEEP_LINK_SCHEME).lower(),
        max_stack_depth=int(
            os.getenv("NAVIGATION_MAX_STACK_DEPTH", str(DEFAULT_MAX_STACK_DEPTH))
        ),
        default_tab=os.getenv("DEFAULT_TAB", DEFAULT_TAB.value).lower(),
    )


@lru_cache(maxsize=1)
def get_navigation_settings() -> NavigationSettings:
    """Retorna instância cacheada de NavigationSettings."""
    return _load_navigation_from_env()
