"""Agregador de settings do serviço de navegação.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    SessionSettings,
    get_base_settings,
    get_session_settings,
)
from config.settings.navigation import (
    DEFAULT_DEEP_LINK_SCHEME,
    DEFAULT_MAX_STACK_DEPTH,
    NavigationSettings,
    get_navigation_settings,
)


def validate_all_settings() -> list[str]:
    """Valida todas as settings carregadas do ambiente.

    Returns:
        Lista agregada de erros (vazia = OK).
    """
    errors: list[str] = []
    errors.extend(get_base_settings().validate())
    errors.extend(get_session_settings().validate())
    errors.extend(get_navigation_settings().validate())
    return errors


def clear_settings_cache() -> None:
    """Limpa os caches das settings (usado em testes)."""
    get_base_settings.cache_clear()
    get_session_settings.cache_clear()
    get_navigation_settings.cache_clear()


__all__ = [
    "DEFAULT_DEEP_LINK_SCHEME",
    "DEFAULT_MAX_STACK_DEPTH",
    "BaseSettings",
    "Environment",
    "NavigationSettings",
    "SessionSettings",
    "clear_settings_cache",
    "get_base_settings",
    "get_navigation_settings",
    "get_session_settings",
    "validate_all_settings",
]
