"""
Exports públicos do módulo fsm/states.

Estados de autenticação do app.
"""

from fsm.states.auth import (
    DEFAULT_INITIAL_STATE,
    AuthState,
    is_authenticated_state,
    is_valid_state,
    state_for,
)

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "AuthState",
    "is_authenticated_state",
    "is_valid_state",
    "state_for",
]
