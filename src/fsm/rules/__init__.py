"""
Exports públicos do módulo fsm/rules.

Guards para transições de autenticação.
"""

from fsm.rules.guards import (
    DEFAULT_GUARDS,
    GuardResult,
    evaluate_guards,
    guard_known_trigger,
    guard_same_state,
    guard_valid_state,
)

__all__ = [
    "DEFAULT_GUARDS",
    "GuardResult",
    "evaluate_guards",
    "guard_known_trigger",
    "guard_same_state",
    "guard_valid_state",
]
