"""
Exports públicos do módulo fsm/transitions.

Regras de transição válidas entre estados de autenticação.
"""

from fsm.transitions.rules import (
    TRIGGERS,
    VALID_TRANSITIONS,
    TransitionMap,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)

__all__ = [
    "TRIGGERS",
    "VALID_TRANSITIONS",
    "TransitionMap",
    "get_valid_targets",
    "is_transition_valid",
    "validate_transition_map",
]
