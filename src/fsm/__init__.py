"""
Módulo FSM: máquina de estados de autenticação do app.

Governa o eixo de autenticação do App Coordinator: com sessão os deep
links são despachados, sem sessão ficam pendentes.

Estrutura:
    - states/: Estados (AuthState enum)
    - transitions/: Regras de transição (VALID_TRANSITIONS)
    - rules/: Guards
    - manager/: Máquina de estados (AuthStateMachine)
    - types/: Tipos de dados (StateTransition, TransitionResult)
"""

# Manager
from fsm.manager import AuthStateMachine, create_auth_fsm

# Guards
from fsm.rules import GuardResult, evaluate_guards

# Estados
from fsm.states import (
    DEFAULT_INITIAL_STATE,
    AuthState,
    is_authenticated_state,
    is_valid_state,
    state_for,
)

# Transições
from fsm.transitions import (
    TRIGGERS,
    VALID_TRANSITIONS,
    get_valid_targets,
    is_transition_valid,
    validate_transition_map,
)

# Types
from fsm.types import StateTransition, TransitionResult

__all__ = [
    "DEFAULT_INITIAL_STATE",
    "TRIGGERS",
    "VALID_TRANSITIONS",
    "AuthState",
    "AuthStateMachine",
    "GuardResult",
    "StateTransition",
    "TransitionResult",
    "create_auth_fsm",
    "evaluate_guards",
    "get_valid_targets",
    "is_authenticated_state",
    "is_transition_valid",
    "is_valid_state",
    "state_for",
    "validate_transition_map",
]
