"""
Exports públicos do módulo fsm/manager.

Máquina de estados de autenticação.
"""

from fsm.manager.machine import AuthStateMachine, create_auth_fsm

__all__ = [
    "AuthStateMachine",
    "create_auth_fsm",
]
