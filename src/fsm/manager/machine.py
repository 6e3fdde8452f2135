"""
Máquina de estados de autenticação (AuthStateMachine).

Eixo de autenticação do App Coordinator: decide se deep links são
despachados ou ficam pendentes, e mantém histórico auditável.
"""

from __future__ import annotations

from typing import Any

from fsm.rules.guards import evaluate_guards
from fsm.states.auth import (
    DEFAULT_INITIAL_STATE,
    AuthState,
    is_authenticated_state,
)
from fsm.transitions.rules import get_valid_targets, is_transition_valid
from fsm.types.transition import StateTransition, TransitionResult


class AuthStateMachine:
    """
    Máquina de estados de autenticação.

    Attributes:
        current_state: Estado atual da máquina
        history: Histórico de transições realizadas
    """

    __slots__ = ("_current_state", "_history", "_owner")

    def __init__(
        self,
        initial_state: AuthState | None = None,
        owner: str = "",
    ) -> None:
        """
        Inicializa a máquina de estados.

        Args:
            initial_state: Estado inicial (usa DEFAULT_INITIAL_STATE se None)
            owner: Identificador do dono (para logs)
        """
        self._current_state = initial_state or DEFAULT_INITIAL_STATE
        self._history: list[StateTransition] = []
        self._owner = owner

    @property
    def current_state(self) -> AuthState:
        """Estado atual da máquina."""
        return self._current_state

    @property
    def is_authenticated(self) -> bool:
        """Atalho para checar sessão ativa."""
        return is_authenticated_state(self._current_state)

    @property
    def history(self) -> list[StateTransition]:
        """Histórico de transições (cópia para evitar mutação externa)."""
        return list(self._history)

    def can_transition_to(self, target: AuthState, trigger: str) -> bool:
        """Verifica se pode transitar para o estado alvo."""
        if not is_transition_valid(self._current_state, target):
            return False
        return evaluate_guards(self._current_state, target, trigger).allowed

    def transition(
        self,
        target: AuthState,
        trigger: str,
        metadata: dict[str, Any] | None = None,
    ) -> TransitionResult:
        """
        Tenta realizar uma transição de estado.

        Guards rodam antes da regra de transição, para que republicações
        do mesmo valor sejam reportadas como reflexivas.

        Args:
            target: Estado de destino
            trigger: Gatilho (ex: 'login_succeeded', 'logout')
            metadata: Dados adicionais para auditoria

        Returns:
            TransitionResult com sucesso/falha e dados da transição
        """
        guard_result = evaluate_guards(self._current_state, target, trigger)
        if not guard_result.allowed:
            return TransitionResult(success=False, error_reason=guard_result.reason)

        if not is_transition_valid(self._current_state, target):
            return TransitionResult(
                success=False,
                error_reason=(
                    f"Transição inválida: {self._current_state.name} → {target.name}"
                ),
            )

        transition = StateTransition(
            from_state=self._current_state,
            to_state=target,
            trigger=trigger,
            metadata=metadata or {},
        )

        self._current_state = target
        self._history.append(transition)

        return TransitionResult(success=True, transition=transition)

    def get_state_summary(self) -> dict[str, Any]:
        """
        Retorna resumo do estado atual para observability.

        Returns:
            Dict com informações do estado (seguro para logs)
        """
        return {
            "owner": self._owner,
            "current_state": self._current_state.name,
            "transition_count": len(self._history),
            "valid_targets": sorted(s.name for s in get_valid_targets(self._current_state)),
        }

    def get_history_summary(self) -> list[dict[str, Any]]:
        """Retorna histórico em formato seguro para logs."""
        return [t.to_log_dict() for t in self._history]


def create_auth_fsm(
    is_authenticated: bool = False,
    owner: str = "app",
) -> AuthStateMachine:
    """
    Factory function para criar a FSM de autenticação.

    Args:
        is_authenticated: Valor inicial publicado pela fonte de auth
        owner: Identificador do dono

    Returns:
        AuthStateMachine configurada
    """
    initial = AuthState.AUTHENTICATED if is_authenticated else AuthState.UNAUTHENTICATED
    return AuthStateMachine(initial_state=initial, owner=owner)
