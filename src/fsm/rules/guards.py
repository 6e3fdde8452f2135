"""
Guards para transições de autenticação.

Guards podem bloquear uma transição estruturalmente válida. Uma
transição negada não altera estado: o chamador trata como no-op.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fsm.states.auth import AuthState
from fsm.transitions.rules import TRIGGERS

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence


class GuardResult:
    """
    Resultado da avaliação de um guard.

    Attributes:
        allowed: Se a transição é permitida
        reason: Motivo do bloqueio (se allowed=False)
    """

    __slots__ = ("allowed", "reason")

    def __init__(self, allowed: bool, reason: str | None = None) -> None:
        self.allowed = allowed
        self.reason = reason

    @classmethod
    def allow(cls) -> GuardResult:
        """Cria resultado permitindo a transição."""
        return cls(allowed=True)

    @classmethod
    def deny(cls, reason: str) -> GuardResult:
        """Cria resultado negando a transição."""
        return cls(allowed=False, reason=reason)


def guard_valid_state(
    from_state: AuthState,
    to_state: AuthState,
    trigger: str,
) -> GuardResult:
    """Guard: ambos os estados devem ser AuthState."""
    if not isinstance(from_state, AuthState):
        return GuardResult.deny(f"Estado de origem inválido: {from_state}")
    if not isinstance(to_state, AuthState):
        return GuardResult.deny(f"Estado de destino inválido: {to_state}")
    return GuardResult.allow()


def guard_same_state(
    from_state: AuthState,
    to_state: AuthState,
    trigger: str,
) -> GuardResult:
    """
    Guard: nega transição reflexiva.

    A fonte de auth pode republicar o mesmo valor (ex: replay na
    inscrição); isso não pode gerar entrada no histórico.
    """
    if from_state == to_state:
        return GuardResult.deny(
            f"Transição reflexiva não permitida: {from_state.name} → {to_state.name}"
        )
    return GuardResult.allow()


def guard_known_trigger(
    from_state: AuthState,
    to_state: AuthState,
    trigger: str,
) -> GuardResult:
    """Guard: o gatilho deve estar entre os conhecidos."""
    if trigger not in TRIGGERS:
        return GuardResult.deny(f"Gatilho desconhecido: {trigger!r}")
    return GuardResult.allow()


# Lista de guards a serem aplicados em ordem
# Todos devem retornar allow() para a transição prosseguir
DEFAULT_GUARDS: tuple[Callable[[AuthState, AuthState, str], GuardResult], ...] = (
    guard_valid_state,
    guard_same_state,
    guard_known_trigger,
)


def evaluate_guards(
    from_state: AuthState,
    to_state: AuthState,
    trigger: str,
    guards: Sequence[Callable[[AuthState, AuthState, str], GuardResult]] | None = None,
) -> GuardResult:
    """
    Avalia todos os guards para uma transição.

    Args:
        from_state: Estado de origem
        to_state: Estado de destino
        trigger: Gatilho da transição
        guards: Guards a aplicar (usa DEFAULT_GUARDS se None)

    Returns:
        GuardResult do primeiro guard que negar, ou allow() se todos passarem
    """
    guards_to_apply = guards if guards is not None else DEFAULT_GUARDS

    for guard in guards_to_apply:
        result = guard(from_state, to_state, trigger)
        if not result.allowed:
            return result

    return GuardResult.allow()
