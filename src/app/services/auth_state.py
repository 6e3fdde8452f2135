"""Stream de estado de autenticação (valor atual + valores futuros).

Equivalente mínimo de um "behavior subject": toda inscrição recebe o
valor corrente e, depois, cada publicação. Publicações repetidas do
mesmo valor também são entregues; deduplicação é responsabilidade de
quem observa (a FSM de auth nega transições reflexivas).
"""

from __future__ import annotations

import itertools
import logging
from typing import TYPE_CHECKING

from utils.errors import ConfinementError

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class Subscription:
    """Handle de inscrição; cancel() é idempotente."""

    __slots__ = ("_active", "_on_cancel")

    def __init__(self, on_cancel: Callable[[], None]) -> None:
        self._on_cancel = on_cancel
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        self._on_cancel()


class AuthStateStream:
    """Stream booleano de autenticação."""

    __slots__ = ("_ids", "_listeners", "_value")

    def __init__(self, initial: bool = False) -> None:
        self._value = initial
        self._listeners: dict[int, Callable[[bool], None]] = {}
        self._ids = itertools.count(1)

    @property
    def value(self) -> bool:
        """Valor corrente."""
        return self._value

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def subscribe(self, listener: Callable[[bool], None]) -> Subscription:
        """Inscreve listener e entrega o valor corrente.

        Args:
            listener: Callback chamado com cada valor publicado

        Returns:
            Subscription para cancelamento
        """
        key = next(self._ids)
        self._listeners[key] = listener
        self._deliver(key, listener, self._value)
        return Subscription(lambda: self._listeners.pop(key, None))

    def publish(self, value: bool) -> None:
        """Publica novo valor para todos os listeners ativos."""
        self._value = value
        for key, listener in list(self._listeners.items()):
            self._deliver(key, listener, value)

    def _deliver(self, key: int, listener: Callable[[bool], None], value: bool) -> None:
        try:
            listener(value)
        except ConfinementError:
            # Erro de programação: quem publicou está na thread errada
            raise
        except Exception as exc:
            logger.error(
                "auth_state_listener_failed",
                extra={
                    "listener_id": key,
                    "is_authenticated": value,
                    "error_type": type(exc).__name__,
                },
            )
