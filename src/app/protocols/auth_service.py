"""Protocolo do serviço de autenticação consumido pelo App Coordinator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.services.auth_state import Subscription


class AuthServiceProtocol(ABC):
    """Fonte de estado de autenticação.

    Publica um booleano (valor atual + valores futuros). Login bem
    sucedido é inferido pela transição para True.
    """

    @property
    @abstractmethod
    def is_authenticated(self) -> bool: ...

    @abstractmethod
    def subscribe(self, listener: Callable[[bool], None]) -> Subscription:
        """Inscreve listener; o valor atual é entregue imediatamente."""

    @abstractmethod
    async def login(self, username: str, password: str) -> bool: ...

    @abstractmethod
    async def logout(self) -> None:
        """Encerra a sessão remota. Pode falhar com AuthServiceError."""

    @abstractmethod
    def expire_session(self) -> None:
        """Marca a sessão como expirada (publica False)."""
