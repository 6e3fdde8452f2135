"""Exceções da camada de navegação e de seus colaboradores."""

from __future__ import annotations


class NavigationError(RuntimeError):
    """Base para erros de programação na camada de navegação."""


class ConfinementError(NavigationError):
    """Coordinator usado fora da thread que o criou."""

    def __init__(self, owner: str, owner_thread: int, current_thread: int) -> None:
        super().__init__(
            f"{owner} criado na thread {owner_thread} e usado na thread {current_thread}"
        )
        self.owner = owner
        self.owner_thread = owner_thread
        self.current_thread = current_thread


class AuthServiceError(RuntimeError):
    """Falha do serviço de autenticação (ex: logout remoto)."""
