"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AuthServiceError,
    ConfinementError,
    NavigationError,
)

__all__ = [
    "AuthServiceError",
    "ConfinementError",
    "NavigationError",
]
