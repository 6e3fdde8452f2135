"""Protocolos e contratos do core da aplicação."""

from .auth_service import AuthServiceProtocol

__all__ = [
    "AuthServiceProtocol",
]
