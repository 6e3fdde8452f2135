"""Serviço de autenticação em memória.

Regra de credenciais mock: usuário e senha não vazios autenticam.
Falha de logout pode ser simulada para exercitar a política de reset
otimista da navegação.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from app.protocols.auth_service import AuthServiceProtocol
from app.services.auth_state import AuthStateStream
from utils.errors import AuthServiceError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.services.auth_state import Subscription

logger = logging.getLogger(__name__)


class InMemoryAuthService(AuthServiceProtocol):
    """Implementação em memória de AuthServiceProtocol."""

    def __init__(
        self,
        *,
        initially_authenticated: bool = False,
        fail_logout: bool = False,
        latency_seconds: float = 0.0,
    ) -> None:
        """Inicializa o serviço.

        Args:
            initially_authenticated: Estado inicial publicado
            fail_logout: Se True, logout() levanta AuthServiceError
            latency_seconds: Atraso simulado de login/logout
        """
        self._stream = AuthStateStream(initially_authenticated)
        self._fail_logout = fail_logout
        self._latency_seconds = latency_seconds
        self.logout_calls = 0

    @property
    def is_authenticated(self) -> bool:
        return self._stream.value

    def subscribe(self, listener: Callable[[bool], None]) -> Subscription:
        return self._stream.subscribe(listener)

    async def login(self, username: str, password: str) -> bool:
        """Autentica com credenciais mock.

        Returns:
            True se autenticou (publica True no stream)
        """
        await self._simulate_latency()
        if not username.strip() or not password:
            logger.info("login_rejected", extra={"reason": "empty_credentials"})
            return False

        self._stream.publish(True)
        logger.info("login_succeeded")
        return True

    async def logout(self) -> None:
        """Encerra a sessão; com fail_logout=True levanta AuthServiceError."""
        self.logout_calls += 1
        await self._simulate_latency()
        if self._fail_logout:
            raise AuthServiceError("Logout remoto indisponível")

        self._stream.publish(False)
        logger.info("logout_completed")

    def expire_session(self) -> None:
        self._stream.publish(False)
        logger.info("session_marked_expired")

    async def _simulate_latency(self) -> None:
        if self._latency_seconds > 0:
            await asyncio.sleep(self._latency_seconds)
