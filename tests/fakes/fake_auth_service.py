"""Fake de serviço de auth para testes deterministas."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.protocols.auth_service import AuthServiceProtocol
from app.services.auth_state import AuthStateStream
from utils.errors import AuthServiceError

if TYPE_CHECKING:
    from collections.abc import Callable

    from app.services.auth_state import Subscription


class FakeAuthService(AuthServiceProtocol):
    """Implementa o protocolo sem IO.

    Publicações são controladas pelo teste (sign_in/sign_out) e as
    chamadas de logout ficam registradas para asserção.
    """

    def __init__(self, *, authenticated: bool = False, fail_logout: bool = False) -> None:
        self._stream = AuthStateStream(authenticated)
        self.fail_logout = fail_logout
        self.logout_calls = 0
        self.expire_calls = 0
        self.login_attempts: list[str] = []

    @property
    def is_authenticated(self) -> bool:
        return self._stream.value

    @property
    def listener_count(self) -> int:
        return self._stream.listener_count

    def subscribe(self, listener: Callable[[bool], None]) -> Subscription:
        return self._stream.subscribe(listener)

    async def login(self, username: str, password: str) -> bool:
        self.login_attempts.append(username)
        if not username or not password:
            return False
        self._stream.publish(True)
        return True

    async def logout(self) -> None:
        self.logout_calls += 1
        if self.fail_logout:
            raise AuthServiceError("logout indisponível")
        self._stream.publish(False)

    def expire_session(self) -> None:
        self.expire_calls += 1
        self._stream.publish(False)

    # Controles do teste

    def sign_in(self) -> None:
        self._stream.publish(True)

    def sign_out(self) -> None:
        self._stream.publish(False)

    def republish(self) -> None:
        self._stream.publish(self._stream.value)
