"""
Rotas da feature Auth.

Auth não tem aba: é apresentada em tela cheia sobre as abas enquanto
o usuário não está autenticado.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from routing.routes.base import FeatureRoute, quote_segment
from routing.routes.features import Feature


class AuthRoute(FeatureRoute):
    """Base das rotas de autenticação."""

    __slots__ = ()

    feature: ClassVar[Feature] = Feature.AUTH


@dataclass(frozen=True, slots=True)
class Login(AuthRoute):
    """Login (raiz do fluxo de autenticação)."""

    slug: ClassVar[str] = "login"

    @property
    def path(self) -> str:
        return "auth/login"


@dataclass(frozen=True, slots=True)
class Biometric(AuthRoute):
    slug: ClassVar[str] = "biometric"

    @property
    def path(self) -> str:
        return "auth/biometric"


@dataclass(frozen=True, slots=True)
class Otp(AuthRoute):
    """Verificação de OTP para uma referência emitida pelo serviço de auth."""

    reference: str
    slug: ClassVar[str] = "otp"

    @property
    def path(self) -> str:
        return f"auth/otp/{quote_segment(self.reference)}"


@dataclass(frozen=True, slots=True)
class ForgotPassword(AuthRoute):
    slug: ClassVar[str] = "forgotPassword"

    @property
    def path(self) -> str:
        return "auth/forgot-password"


@dataclass(frozen=True, slots=True)
class ResetPassword(AuthRoute):
    token: str
    slug: ClassVar[str] = "resetPassword"

    @property
    def path(self) -> str:
        return f"auth/reset-password/{quote_segment(self.token)}"


@dataclass(frozen=True, slots=True)
class SessionExpired(AuthRoute):
    """Interstitial bloqueante de sessão expirada."""

    slug: ClassVar[str] = "sessionExpired"

    @property
    def path(self) -> str:
        return "auth/session-expired"


AUTH_ROUTES: tuple[type[AuthRoute], ...] = (
    Login,
    Biometric,
    Otp,
    ForgotPassword,
    ResetPassword,
    SessionExpired,
)
