"""Coordinator do fluxo de autenticação (sem aba própria)."""

from __future__ import annotations

from typing import ClassVar

from app.coordinators.base import FeatureCoordinator
from routing.routes.auth import SessionExpired
from routing.routes.features import Feature
from routing.types import NavigationItem


class AuthCoordinator(FeatureCoordinator):
    """
    Auth: login, biometria, OTP e recuperação de senha.

    É apresentado por cima das abas quando não há sessão; sua raiz é a
    tela de login.
    """

    feature: ClassVar[Feature] = Feature.AUTH

    def show_session_expired(self, current: NavigationItem | None = None) -> NavigationItem:
        """
        Retorna o item do interstitial de sessão expirada.

        Reaproveita `current` se ele já é o interstitial, para que uma
        segunda expiração não gere nova apresentação.
        """
        if current is not None and isinstance(current.route, SessionExpired):
            return current
        return NavigationItem(SessionExpired())
