"""Rotas da feature Home (dashboard e notificações)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from routing.routes.base import FeatureRoute, quote_segment
from routing.routes.features import Feature


class HomeRoute(FeatureRoute):
    """Base das rotas da aba Home."""

    __slots__ = ()

    feature: ClassVar[Feature] = Feature.HOME


@dataclass(frozen=True, slots=True)
class HomeDashboard(HomeRoute):
    """Dashboard (raiz da aba)."""

    slug: ClassVar[str] = "dashboard"

    @property
    def path(self) -> str:
        return "home"


@dataclass(frozen=True, slots=True)
class Notifications(HomeRoute):
    """Lista de notificações."""

    slug: ClassVar[str] = "notifications"

    @property
    def path(self) -> str:
        return "home/notifications"


@dataclass(frozen=True, slots=True)
class NotificationDetail(HomeRoute):
    """Detalhe de uma notificação."""

    notification_id: str
    slug: ClassVar[str] = "notificationDetail"

    @property
    def path(self) -> str:
        return f"home/notifications/{quote_segment(self.notification_id)}"


HOME_ROUTES: tuple[type[HomeRoute], ...] = (
    HomeDashboard,
    Notifications,
    NotificationDetail,
)
