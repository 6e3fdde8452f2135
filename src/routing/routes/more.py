"""Rotas da feature More (perfil, segurança e institucional)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from routing.routes.base import FeatureRoute
from routing.routes.features import Feature


class MoreRoute(FeatureRoute):
    """Base das rotas da aba More."""

    __slots__ = ()

    feature: ClassVar[Feature] = Feature.MORE


@dataclass(frozen=True, slots=True)
class MoreMenu(MoreRoute):
    """Menu (raiz da aba)."""

    slug: ClassVar[str] = "menu"

    @property
    def path(self) -> str:
        return "more"


@dataclass(frozen=True, slots=True)
class Profile(MoreRoute):
    slug: ClassVar[str] = "profile"

    @property
    def path(self) -> str:
        return "more/profile"


@dataclass(frozen=True, slots=True)
class EditProfile(MoreRoute):
    slug: ClassVar[str] = "editProfile"

    @property
    def path(self) -> str:
        return "more/profile/edit"


@dataclass(frozen=True, slots=True)
class Security(MoreRoute):
    slug: ClassVar[str] = "security"

    @property
    def path(self) -> str:
        return "more/security"


@dataclass(frozen=True, slots=True)
class ChangePassword(MoreRoute):
    slug: ClassVar[str] = "changePassword"

    @property
    def path(self) -> str:
        return "more/security/change-password"


@dataclass(frozen=True, slots=True)
class ChangePin(MoreRoute):
    slug: ClassVar[str] = "changePIN"

    @property
    def path(self) -> str:
        return "more/security/change-pin"


@dataclass(frozen=True, slots=True)
class NotificationSettings(MoreRoute):
    slug: ClassVar[str] = "notificationSettings"

    @property
    def path(self) -> str:
        return "more/notification-settings"


@dataclass(frozen=True, slots=True)
class Support(MoreRoute):
    slug: ClassVar[str] = "support"

    @property
    def path(self) -> str:
        return "more/support"


@dataclass(frozen=True, slots=True)
class About(MoreRoute):
    slug: ClassVar[str] = "about"

    @property
    def path(self) -> str:
        return "more/about"


MORE_ROUTES: tuple[type[MoreRoute], ...] = (
    MoreMenu,
    Profile,
    EditProfile,
    Security,
    ChangePassword,
    ChangePin,
    NotificationSettings,
    Support,
    About,
)
