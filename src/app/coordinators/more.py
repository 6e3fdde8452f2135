"""Coordinator da aba More (perfil, segurança, suporte)."""

from __future__ import annotations

import logging
from typing import ClassVar

from app.coordinators.base import FeatureCoordinator
from routing.routes.features import Feature

logger = logging.getLogger(__name__)


class MoreCoordinator(FeatureCoordinator):
    """More: menu de conta e configurações."""

    feature: ClassVar[Feature] = Feature.MORE

    def request_logout(self) -> bool:
        """Pede logout ao App Coordinator (no-op se o pai foi liberado)."""
        parent = self.parent
        if parent is None:
            logger.debug("logout_request_parent_unavailable")
            return False
        parent.logout()
        return True
