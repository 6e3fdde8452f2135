"""Coordinator da aba Accounts."""

from __future__ import annotations

from typing import ClassVar

from app.coordinators.base import FeatureCoordinator
from routing.routes.features import AppTab, Feature
from routing.routes.transfer import InternalTransfer


class AccountsCoordinator(FeatureCoordinator):
    """Accounts: contas, extratos e transações."""

    feature: ClassVar[Feature] = Feature.ACCOUNTS

    def navigate_to_transfer(self, from_account_id: str) -> bool:
        """Abre transferência interna com a conta de origem preenchida."""
        return self._navigate_across(AppTab.TRANSFER, InternalTransfer(from_account_id))
