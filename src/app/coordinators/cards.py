"""Coordinator da aba Cards."""

from __future__ import annotations

from typing import ClassVar

from app.coordinators.base import FeatureCoordinator
from routing.routes.accounts import TransactionHistory
from routing.routes.features import AppTab, Feature
from routing.routes.more import Support


class CardsCoordinator(FeatureCoordinator):
    """Cards: cartões, limites e bloqueio."""

    feature: ClassVar[Feature] = Feature.CARDS

    def navigate_to_account_transactions(self, account_id: str) -> bool:
        return self._navigate_across(AppTab.ACCOUNTS, TransactionHistory(account_id))

    def navigate_to_support(self) -> bool:
        return self._navigate_across(AppTab.MORE, Support())
