"""Coordinator da aba Home (dashboard e notificações)."""

from __future__ import annotations

from typing import ClassVar

from app.coordinators.base import FeatureCoordinator
from routing.routes.accounts import AccountDetail, TransactionDetail
from routing.routes.features import AppTab, Feature
from routing.routes.more import Security


class HomeCoordinator(FeatureCoordinator):
    """Home: atalhos do dashboard levam a outras abas."""

    feature: ClassVar[Feature] = Feature.HOME

    def navigate_to_account_detail(self, account_id: str) -> bool:
        return self._navigate_across(AppTab.ACCOUNTS, AccountDetail(account_id))

    def navigate_to_transaction_detail(self, transaction_id: str) -> bool:
        return self._navigate_across(AppTab.ACCOUNTS, TransactionDetail(transaction_id))

    def navigate_to_transfer(self) -> bool:
        return self._navigate_across(AppTab.TRANSFER)

    def navigate_to_cards(self) -> bool:
        return self._navigate_across(AppTab.CARDS)

    def navigate_to_more(self) -> bool:
        return self._navigate_across(AppTab.MORE)

    def navigate_to_security_settings(self) -> bool:
        return self._navigate_across(AppTab.MORE, Security())
