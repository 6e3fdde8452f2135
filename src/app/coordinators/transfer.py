"""Coordinator da aba Transfer."""

from __future__ import annotations

from typing import ClassVar

from app.coordinators.base import FeatureCoordinator
from routing.routes.features import AppTab, Feature


class TransferCoordinator(FeatureCoordinator):
    """
    Transfer: fluxo de transferência e beneficiários.

    Ao sair do fluxo (para Home ou Accounts) a pilha de transferência é
    descartada, para que o próximo acesso comece da raiz.
    """

    feature: ClassVar[Feature] = Feature.TRANSFER

    def navigate_to_home(self) -> bool:
        self.pop_to_root()
        return self._navigate_across(AppTab.HOME)

    def navigate_to_accounts(self) -> bool:
        self.pop_to_root()
        return self._navigate_across(AppTab.ACCOUNTS)
