"""Testes da navegação cross-feature (filho → pai → coordinator alvo)."""

from __future__ import annotations

import pytest

from app.coordinators import AppCoordinator
from app.services import drain_background_tasks
from routing import AppTab
from routing.routes import (
    AccountDetail,
    InternalTransfer,
    Security,
    Support,
    TransactionDetail,
    TransactionHistory,
    TransferReceipt,
)
from tests.fakes.fake_auth_service import FakeAuthService


class TestHomeShortcuts:
    def test_account_detail_switches_tab_and_pushes(self, signed_in_coordinator: AppCoordinator) -> None:
        app = signed_in_coordinator
        app.accounts.push(AccountDetail("ACC0"))

        assert app.home.navigate_to_account_detail("ACC1") is True

        assert app.selected_tab is AppTab.ACCOUNTS
        # Empilha sem limpar: não passa pelo fluxo de deep link
        assert app.accounts.routes == (AccountDetail("ACC0"), AccountDetail("ACC1"))

    def test_transaction_detail(self, signed_in_coordinator: AppCoordinator) -> None:
        app = signed_in_coordinator

        app.home.navigate_to_transaction_detail("TX1")

        assert app.selected_tab is AppTab.ACCOUNTS
        assert app.accounts.routes == (TransactionDetail("TX1"),)

    def test_tab_only_shortcuts(self, signed_in_coordinator: AppCoordinator) -> None:
        app = signed_in_coordinator

        app.home.navigate_to_transfer()
        assert app.selected_tab is AppTab.TRANSFER
        app.home.navigate_to_cards()
        assert app.selected_tab is AppTab.CARDS
        app.home.navigate_to_more()
        assert app.selected_tab is AppTab.MORE

        assert all(not snapshot.stack for snapshot in app.snapshot().features.values())

    def test_security_settings(self, signed_in_coordinator: AppCoordinator) -> None:
        app = signed_in_coordinator

        app.home.navigate_to_security_settings()

        assert app.selected_tab is AppTab.MORE
        assert app.more.routes == (Security(),)


class TestOtherFeatures:
    def test_accounts_to_internal_transfer(self, signed_in_coordinator: AppCoordinator) -> None:
        app = signed_in_coordinator

        app.accounts.navigate_to_transfer("ACC1")

        assert app.selected_tab is AppTab.TRANSFER
        assert app.transfer.routes == (InternalTransfer("ACC1"),)

    def test_transfer_pops_its_flow_before_leaving(self, signed_in_coordinator: AppCoordinator) -> None:
        app = signed_in_coordinator
        app.switch_tab(AppTab.TRANSFER)
        app.transfer.push(InternalTransfer("ACC1"))
        app.transfer.push(TransferReceipt("T1"))

        app.transfer.navigate_to_accounts()

        assert app.selected_tab is AppTab.ACCOUNTS
        assert app.transfer.navigation_stack == ()

        app.transfer.push(TransferReceipt("T2"))
        app.transfer.navigate_to_home()

        assert app.selected_tab is AppTab.HOME
        assert app.transfer.navigation_stack == ()

    def test_cards_to_account_transactions_and_support(
        self, signed_in_coordinator: AppCoordinator
    ) -> None:
        app = signed_in_coordinator

        app.cards.navigate_to_account_transactions("ACC1")
        assert app.selected_tab is AppTab.ACCOUNTS
        assert app.accounts.routes == (TransactionHistory("ACC1"),)

        app.cards.navigate_to_support()
        assert app.selected_tab is AppTab.MORE
        assert app.more.routes == (Support(),)

    @pytest.mark.asyncio
    async def test_more_requests_logout_from_parent(
        self, signed_in_coordinator: AppCoordinator, auth_service: FakeAuthService
    ) -> None:
        app = signed_in_coordinator
        app.switch_tab(AppTab.MORE)
        app.more.push(Security())

        assert app.more.request_logout() is True
        await drain_background_tasks(timeout_seconds=1.0)

        assert app.is_authenticated is False
        assert app.selected_tab is AppTab.HOME
        assert app.more.navigation_stack == ()
        assert auth_service.logout_calls == 1


class TestReleasedParent:
    """Após close(), a chave do pai não resolve e as chamadas viram no-op."""

    def test_cross_feature_calls_are_noops(self, signed_in_coordinator: AppCoordinator) -> None:
        app = signed_in_coordinator
        home, more = app.home, app.more

        app.close()

        assert home.parent is None
        assert home.navigate_to_account_detail("ACC1") is False
        assert more.request_logout() is False
        assert app.accounts.navigation_stack == ()
        assert app.selected_tab is AppTab.HOME
