"""Testes das rotas de feature, RootRoute e tipos de navegação."""

from __future__ import annotations

import dataclasses
from decimal import Decimal

import pytest

from routing import (
    DEFAULT_TAB,
    ROOT_ROUTES,
    AppTab,
    Feature,
    NavigationItem,
    NavigationSnapshot,
    RootRoute,
    ViewHandle,
    feature_for_tab,
    tab_for_feature,
)
from routing.routes import (
    ROUTES_BY_FEATURE,
    AccountDetail,
    AccountsList,
    CardBlock,
    CardStatus,
    DestinationType,
    HomeDashboard,
    InternalTransfer,
    Notifications,
    Security,
    StatementDownload,
    TransferConfirm,
    TransferRequest,
    is_root_route,
)


def _transfer_request() -> TransferRequest:
    return TransferRequest(
        source_account_id="ACC1",
        destination_type=DestinationType.BENEFICIARY,
        destination_id="BEN9",
        amount=Decimal("150.00"),
    )


class TestFeaturesAndTabs:
    """Features, abas e o mapeamento entre elas."""

    def test_every_tab_maps_to_a_feature_and_back(self) -> None:
        for tab in AppTab:
            assert tab_for_feature(feature_for_tab(tab)) is tab

    def test_auth_has_no_tab(self) -> None:
        assert tab_for_feature(Feature.AUTH) is None
        assert len(AppTab) == len(Feature) - 1

    def test_default_tab_is_home(self) -> None:
        assert DEFAULT_TAB is AppTab.HOME
        assert str(AppTab.ACCOUNTS) == "accounts"


class TestRouteValues:
    """Rotas são valores imutáveis comparáveis por igualdade."""

    def test_routes_compare_by_value(self) -> None:
        assert AccountDetail("ACC1") == AccountDetail("ACC1")
        assert AccountDetail("ACC1") != AccountDetail("ACC2")
        assert hash(AccountDetail("ACC1")) == hash(AccountDetail("ACC1"))

    def test_routes_are_frozen(self) -> None:
        route = AccountDetail("ACC1")
        with pytest.raises(dataclasses.FrozenInstanceError):
            route.account_id = "ACC2"  # type: ignore[misc]

    def test_route_id_includes_feature_slug_and_identifiers(self) -> None:
        assert AccountDetail("ACC1").route_id == "accounts-detail-ACC1"
        assert StatementDownload("ACC1", 3, 2024).route_id == "accounts-statementDownload-ACC1-3-2024"
        assert InternalTransfer().route_id == "transfer-internalTransfer"
        assert InternalTransfer("ACC1").route_id == "transfer-internalTransfer-ACC1"
        assert CardBlock("C1").route_id == "cards-block-C1"

    def test_card_block_defaults_to_active_without_reason(self) -> None:
        route = CardBlock("C1")
        assert route.current_status is CardStatus.ACTIVE
        assert route.params() == {"card_id": "C1", "current_status": "active", "block_reason": None}

    @pytest.mark.parametrize(("month", "year"), [(0, 2024), (13, 2024), (1, 24)])
    def test_statement_download_rejects_invalid_period(self, month: int, year: int) -> None:
        with pytest.raises(ValueError):
            StatementDownload("ACC1", month, year)

    def test_transfer_request_requires_positive_amount(self) -> None:
        with pytest.raises(ValueError, match="amount"):
            TransferRequest(
                source_account_id="ACC1",
                destination_type=DestinationType.INTERNAL_ACCOUNT,
                destination_id="ACC2",
                amount=Decimal("0"),
            )

    def test_transfer_confirm_is_not_linkable_and_exposes_safe_params(self) -> None:
        route = TransferConfirm(_transfer_request())
        assert route.path is None
        assert route.params()["amount"] == "150.00"
        assert route.params()["destination_type"] == "beneficiary"
        assert RootRoute(Feature.TRANSFER, route).to_uri() is None


class TestRootRoute:
    """RootRoute: feature + sub-rota opcional."""

    def test_bare_feature_renders_feature_uri(self) -> None:
        root = RootRoute(Feature.CARDS)
        assert root.route_id == "app-cards"
        assert root.to_uri() == "bankapp://cards"

    def test_sub_route_must_belong_to_feature(self) -> None:
        with pytest.raises(ValueError, match="não pertence"):
            RootRoute(Feature.HOME, AccountDetail("ACC1"))

    def test_to_uri_uses_given_scheme(self) -> None:
        root = RootRoute(Feature.MORE, Security())
        assert root.to_uri(scheme="bankapp-dev") == "bankapp-dev://more/security"

    def test_each_feature_has_a_root_route_of_its_own(self) -> None:
        assert set(ROOT_ROUTES) == set(Feature)
        for feature, root in ROOT_ROUTES.items():
            assert root.feature is feature
            assert type(root) in ROUTES_BY_FEATURE[feature]
            assert is_root_route(root)
        assert not is_root_route(Notifications())


class TestNavigationTypes:
    """NavigationItem, ViewHandle e NavigationSnapshot."""

    def test_items_with_same_route_are_distinct(self) -> None:
        first = NavigationItem(AccountDetail("ACC1"))
        second = NavigationItem(AccountDetail("ACC1"))
        assert first != second
        assert first.route == second.route
        assert len({first, second}) == 2

    def test_item_log_dict_uses_route_id(self) -> None:
        item = NavigationItem(AccountDetail("ACC1"))
        payload = item.to_log_dict()
        assert payload["route_id"] == "accounts-detail-ACC1"
        assert payload["route"] == "AccountDetail"
        assert payload["params"] == {"account_id": "ACC1"}
        assert item.feature is Feature.ACCOUNTS

    def test_view_handle_is_hashable(self) -> None:
        handle = ViewHandle(Feature.ACCOUNTS, "account_detail", {"account_id": "ACC1"})
        same = ViewHandle(Feature.ACCOUNTS, "account_detail", {"account_id": "ACC1"})
        assert handle == same
        assert hash(handle) == hash(same)

    def test_snapshot_exposes_top_and_routes(self) -> None:
        items = (NavigationItem(Notifications()), NavigationItem(AccountsList()))
        snapshot = NavigationSnapshot(feature=Feature.HOME, stack=items)
        assert snapshot.top is items[-1]
        assert snapshot.routes == (Notifications(), AccountsList())
        assert NavigationSnapshot(feature=Feature.HOME).top is None

    def test_snapshot_to_dict(self) -> None:
        sheet = NavigationItem(HomeDashboard())
        payload = NavigationSnapshot(feature=Feature.HOME, sheet=sheet, revision=3).to_dict()
        assert payload["feature"] == "home"
        assert payload["stack"] == []
        assert payload["sheet"]["route_id"] == "home-dashboard"
        assert payload["full_screen"] is None
        assert payload["revision"] == 3
