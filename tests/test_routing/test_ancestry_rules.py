"""Testes das tabelas de reconstrução de pilha e de views."""

from __future__ import annotations

import dataclasses
from decimal import Decimal

import pytest

from routing import replay_chain, validate_replay_tables, validate_view_tables, view_name
from routing.ancestry import REPLAY_CHAINS, VIEW_NAMES
from routing.routes import (
    ROOT_ROUTES,
    AccountDetail,
    AddBeneficiary,
    BeneficiaryList,
    CardBlock,
    CardDetail,
    ChangePin,
    DestinationType,
    EditProfile,
    NotificationDetail,
    Notifications,
    Profile,
    Security,
    StatementDownload,
    TransactionDetail,
    TransactionHistory,
    TransferConfirm,
    TransferRequest,
)


class TestTableIntegrity:
    """As tabelas cobrem toda a gramática de cada feature."""

    def test_replay_tables_are_complete(self) -> None:
        assert validate_replay_tables() == []

    def test_view_tables_are_complete_and_unique(self) -> None:
        assert validate_view_tables() == []
        assert len(set(VIEW_NAMES.values())) == len(VIEW_NAMES)

    def test_tables_cover_the_same_variants(self) -> None:
        assert set(REPLAY_CHAINS) == set(VIEW_NAMES)


class TestReplayChains:
    """Cada variante tem uma cadeia fixa de pushes."""

    @pytest.mark.parametrize(
        ("route", "expected"),
        [
            (Notifications(), (Notifications(),)),
            (NotificationDetail("N1"), (Notifications(), NotificationDetail("N1"))),
            (AccountDetail("ACC1"), (AccountDetail("ACC1"),)),
            (TransactionHistory("ACC1"), (AccountDetail("ACC1"), TransactionHistory("ACC1"))),
            (
                StatementDownload("ACC1", 1, 2025),
                (AccountDetail("ACC1"), StatementDownload("ACC1", 1, 2025)),
            ),
            (TransactionDetail("TX1"), (TransactionDetail("TX1"),)),
            (AddBeneficiary(), (BeneficiaryList(), AddBeneficiary())),
            (CardBlock("C1"), (CardDetail("C1"), CardBlock("C1"))),
            (EditProfile(), (Profile(), EditProfile())),
            (ChangePin(), (Security(), ChangePin())),
        ],
    )
    def test_chain_ends_with_target_after_its_ancestors(
        self, route: object, expected: tuple[object, ...]
    ) -> None:
        assert replay_chain(route) == expected  # type: ignore[arg-type]

    @pytest.mark.parametrize("root", list(ROOT_ROUTES.values()))
    def test_feature_roots_replay_nothing(self, root: object) -> None:
        assert replay_chain(root) == ()  # type: ignore[arg-type]

    def test_transfer_confirm_lands_on_root(self) -> None:
        request = TransferRequest(
            source_account_id="ACC1",
            destination_type=DestinationType.INTERNAL_ACCOUNT,
            destination_id="ACC2",
            amount=Decimal("10"),
        )

        assert replay_chain(TransferConfirm(request)) == ()

    def test_every_chain_stays_inside_the_feature(self) -> None:
        for cls, rule in REPLAY_CHAINS.items():
            sample = _sample(cls)
            for step in rule(sample):
                assert step.feature is sample.feature


class TestViewNames:
    def test_known_view_names(self) -> None:
        assert view_name(AccountDetail("ACC1")) == "account_detail"
        assert view_name(Security()) == "security_settings"
        assert view_name(ROOT_ROUTES[AccountDetail.feature]) == "accounts_list"


def _sample(cls: type) -> object:
    """Instancia uma variante com identificadores fictícios."""
    if cls is TransferConfirm:
        return TransferConfirm(
            TransferRequest(
                source_account_id="ACC1",
                destination_type=DestinationType.INTERNAL_ACCOUNT,
                destination_id="ACC2",
                amount=Decimal("1"),
            )
        )
    if cls is StatementDownload:
        return StatementDownload("ACC1", 1, 2025)
    required = [f for f in dataclasses.fields(cls) if f.default is dataclasses.MISSING]
    return cls(*["X1" for _ in required])
