"""Rotas da feature Accounts (contas, extratos e transações)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from routing.routes.base import FeatureRoute, quote_segment
from routing.routes.features import Feature


class AccountsRoute(FeatureRoute):
    """Base das rotas da aba Accounts."""

    __slots__ = ()

    feature: ClassVar[Feature] = Feature.ACCOUNTS


@dataclass(frozen=True, slots=True)
class AccountsList(AccountsRoute):
    """Lista de contas (raiz da aba)."""

    slug: ClassVar[str] = "list"

    @property
    def path(self) -> str:
        return "accounts"


@dataclass(frozen=True, slots=True)
class AccountDetail(AccountsRoute):
    """Detalhe de uma conta."""

    account_id: str
    slug: ClassVar[str] = "detail"

    @property
    def path(self) -> str:
        return f"accounts/{quote_segment(self.account_id)}"


@dataclass(frozen=True, slots=True)
class TransactionHistory(AccountsRoute):
    """Histórico de transações de uma conta."""

    account_id: str
    slug: ClassVar[str] = "transactions"

    @property
    def path(self) -> str:
        return f"accounts/{quote_segment(self.account_id)}/transactions"


@dataclass(frozen=True, slots=True)
class TransactionDetail(AccountsRoute):
    """Detalhe de uma transação (sem contexto de conta)."""

    transaction_id: str
    slug: ClassVar[str] = "transactionDetail"

    @property
    def path(self) -> str:
        return f"accounts/transactions/{quote_segment(self.transaction_id)}"


@dataclass(frozen=True, slots=True)
class Statement(AccountsRoute):
    """Seleção de extrato de uma conta."""

    account_id: str
    slug: ClassVar[str] = "statement"

    @property
    def path(self) -> str:
        return f"accounts/{quote_segment(self.account_id)}/statement"


@dataclass(frozen=True, slots=True)
class StatementDownload(AccountsRoute):
    """Download do extrato mensal de uma conta."""

    account_id: str
    month: int
    year: int
    slug: ClassVar[str] = "statementDownload"

    def __post_init__(self) -> None:
        """Valida mês e ano do extrato."""
        if not 1 <= self.month <= 12:
            raise ValueError(f"month deve estar entre 1 e 12, recebido: {self.month}")
        if not 1000 <= self.year <= 9999:
            raise ValueError(f"year deve ter 4 dígitos, recebido: {self.year}")

    @property
    def path(self) -> str:
        return f"accounts/{quote_segment(self.account_id)}/statement/{self.month}/{self.year}"


ACCOUNTS_ROUTES: tuple[type[AccountsRoute], ...] = (
    AccountsList,
    AccountDetail,
    TransactionHistory,
    TransactionDetail,
    Statement,
    StatementDownload,
)
