"""Rotas da feature Transfer (transferências e beneficiários)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from routing.routes.base import FeatureRoute, quote_segment
from routing.routes.features import Feature
from routing.routes.values import TransferRequest


class TransferRoute(FeatureRoute):
    """Base das rotas da aba Transfer."""

    __slots__ = ()

    feature: ClassVar[Feature] = Feature.TRANSFER


@dataclass(frozen=True, slots=True)
class TransferHome(TransferRoute):
    """Home de transferências (raiz da aba)."""

    slug: ClassVar[str] = "home"

    @property
    def path(self) -> str:
        return "transfer"


@dataclass(frozen=True, slots=True)
class InternalTransfer(TransferRoute):
    """Transferência entre contas próprias, opcionalmente com origem definida."""

    from_account_id: str | None = None
    slug: ClassVar[str] = "internalTransfer"

    @property
    def path(self) -> str:
        if self.from_account_id is None:
            return "transfer/internal"
        return f"transfer/internal/{quote_segment(self.from_account_id)}"

    def _identity_values(self) -> list[Any]:
        return [] if self.from_account_id is None else [self.from_account_id]


@dataclass(frozen=True, slots=True)
class ExternalTransfer(TransferRoute):
    """Transferência para terceiros."""

    slug: ClassVar[str] = "externalTransfer"

    @property
    def path(self) -> str:
        return "transfer/external"


@dataclass(frozen=True, slots=True)
class BeneficiaryList(TransferRoute):
    """Lista de beneficiários."""

    slug: ClassVar[str] = "beneficiaryList"

    @property
    def path(self) -> str:
        return "transfer/beneficiaries"


@dataclass(frozen=True, slots=True)
class AddBeneficiary(TransferRoute):
    """Cadastro de beneficiário."""

    slug: ClassVar[str] = "addBeneficiary"

    @property
    def path(self) -> str:
        return "transfer/beneficiaries/add"


@dataclass(frozen=True, slots=True)
class EditBeneficiary(TransferRoute):
    """Edição de beneficiário."""

    beneficiary_id: str
    slug: ClassVar[str] = "editBeneficiary"

    @property
    def path(self) -> str:
        return f"transfer/beneficiaries/{quote_segment(self.beneficiary_id)}/edit"


@dataclass(frozen=True, slots=True)
class TransferConfirm(TransferRoute):
    """
    Confirmação de um pedido em andamento.

    Não é linkável: o pedido só existe dentro do fluxo de transferência.
    """

    request: TransferRequest
    slug: ClassVar[str] = "confirm"

    @property
    def path(self) -> None:
        return None

    def params(self) -> dict[str, Any]:
        return {
            "request_id": self.request.request_id,
            "source_account_id": self.request.source_account_id,
            "destination_type": self.request.destination_type.value,
            "destination_id": self.request.destination_id,
            "amount": str(self.request.amount),
            "currency": self.request.currency,
        }

    def _identity_values(self) -> list[Any]:
        return [self.request.request_id]


@dataclass(frozen=True, slots=True)
class TransferConfirmation(TransferRoute):
    """Tela de transferência concluída."""

    transfer_id: str
    slug: ClassVar[str] = "confirmation"

    @property
    def path(self) -> str:
        return f"transfer/confirmation/{quote_segment(self.transfer_id)}"


@dataclass(frozen=True, slots=True)
class TransferReceipt(TransferRoute):
    """Comprovante de transferência."""

    transfer_id: str
    slug: ClassVar[str] = "receipt"

    @property
    def path(self) -> str:
        return f"transfer/receipt/{quote_segment(self.transfer_id)}"


TRANSFER_ROUTES: tuple[type[TransferRoute], ...] = (
    TransferHome,
    InternalTransfer,
    ExternalTransfer,
    BeneficiaryList,
    AddBeneficiary,
    EditBeneficiary,
    TransferConfirm,
    TransferConfirmation,
    TransferReceipt,
)
