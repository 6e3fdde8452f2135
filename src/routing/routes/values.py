"""
Valores de domínio carregados por rotas.

Apenas o necessário para identificar telas: status de cartão,
motivo de bloqueio e o pedido de transferência em confirmação.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import StrEnum


class CardStatus(StrEnum):
    """Status de um cartão."""

    ACTIVE = "active"
    INACTIVE = "inactive"
    BLOCKED = "blocked"
    PENDING_ACTIVATION = "pendingActivation"
    EXPIRED = "expired"
    CANCELLED = "cancelled"


class BlockReason(StrEnum):
    """Motivo informado no bloqueio de cartão."""

    LOST = "lost"
    STOLEN = "stolen"
    DAMAGED = "damaged"
    SUSPICIOUS = "suspicious"


class DestinationType(StrEnum):
    """Tipo de destino de uma transferência."""

    INTERNAL_ACCOUNT = "internal_account"
    BENEFICIARY = "beneficiary"


@dataclass(frozen=True, slots=True)
class TransferRequest:
    """
    Pedido de transferência aguardando confirmação.

    Attributes:
        source_account_id: Conta de origem
        destination_type: Conta interna ou beneficiário
        destination_id: ID da conta ou do beneficiário de destino
        amount: Valor (Decimal, sempre positivo)
        currency: Código ISO da moeda
        description: Descrição livre
    """

    source_account_id: str
    destination_type: DestinationType
    destination_id: str
    amount: Decimal
    currency: str = "USD"
    description: str = ""

    def __post_init__(self) -> None:
        """Valida invariantes do pedido."""
        if self.amount <= 0:
            raise ValueError(f"amount deve ser positivo, recebido: {self.amount}")
        if not self.source_account_id:
            raise ValueError("source_account_id não pode ser vazio")

    @property
    def request_id(self) -> str:
        """Identificador derivado do conteúdo do pedido."""
        return (
            f"{self.source_account_id}:{self.destination_type.value}:"
            f"{self.destination_id}:{self.amount}:{self.currency}"
        )
