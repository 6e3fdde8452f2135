"""Rotas da feature Cards (cartões e controles)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from routing.routes.base import FeatureRoute, quote_segment
from routing.routes.features import Feature
from routing.routes.values import BlockReason, CardStatus


class CardsRoute(FeatureRoute):
    """Base das rotas da aba Cards."""

    __slots__ = ()

    feature: ClassVar[Feature] = Feature.CARDS


@dataclass(frozen=True, slots=True)
class CardsList(CardsRoute):
    """Lista de cartões (raiz da aba)."""

    slug: ClassVar[str] = "list"

    @property
    def path(self) -> str:
        return "cards"


@dataclass(frozen=True, slots=True)
class CardDetail(CardsRoute):
    """Detalhe do cartão."""

    card_id: str
    slug: ClassVar[str] = "detail"

    @property
    def path(self) -> str:
        return f"cards/{quote_segment(self.card_id)}"


@dataclass(frozen=True, slots=True)
class CardSettings(CardsRoute):
    """Configurações do cartão."""

    card_id: str
    slug: ClassVar[str] = "settings"

    @property
    def path(self) -> str:
        return f"cards/{quote_segment(self.card_id)}/settings"


@dataclass(frozen=True, slots=True)
class CardLimits(CardsRoute):
    """Limites do cartão."""

    card_id: str
    slug: ClassVar[str] = "limits"

    @property
    def path(self) -> str:
        return f"cards/{quote_segment(self.card_id)}/limits"


@dataclass(frozen=True, slots=True)
class CardBlock(CardsRoute):
    """
    Bloqueio/desbloqueio do cartão.

    Deep links sempre chegam com status ACTIVE (modo bloqueio); o status
    real é resolvido pela view ao carregar o cartão.
    """

    card_id: str
    current_status: CardStatus = CardStatus.ACTIVE
    block_reason: BlockReason | None = None
    slug: ClassVar[str] = "block"

    @property
    def path(self) -> str:
        return f"cards/{quote_segment(self.card_id)}/block"

    def params(self) -> dict[str, Any]:
        return {
            "card_id": self.card_id,
            "current_status": self.current_status.value,
            "block_reason": self.block_reason.value if self.block_reason else None,
        }

    def _identity_values(self) -> list[Any]:
        return [self.card_id]


@dataclass(frozen=True, slots=True)
class CardActivate(CardsRoute):
    """Ativação do cartão."""

    card_id: str
    slug: ClassVar[str] = "activate"

    @property
    def path(self) -> str:
        return f"cards/{quote_segment(self.card_id)}/activate"


@dataclass(frozen=True, slots=True)
class CardPinChange(CardsRoute):
    """Troca de PIN do cartão."""

    card_id: str
    slug: ClassVar[str] = "pinChange"

    @property
    def path(self) -> str:
        return f"cards/{quote_segment(self.card_id)}/pin-change"


CARDS_ROUTES: tuple[type[CardsRoute], ...] = (
    CardsList,
    CardDetail,
    CardSettings,
    CardLimits,
    CardBlock,
    CardActivate,
    CardPinChange,
)
