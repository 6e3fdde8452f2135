"""
Coordinators de navegação.

Estrutura:
    - base.py: Engine genérica (pilha, modais, deep link, views)
    - home.py, accounts.py, transfer.py, cards.py, more.py, auth.py:
      coordinators de feature com navegação cross-feature
    - app_coordinator.py: Raiz (abas, gate de auth, reset global)
    - registry.py: Arena para a referência filho → pai
"""

from app.coordinators.accounts import AccountsCoordinator
from app.coordinators.app_coordinator import (
    COORDINATOR_CLASSES,
    AppCoordinator,
    AppSnapshot,
    DeepLinkOutcome,
    DeepLinkResult,
)
from app.coordinators.auth import AuthCoordinator
from app.coordinators.base import FeatureCoordinator
from app.coordinators.cards import CardsCoordinator
from app.coordinators.home import HomeCoordinator
from app.coordinators.more import MoreCoordinator
from app.coordinators.registry import DEFAULT_REGISTRY, CoordinatorRegistry
from app.coordinators.transfer import TransferCoordinator

__all__ = [
    "COORDINATOR_CLASSES",
    "DEFAULT_REGISTRY",
    "AccountsCoordinator",
    "AppCoordinator",
    "AppSnapshot",
    "AuthCoordinator",
    "CardsCoordinator",
    "CoordinatorRegistry",
    "DeepLinkOutcome",
    "DeepLinkResult",
    "FeatureCoordinator",
    "HomeCoordinator",
    "MoreCoordinator",
    "TransferCoordinator",
]
