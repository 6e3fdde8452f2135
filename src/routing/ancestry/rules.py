"""
Tabelas de reconstrução de pilha (ancestralidade) e de views.

Para cada variante de rota, define a sequência exata de pushes que um
deep link executa após limpar a pilha, de modo que o "voltar" aterrisse
na tela pai esperada. As tabelas são explícitas por variante; não há
busca em grafo.

Também define o nome de view de cada variante, usado por build().
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from routing.routes.accounts import (
    AccountDetail,
    AccountsList,
    Statement,
    StatementDownload,
    TransactionDetail,
    TransactionHistory,
)
from routing.routes.auth import (
    Biometric,
    ForgotPassword,
    Login,
    Otp,
    ResetPassword,
    SessionExpired,
)
from routing.routes.cards import (
    CardActivate,
    CardBlock,
    CardDetail,
    CardLimits,
    CardPinChange,
    CardSettings,
    CardsList,
)
from routing.routes.home import HomeDashboard, NotificationDetail, Notifications
from routing.routes.more import (
    About,
    ChangePassword,
    ChangePin,
    EditProfile,
    MoreMenu,
    NotificationSettings,
    Profile,
    Security,
    Support,
)
from routing.routes.root import ROUTES_BY_FEATURE
from routing.routes.transfer import (
    AddBeneficiary,
    BeneficiaryList,
    EditBeneficiary,
    ExternalTransfer,
    InternalTransfer,
    TransferConfirm,
    TransferConfirmation,
    TransferHome,
    TransferReceipt,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from routing.routes.base import FeatureRoute


def _root(_route: FeatureRoute) -> tuple[FeatureRoute, ...]:
    """Raiz da feature: nada a empilhar."""
    return ()


def _self(route: FeatureRoute) -> tuple[FeatureRoute, ...]:
    """Tela filha direta da raiz."""
    return (route,)


# Mapa de reconstrução
# Chave: classe da rota alvo
# Valor: função que devolve os pushes, do mais próximo da raiz ao alvo
REPLAY_CHAINS: dict[type[FeatureRoute], Callable[[FeatureRoute], tuple[FeatureRoute, ...]]] = {
    # Home
    HomeDashboard: _root,
    Notifications: _self,
    NotificationDetail: lambda r: (Notifications(), r),
    # Accounts
    AccountsList: _root,
    AccountDetail: _self,
    TransactionHistory: lambda r: (AccountDetail(r.account_id), r),  # type: ignore[attr-defined]
    # Sem conta de origem conhecida: empilha direto
    TransactionDetail: _self,
    Statement: lambda r: (AccountDetail(r.account_id), r),  # type: ignore[attr-defined]
    StatementDownload: lambda r: (AccountDetail(r.account_id), r),  # type: ignore[attr-defined]
    # Transfer
    TransferHome: _root,
    InternalTransfer: _self,
    ExternalTransfer: _self,
    BeneficiaryList: _self,
    AddBeneficiary: lambda r: (BeneficiaryList(), r),
    EditBeneficiary: lambda r: (BeneficiaryList(), r),
    # Confirmação exige o pedido em memória: deep link aterrissa na raiz
    TransferConfirm: _root,
    TransferConfirmation: _self,
    TransferReceipt: _self,
    # Cards
    CardsList: _root,
    CardDetail: _self,
    CardSettings: lambda r: (CardDetail(r.card_id), r),  # type: ignore[attr-defined]
    CardLimits: lambda r: (CardDetail(r.card_id), r),  # type: ignore[attr-defined]
    CardBlock: lambda r: (CardDetail(r.card_id), r),  # type: ignore[attr-defined]
    CardActivate: lambda r: (CardDetail(r.card_id), r),  # type: ignore[attr-defined]
    CardPinChange: lambda r: (CardDetail(r.card_id), r),  # type: ignore[attr-defined]
    # More
    MoreMenu: _root,
    Profile: _self,
    EditProfile: lambda r: (Profile(), r),
    Security: _self,
    ChangePassword: lambda r: (Security(), r),
    ChangePin: lambda r: (Security(), r),
    NotificationSettings: _self,
    Support: _self,
    About: _self,
    # Auth
    Login: _root,
    Biometric: _self,
    Otp: _self,
    ForgotPassword: _self,
    ResetPassword: _self,
    SessionExpired: _self,
}

# Nome da view construída para cada variante
VIEW_NAMES: dict[type[FeatureRoute], str] = {
    HomeDashboard: "dashboard",
    Notifications: "notifications",
    NotificationDetail: "notification_detail",
    AccountsList: "accounts_list",
    AccountDetail: "account_detail",
    TransactionHistory: "transaction_history",
    TransactionDetail: "transaction_detail",
    Statement: "statement",
    StatementDownload: "statement_download",
    TransferHome: "transfer_home",
    InternalTransfer: "internal_transfer",
    ExternalTransfer: "external_transfer",
    BeneficiaryList: "beneficiary_list",
    AddBeneficiary: "add_beneficiary",
    EditBeneficiary: "edit_beneficiary",
    TransferConfirm: "transfer_confirm",
    TransferConfirmation: "transfer_confirmation",
    TransferReceipt: "transfer_receipt",
    CardsList: "cards_list",
    CardDetail: "card_detail",
    CardSettings: "card_settings",
    CardLimits: "card_limits",
    CardBlock: "card_block",
    CardActivate: "card_activate",
    CardPinChange: "card_pin_change",
    MoreMenu: "more_menu",
    Profile: "profile",
    EditProfile: "edit_profile",
    Security: "security_settings",
    ChangePassword: "change_password",
    ChangePin: "change_pin",
    NotificationSettings: "notification_settings",
    Support: "support",
    About: "about",
    Login: "login",
    Biometric: "biometric_login",
    Otp: "otp_verification",
    ForgotPassword: "forgot_password",
    ResetPassword: "reset_password",
    SessionExpired: "session_expired",
}


def replay_chain(route: FeatureRoute) -> tuple[FeatureRoute, ...]:
    """
    Retorna os pushes necessários para reconstruir a tela da rota.

    Args:
        route: Rota alvo do deep link

    Returns:
        Rotas a empilhar em ordem (vazio para a raiz da feature)
    """
    return REPLAY_CHAINS[type(route)](route)


def view_name(route: FeatureRoute) -> str:
    """Retorna o nome da view da rota."""
    return VIEW_NAMES[type(route)]


def validate_replay_tables() -> list[str]:
    """
    Valida a integridade das tabelas de reconstrução.

    Verifica:
    - Toda variante de toda feature possui regra de reconstrução
    - Nenhuma regra aponta para classe fora do registro de rotas

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []
    known = {cls for routes in ROUTES_BY_FEATURE.values() for cls in routes}

    for feature, routes in ROUTES_BY_FEATURE.items():
        for cls in routes:
            if cls not in REPLAY_CHAINS:
                errors.append(f"Rota {feature.value}.{cls.__name__} ausente em REPLAY_CHAINS")

    for cls in REPLAY_CHAINS:
        if cls not in known:
            errors.append(f"REPLAY_CHAINS contém classe desconhecida: {cls.__name__}")

    return errors


def validate_view_tables() -> list[str]:
    """
    Valida que build() é total sobre a gramática de cada feature.

    Returns:
        Lista de erros encontrados (vazia se válido)
    """
    errors: list[str] = []
    seen: dict[str, str] = {}

    for feature, routes in ROUTES_BY_FEATURE.items():
        for cls in routes:
            name = VIEW_NAMES.get(cls)
            if name is None:
                errors.append(f"Rota {feature.value}.{cls.__name__} ausente em VIEW_NAMES")
                continue
            if name in seen:
                errors.append(f"View '{name}' duplicada: {seen[name]} e {cls.__name__}")
            seen[name] = cls.__name__

    return errors
