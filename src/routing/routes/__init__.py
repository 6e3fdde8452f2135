"""
Exports públicos do módulo routing/routes.

Famílias fechadas de rotas por feature e a RootRoute que as compõe.
"""

from routing.routes.accounts import (
    ACCOUNTS_ROUTES,
    AccountDetail,
    AccountsList,
    AccountsRoute,
    Statement,
    StatementDownload,
    TransactionDetail,
    TransactionHistory,
)
from routing.routes.auth import (
    AUTH_ROUTES,
    AuthRoute,
    Biometric,
    ForgotPassword,
    Login,
    Otp,
    ResetPassword,
    SessionExpired,
)
from routing.routes.base import FeatureRoute
from routing.routes.cards import (
    CARDS_ROUTES,
    CardActivate,
    CardBlock,
    CardDetail,
    CardLimits,
    CardPinChange,
    CardSettings,
    CardsList,
    CardsRoute,
)
from routing.routes.features import (
    DEFAULT_TAB,
    AppTab,
    Feature,
    feature_for_tab,
    tab_for_feature,
)
from routing.routes.home import (
    HOME_ROUTES,
    HomeDashboard,
    HomeRoute,
    NotificationDetail,
    Notifications,
)
from routing.routes.more import (
    MORE_ROUTES,
    About,
    ChangePassword,
    ChangePin,
    EditProfile,
    MoreMenu,
    MoreRoute,
    NotificationSettings,
    Profile,
    Security,
    Support,
)
from routing.routes.root import (
    ROOT_ROUTES,
    ROUTES_BY_FEATURE,
    RootRoute,
    is_root_route,
)
from routing.routes.transfer import (
    TRANSFER_ROUTES,
    AddBeneficiary,
    BeneficiaryList,
    EditBeneficiary,
    ExternalTransfer,
    InternalTransfer,
    TransferConfirm,
    TransferConfirmation,
    TransferHome,
    TransferReceipt,
    TransferRoute,
)
from routing.routes.values import (
    BlockReason,
    CardStatus,
    DestinationType,
    TransferRequest,
)

__all__ = [
    "ACCOUNTS_ROUTES",
    "AUTH_ROUTES",
    "CARDS_ROUTES",
    "DEFAULT_TAB",
    "HOME_ROUTES",
    "MORE_ROUTES",
    "ROOT_ROUTES",
    "ROUTES_BY_FEATURE",
    "TRANSFER_ROUTES",
    "About",
    "AccountDetail",
    "AccountsList",
    "AccountsRoute",
    "AddBeneficiary",
    "AppTab",
    "AuthRoute",
    "BeneficiaryList",
    "Biometric",
    "BlockReason",
    "CardActivate",
    "CardBlock",
    "CardDetail",
    "CardLimits",
    "CardPinChange",
    "CardSettings",
    "CardStatus",
    "CardsList",
    "CardsRoute",
    "ChangePassword",
    "ChangePin",
    "DestinationType",
    "EditBeneficiary",
    "EditProfile",
    "ExternalTransfer",
    "Feature",
    "FeatureRoute",
    "ForgotPassword",
    "HomeDashboard",
    "HomeRoute",
    "InternalTransfer",
    "Login",
    "MoreMenu",
    "MoreRoute",
    "NotificationDetail",
    "NotificationSettings",
    "Notifications",
    "Otp",
    "Profile",
    "ResetPassword",
    "RootRoute",
    "Security",
    "SessionExpired",
    "Statement",
    "StatementDownload",
    "Support",
    "TransactionDetail",
    "TransactionHistory",
    "TransferConfirm",
    "TransferConfirmation",
    "TransferHome",
    "TransferReceipt",
    "TransferRequest",
    "TransferRoute",
    "feature_for_tab",
    "is_root_route",
    "tab_for_feature",
]
