"""
Parser de deep links: URI externa → RootRoute.

Função pura, sem IO e sem efeitos colaterais. Qualquer string de
entrada produz um ParseResult; nenhuma exceção atravessa esta fronteira.

Gramática:
    <scheme>://<feature>[/<segment>]*
    feature ::= home | accounts | transfer | cards | more | auth

O primeiro segmento seleciona a feature; os demais são casados contra a
gramática fixa da feature. Query string e fragmento são ignorados.
"""

from __future__ import annotations

from typing import TYPE_CHECKING
from urllib.parse import unquote, urlsplit

from routing.deeplinks.errors import ParseErrorKind, ParseResult
from routing.routes.accounts import (
    AccountDetail,
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
)
from routing.routes.features import Feature
from routing.routes.home import NotificationDetail, Notifications
from routing.routes.more import (
    About,
    ChangePassword,
    ChangePin,
    EditProfile,
    NotificationSettings,
    Profile,
    Security,
    Support,
)
from routing.routes.root import RootRoute
from routing.routes.transfer import (
    AddBeneficiary,
    BeneficiaryList,
    EditBeneficiary,
    ExternalTransfer,
    InternalTransfer,
    TransferConfirmation,
    TransferReceipt,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from routing.routes.base import FeatureRoute

# Scheme registrado do app
DEFAULT_SCHEME = "bankapp"


def parse_deep_link(uri: str, scheme: str = DEFAULT_SCHEME) -> ParseResult:
    """
    Converte uma URI de deep link em RootRoute.

    Args:
        uri: URI recebida externamente (ex: bankapp://accounts/ACC1)
        scheme: Scheme registrado do app

    Returns:
        ParseResult com a rota reconhecida ou o erro tipado
    """
    try:
        parts = urlsplit(uri.strip())
    except ValueError as exc:
        return ParseResult.fail(ParseErrorKind.MALFORMED_PATH, str(exc))

    if parts.scheme != scheme.lower():
        return ParseResult.fail(
            ParseErrorKind.INVALID_SCHEME,
            f"esperado '{scheme}', recebido '{parts.scheme}'",
        )

    segments = split_segments(parts.netloc, parts.path)
    if not segments:
        return ParseResult.fail(ParseErrorKind.UNKNOWN_ROUTE, "caminho vazio")

    head, rest = segments[0], segments[1:]
    try:
        feature = Feature(head)
    except ValueError:
        return ParseResult.fail(ParseErrorKind.UNKNOWN_ROUTE, f"feature '{head}'")

    if not rest:
        return ParseResult.ok(RootRoute(feature=feature))

    route = _GRAMMARS[feature](rest)
    if route is None:
        return ParseResult.fail(
            ParseErrorKind.MALFORMED_PATH,
            f"{feature.value}/{'/'.join(rest)}",
        )
    return ParseResult.ok(RootRoute(feature=feature, route=route))


def split_segments(netloc: str, path: str) -> list[str]:
    """
    Extrai os segmentos de uma URI (host + caminho), já decodificados.

    Segmentos vazios (barras duplicadas ou finais) são descartados.
    """
    raw = [netloc, *path.split("/")]
    return [unquote(segment) for segment in raw if segment]


def _parse_int(value: str) -> int | None:
    if value.isascii() and value.isdigit():
        return int(value)
    return None


# ──────────────────────────────────────────────────────────────────────────────
# Gramáticas por feature
# ──────────────────────────────────────────────────────────────────────────────


def _home(rest: list[str]) -> FeatureRoute | None:
    if rest[0] != "notifications":
        return None
    if len(rest) == 1:
        return Notifications()
    if len(rest) == 2:
        return NotificationDetail(notification_id=rest[1])
    return None


def _accounts(rest: list[str]) -> FeatureRoute | None:
    if len(rest) == 1:
        return AccountDetail(account_id=rest[0])

    if len(rest) == 2:
        first, second = rest
        if second == "transactions":
            return TransactionHistory(account_id=first)
        if second == "statement":
            return Statement(account_id=first)
        if first == "transactions":
            return TransactionDetail(transaction_id=second)
        return None

    if len(rest) == 4 and rest[1] == "statement":
        month = _parse_int(rest[2])
        year = _parse_int(rest[3])
        if month is None or year is None or len(rest[3]) != 4:
            return None
        if not 1 <= month <= 12:
            return None
        return StatementDownload(account_id=rest[0], month=month, year=year)

    return None


_TRANSFER_FIXED: dict[tuple[str, ...], FeatureRoute] = {
    ("internal",): InternalTransfer(),
    ("external",): ExternalTransfer(),
    ("beneficiaries",): BeneficiaryList(),
    ("beneficiaries", "add"): AddBeneficiary(),
}


def _transfer(rest: list[str]) -> FeatureRoute | None:
    fixed = _TRANSFER_FIXED.get(tuple(rest))
    if fixed is not None:
        return fixed

    if len(rest) == 2:
        kind, identifier = rest
        if kind == "internal":
            return InternalTransfer(from_account_id=identifier)
        if kind == "confirmation":
            return TransferConfirmation(transfer_id=identifier)
        if kind == "receipt":
            return TransferReceipt(transfer_id=identifier)
        return None

    if len(rest) == 3 and rest[0] == "beneficiaries" and rest[2] == "edit":
        return EditBeneficiary(beneficiary_id=rest[1])

    return None


_CARD_ACTIONS: dict[str, type[FeatureRoute]] = {
    "settings": CardSettings,
    "limits": CardLimits,
    "block": CardBlock,
    "activate": CardActivate,
    "pin-change": CardPinChange,
}


def _cards(rest: list[str]) -> FeatureRoute | None:
    if len(rest) == 1:
        return CardDetail(card_id=rest[0])
    if len(rest) == 2:
        action = _CARD_ACTIONS.get(rest[1])
        if action is None:
            return None
        # Bloqueio via deep link sempre parte de cartão ativo
        return action(card_id=rest[0])  # type: ignore[call-arg]
    return None


_MORE_PATHS: dict[tuple[str, ...], FeatureRoute] = {
    ("profile",): Profile(),
    ("profile", "edit"): EditProfile(),
    ("security",): Security(),
    ("security", "change-password"): ChangePassword(),
    ("security", "change-pin"): ChangePin(),
    ("notification-settings",): NotificationSettings(),
    ("support",): Support(),
    ("about",): About(),
}


def _more(rest: list[str]) -> FeatureRoute | None:
    return _MORE_PATHS.get(tuple(rest))


_AUTH_PATHS: dict[tuple[str, ...], FeatureRoute] = {
    ("login",): Login(),
    ("biometric",): Biometric(),
    ("forgot-password",): ForgotPassword(),
    ("session-expired",): SessionExpired(),
}


def _auth(rest: list[str]) -> FeatureRoute | None:
    fixed = _AUTH_PATHS.get(tuple(rest))
    if fixed is not None:
        return fixed
    if len(rest) == 2:
        kind, value = rest
        if kind == "otp":
            return Otp(reference=value)
        if kind == "reset-password":
            return ResetPassword(token=value)
    return None


_GRAMMARS: dict[Feature, Callable[[list[str]], FeatureRoute | None]] = {
    Feature.HOME: _home,
    Feature.ACCOUNTS: _accounts,
    Feature.TRANSFER: _transfer,
    Feature.CARDS: _cards,
    Feature.MORE: _more,
    Feature.AUTH: _auth,
}
