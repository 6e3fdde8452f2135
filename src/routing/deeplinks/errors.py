"""
Tipos de resultado do parser de deep links.

Falhas de parsing são valores, nunca exceções: o chamador registra o
erro em log e descarta o link.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from routing.routes.root import RootRoute


class ParseErrorKind(StrEnum):
    """Categorias de erro de parsing."""

    INVALID_SCHEME = "invalid_scheme"
    UNKNOWN_ROUTE = "unknown_route"
    MALFORMED_PATH = "malformed_path"


_DESCRIPTIONS: dict[ParseErrorKind, str] = {
    ParseErrorKind.INVALID_SCHEME: "Scheme de URL inválido.",
    ParseErrorKind.UNKNOWN_ROUTE: "Feature desconhecida ou ausente no deep link.",
    ParseErrorKind.MALFORMED_PATH: "Caminho não corresponde a nenhuma rota da feature.",
}


@dataclass(frozen=True, slots=True)
class ParseError:
    """
    Erro de parsing de deep link.

    Attributes:
        kind: Categoria do erro
        detail: Detalhe legível (segmento ofensor, scheme recebido etc.)
    """

    kind: ParseErrorKind
    detail: str = ""

    @property
    def description(self) -> str:
        """Descrição padrão da categoria."""
        return _DESCRIPTIONS[self.kind]

    def to_log_dict(self) -> dict[str, Any]:
        """Representação para logs estruturados."""
        return {"error_kind": self.kind.value, "error_detail": self.detail}


@dataclass(frozen=True, slots=True)
class ParseResult:
    """
    Resultado de uma tentativa de parsing.

    Attributes:
        success: Se o link foi reconhecido
        route: Rota reconhecida (se success=True)
        error: Erro de parsing (se success=False)
    """

    success: bool
    route: RootRoute | None = None
    error: ParseError | None = None

    def __post_init__(self) -> None:
        """Valida consistência do resultado."""
        if self.success and (self.route is None or self.error is not None):
            raise ValueError("Parsing bem-sucedido deve incluir apenas route")
        if not self.success and (self.error is None or self.route is not None):
            raise ValueError("Parsing com falha deve incluir apenas error")

    @classmethod
    def ok(cls, route: RootRoute) -> ParseResult:
        """Cria resultado de sucesso."""
        return cls(success=True, route=route)

    @classmethod
    def fail(cls, kind: ParseErrorKind, detail: str = "") -> ParseResult:
        """Cria resultado de falha."""
        return cls(success=False, error=ParseError(kind=kind, detail=detail))
