"""
Contrato comum das rotas de feature.

Rotas são valores imutáveis (frozen dataclasses) comparáveis por igualdade.
Cada variante carrega exatamente os identificadores necessários para
reconstruir a tela, sem contexto implícito.
"""

from __future__ import annotations

from dataclasses import fields
from typing import Any, ClassVar
from urllib.parse import quote

from routing.routes.features import Feature


def quote_segment(value: object) -> str:
    """Codifica um identificador como um único segmento de caminho (/ ? # % inclusos)."""
    return quote(str(value), safe="")


class FeatureRoute:
    """
    Base de todas as rotas de feature.

    Subclasses por feature definem `feature` e `slug`; variantes concretas
    são dataclasses congeladas com slots.

    Attributes:
        feature: Feature dona da rota
        slug: Nome curto da variante (usado em route_id)
    """

    __slots__ = ()

    feature: ClassVar[Feature]
    slug: ClassVar[str]

    @property
    def route_id(self) -> str:
        """Identificador estável da rota (ex: accounts-detail-ACC1)."""
        parts = [self.feature.value, self.slug]
        parts.extend(str(value) for value in self._identity_values())
        return "-".join(parts)

    @property
    def path(self) -> str | None:
        """Caminho canônico do deep link (ids percent-encoded), ou None se não linkável."""
        raise NotImplementedError

    def params(self) -> dict[str, Any]:
        """Parâmetros da rota para construção de view (seguro para logs)."""
        return {f.name: getattr(self, f.name) for f in fields(self)}  # type: ignore[arg-type]

    def _identity_values(self) -> list[Any]:
        return list(self.params().values())
