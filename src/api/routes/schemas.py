"""Contratos HTTP (pydantic) da API de navegação."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DeepLinkRequest(BaseModel):
    """Deep link recebido pelo sistema operacional."""

    model_config = ConfigDict(extra="ignore")

    uri: str = Field(min_length=1, max_length=2048)


class DeepLinkErrorBody(BaseModel):
    """Erro de parsing serializado."""

    kind: str
    detail: str
    description: str


class DeepLinkResponse(BaseModel):
    """Desfecho do deep link e estado resultante."""

    outcome: str
    route_id: str | None = None
    error: DeepLinkErrorBody | None = None
    navigation: dict[str, Any]


class TruncateRequest(BaseModel):
    """Back-navigation da camada de view: mantém o prefixo de `length` itens."""

    model_config = ConfigDict(extra="ignore")

    length: int


class ViewHandleBody(BaseModel):
    """Pedido de construção de view."""

    feature: str
    view: str
    params: dict[str, Any] = Field(default_factory=dict)


class FeatureViewsResponse(BaseModel):
    """Views da raiz e da pilha de uma feature."""

    feature: str
    root: ViewHandleBody
    stack: list[ViewHandleBody] = Field(default_factory=list)


class LoginRequest(BaseModel):
    """Credenciais de login (nunca registradas em log)."""

    model_config = ConfigDict(extra="ignore")

    username: str
    password: str = Field(repr=False)


class SessionResponse(BaseModel):
    """Estado de sessão após um comando."""

    is_authenticated: bool
    navigation: dict[str, Any]
