"""Configuração centralizada de logging.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap/)
    configure_logging(level="INFO", service_name="bankapp_navigation")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("deep_link_dispatched", extra={"route_id": "accounts-detail-ACC1"})
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import create_json_formatter

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

# Níveis de log válidos
VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "bankapp_navigation"

# Loggers de terceiros que seguem o nível do serviço, mas sem duplicar handlers
THIRD_PARTY_LOGGERS: tuple[str, ...] = ("uvicorn", "uvicorn.error", "uvicorn.access")


def configure_logging(
    level: str = "INFO",
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
    propagate_loggers: Iterable[str] = THIRD_PARTY_LOGGERS,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização (app/bootstrap/).

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
        propagate_loggers: Loggers cujos handlers próprios são removidos
            para que saiam pelo handler JSON da raiz.

    Raises:
        ValueError: Se o nível de log for inválido.
    """
    level_upper = level.upper()
    if level_upper not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Nível de log inválido: {level}. "
            f"Válidos: {', '.join(sorted(VALID_LOG_LEVELS))}"
        )

    handler = logging.StreamHandler()
    handler.setLevel(level_upper)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))

    root = logging.getLogger()
    root.setLevel(level_upper)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]

    for name in propagate_loggers:
        third_party = logging.getLogger(name)
        third_party.handlers = []
        third_party.propagate = True


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo (o filter injeta service e correlation_id)."""
    return logging.getLogger(name)


def log_collaborator_failure(
    logger: logging.Logger,
    component: str,
    operation: str,
    error: BaseException,
) -> None:
    """Log observável de falha de colaborador que não desfaz navegação.

    Usado quando um colaborador (ex: serviço de auth) falha depois que o
    estado de navegação já foi resetado.

    Args:
        logger: Logger instance.
        component: Nome do colaborador (ex: "auth_service").
        operation: Operação que falhou (ex: "logout").
        error: Exceção capturada (apenas o tipo vai para o log).
    """
    logger.warning(
        "collaborator_failed",
        extra={
            "component": component,
            "operation": operation,
            "error_type": type(error).__name__,
        },
    )
