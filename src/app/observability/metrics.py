"""Registro de métricas via structured logging.

As métricas são logs estruturados com `metric_type`, agregáveis por
qualquer backend de logs.

Métricas suportadas:
- deep_link: counter por desfecho (deferred, dispatched, rejected)
- navigation_reset: counter de resets globais (logout, session_expired)
"""

from __future__ import annotations

import logging

from app.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)


def record_deep_link(
    outcome: str,
    feature: str | None = None,
    error_kind: str | None = None,
) -> None:
    """Registra o desfecho de um deep link.

    Args:
        outcome: deferred, dispatched ou rejected
        feature: Feature de destino (quando parseado)
        error_kind: Categoria do erro de parsing (quando rejeitado)
    """
    extra: dict[str, str | None] = {
        "metric_type": "deep_link",
        "outcome": outcome,
        "correlation_id": get_correlation_id(),
    }
    if feature is not None:
        extra["feature"] = feature
    if error_kind is not None:
        extra["error_kind"] = error_kind
    logger.info("metric_deep_link", extra=extra)


def record_navigation_reset(reason: str, coordinators_reset: int) -> None:
    """Registra reset global de navegação.

    Args:
        reason: logout ou session_expired
        coordinators_reset: Quantidade de coordinators resetados
    """
    logger.info(
        "metric_navigation_reset",
        extra={
            "metric_type": "navigation_reset",
            "reason": reason,
            "coordinators_reset": coordinators_reset,
            "correlation_id": get_correlation_id(),
        },
    )
