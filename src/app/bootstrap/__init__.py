"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, valida settings e
monta o App Coordinator com seus colaboradores.

Uso:
    from app.bootstrap import initialize_app, build_navigation_runtime

    initialize_app()
    runtime = build_navigation_runtime()
"""

from __future__ import annotations

import logging

from app.bootstrap.dependencies import (
    NavigationRuntime,
    bind_monitor_to_auth_source,
    build_app_coordinator,
    build_navigation_runtime,
    build_session_expiry_handler,
    build_session_monitor,
    create_auth_service,
)
from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import get_base_settings, validate_all_settings

STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging em nível DEBUG para testes."""
    configure_logging(
        level="DEBUG",
        service_name=f"{get_base_settings().service_name}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    environment = get_base_settings().environment
    errors = validate_all_settings()

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if environment in STRICT_VALIDATION_ENVS:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


__all__ = [
    "NavigationRuntime",
    "bind_monitor_to_auth_source",
    "build_app_coordinator",
    "build_navigation_runtime",
    "build_session_expiry_handler",
    "build_session_monitor",
    "create_auth_service",
    "initialize_app",
    "initialize_test_app",
    "validate_runtime_settings",
]
