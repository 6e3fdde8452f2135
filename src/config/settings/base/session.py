"""Settings de sessão autenticada.

Controla o monitor de inatividade que dispara a expiração de sessão.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class SessionSettings:
    """Configurações de sessão.

    Attributes:
        timeout_seconds: Inatividade máxima antes de expirar a sessão
        monitor_enabled: Se o monitor de inatividade roda no serviço
    """

    timeout_seconds: int = 1800  # 30 min
    monitor_enabled: bool = True

    def validate(self) -> list[str]:
        """Valida configurações de sessão.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.timeout_seconds <= 0:
            errors.append("SESSION_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_session_from_env() -> SessionSettings:
    """Carrega SessionSettings de variáveis de ambiente."""
    return SessionSettings(
        timeout_seconds=int(os.getenv("SESSION_TIMEOUT_SECONDS", "1800")),
        monitor_enabled=os.getenv("SESSION_MONITOR_ENABLED", "true").lower() in ("true", "1"),
    )


@lru_cache(maxsize=1)
def get_session_settings() -> SessionSettings:
    """Retorna instância cacheada de SessionSettings."""
    return _load_session_from_env()
