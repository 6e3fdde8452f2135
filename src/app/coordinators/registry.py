"""
Arena de coordinators.

O App Coordinator se registra aqui e os coordinators de feature guardam
apenas a chave. A referência para cima é uma busca na tabela, nunca um
ponteiro: após release(), resolve() devolve None e as chamadas
cross-feature viram no-op.
"""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Any

logger = logging.getLogger(__name__)


class CoordinatorRegistry:
    """Tabela chave → coordinator pai."""

    __slots__ = ("_entries", "_ids", "_lock")

    def __init__(self) -> None:
        self._entries: dict[int, Any] = {}
        self._ids = itertools.count(1)
        self._lock = threading.Lock()

    def register(self, coordinator: Any) -> int:
        """Registra um coordinator e retorna sua chave."""
        with self._lock:
            key = next(self._ids)
            self._entries[key] = coordinator
        logger.debug(
            "coordinator_registered",
            extra={"registry_key": key, "coordinator": type(coordinator).__name__},
        )
        return key

    def resolve(self, key: int | None) -> Any | None:
        """Retorna o coordinator da chave, ou None se liberado."""
        if key is None:
            return None
        with self._lock:
            return self._entries.get(key)

    def release(self, key: int) -> bool:
        """Libera a chave; retorna False se já estava liberada."""
        with self._lock:
            removed = self._entries.pop(key, None)
        if removed is None:
            return False
        logger.debug("coordinator_released", extra={"registry_key": key})
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries


# Arena padrão do processo
DEFAULT_REGISTRY = CoordinatorRegistry()
