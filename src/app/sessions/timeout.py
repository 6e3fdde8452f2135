"""Monitor de inatividade da sessão autenticada.

Dispara o callback de expiração quando o tempo sem atividade excede o
timeout configurado. Atividade é sinalizada por touch() (ex: cada
comando de navegação recebido pela API).
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)


class SessionTimeoutMonitor:
    """Timer de inatividade baseado em asyncio."""

    __slots__ = ("_clock", "_last_activity", "_on_expired", "_task", "_timeout_seconds")

    def __init__(
        self,
        timeout_seconds: float,
        on_expired: Callable[[], None],
    ) -> None:
        """Inicializa o monitor.

        Args:
            timeout_seconds: Inatividade máxima permitida
            on_expired: Chamado uma vez quando a sessão expira
        """
        if timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds deve ser > 0, recebido: {timeout_seconds}")
        self._timeout_seconds = timeout_seconds
        self._on_expired = on_expired
        self._task: asyncio.Task[None] | None = None
        self._last_activity = 0.0
        self._clock: Callable[[], float] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def timeout_seconds(self) -> float:
        return self._timeout_seconds

    def start(self) -> None:
        """Inicia (ou reinicia) o monitor. Requer event loop rodando."""
        loop = asyncio.get_running_loop()
        self.stop()
        self._clock = loop.time
        self._last_activity = loop.time()
        self._task = loop.create_task(self._watch(loop.time), name="session_timeout_monitor")
        logger.info("session_monitor_started", extra={"timeout_seconds": self._timeout_seconds})

    def touch(self) -> None:
        """Registra atividade do usuário (no-op se parado)."""
        if self.running and self._clock is not None:
            self._last_activity = self._clock()

    def stop(self) -> None:
        """Para o monitor sem disparar expiração."""
        task, self._task = self._task, None
        if task is not None and not task.done():
            task.cancel()
            logger.info("session_monitor_stopped")

    async def aclose(self) -> None:
        """Para o monitor e aguarda o cancelamento (shutdown)."""
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    async def _watch(self, clock: Callable[[], float]) -> None:
        while True:
            idle = clock() - self._last_activity
            remaining = self._timeout_seconds - idle
            if remaining <= 0:
                break
            await asyncio.sleep(remaining)

        logger.info("session_idle_timeout", extra={"timeout_seconds": self._timeout_seconds})
        self._task = None
        try:
            self._on_expired()
        except Exception as exc:
            logger.error(
                "session_expiry_callback_failed",
                extra={"error_type": type(exc).__name__},
            )
