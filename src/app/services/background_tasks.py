"""Controle de tasks assíncronas fire-and-forget (ex: logout remoto).

Falhas das tasks são registradas em log e nunca propagadas para quem
agendou: a navegação já foi resetada quando a task roda.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Coroutine

logger = logging.getLogger(__name__)

_active_tasks: set[asyncio.Task[Any]] = set()


def schedule_background_task(
    *,
    name: str,
    coroutine: Coroutine[Any, Any, Any],
) -> asyncio.Task[Any] | None:
    """Agenda coroutine sem aguardar o resultado.

    Com event loop rodando, cria uma task rastreada. Sem loop (chamada
    síncrona fora do servidor) a coroutine é descartada e registrada em
    log: quem agenda nunca bloqueia esperando o colaborador.

    Args:
        name: Nome lógico da task (para logs)
        coroutine: Coroutine a executar

    Returns:
        Task criada, ou None se descartada por falta de loop
    """
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        _skip_without_loop(name, coroutine)
        return None

    task = loop.create_task(coroutine, name=name)
    _active_tasks.add(task)
    task.add_done_callback(_on_task_done)
    logger.debug(
        "background_task_scheduled",
        extra={"task_name": name, "active_tasks": len(_active_tasks)},
    )
    return task


def active_task_count() -> int:
    """Quantidade de tasks ainda pendentes."""
    return len(_active_tasks)


def _skip_without_loop(name: str, coroutine: Coroutine[Any, Any, Any]) -> None:
    coroutine.close()
    logger.warning("background_task_skipped_no_loop", extra={"task_name": name})


def _on_task_done(task: asyncio.Task[Any]) -> None:
    _active_tasks.discard(task)
    with contextlib.suppress(asyncio.CancelledError):
        exc = task.exception()
        if exc is not None:
            _log_failure(task.get_name(), exc)


def _log_failure(name: str, exc: BaseException) -> None:
    logger.error(
        "background_task_failed",
        extra={
            "task_name": name,
            "error_type": type(exc).__name__,
            "active_tasks": len(_active_tasks),
        },
    )


async def drain_background_tasks(timeout_seconds: float = 30.0) -> None:
    """Aguarda tasks pendentes durante shutdown do processo."""
    if not _active_tasks:
        return

    pending_now = list(_active_tasks)
    logger.info(
        "background_tasks_shutdown_wait",
        extra={"pending_tasks": len(pending_now), "timeout_seconds": timeout_seconds},
    )
    _, pending = await asyncio.wait(pending_now, timeout=timeout_seconds)
    if not pending:
        return

    for task in pending:
        task.cancel()
    await asyncio.gather(*pending, return_exceptions=True)
    logger.warning(
        "background_tasks_shutdown_cancelled",
        extra={"cancelled_tasks": len(pending)},
    )
