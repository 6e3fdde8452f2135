"""Testes para config.logging.

Cobre: configure_logging, get_logger, log_collaborator_failure,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_collaborator_failure,
)
from config.logging.config import DEFAULT_SERVICE_NAME, THIRD_PARTY_LOGGERS, VALID_LOG_LEVELS
from utils.errors import AuthServiceError


def _record(msg: str = "message", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestConfigureLogging:
    """Testes para configure_logging."""

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            ("INFO", logging.INFO),
            ("DEBUG", logging.DEBUG),
            ("warning", logging.WARNING),
            ("CRITICAL", logging.CRITICAL),
        ],
    )
    def test_configure_logging_sets_root_level(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_configure_logging_invalid_level_raises(self) -> None:
        """Nível inválido levanta ValueError."""
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="VERBOSE")

    def test_configure_logging_replaces_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_third_party_loggers_propagate_to_root(self) -> None:
        uvicorn_logger = logging.getLogger("uvicorn.access")
        uvicorn_logger.handlers = [logging.NullHandler()]
        uvicorn_logger.propagate = False

        configure_logging()

        assert "uvicorn.access" in THIRD_PARTY_LOGGERS
        assert uvicorn_logger.handlers == []
        assert uvicorn_logger.propagate is True

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "bankapp_navigation"


class TestGetLogger:
    def test_get_logger_same_name_returns_same_instance(self) -> None:
        logger = get_logger("app.coordinators")
        assert isinstance(logger, logging.Logger)
        assert logger is get_logger("app.coordinators")


class TestLogCollaboratorFailure:
    """Falhas de colaborador são registradas sem dados sensíveis."""

    def test_logs_component_operation_and_error_type(self) -> None:
        logger = MagicMock(spec=logging.Logger)

        log_collaborator_failure(logger, "auth_service", "logout", AuthServiceError("token=abc"))

        logger.warning.assert_called_once()
        args, kwargs = logger.warning.call_args
        assert args[0] == "collaborator_failed"
        assert kwargs["extra"] == {
            "component": "auth_service",
            "operation": "logout",
            "error_type": "AuthServiceError",
        }


class TestCorrelationIdFilter:
    def test_filter_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("my_service", lambda: "corr-123")
        record = _record()

        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "my_service"

    def test_filter_preserves_explicit_correlation_id(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"

        filter_.filter(record)

        assert record.correlation_id == "explicit-id"

    def test_filter_uses_empty_string_when_no_getter(self) -> None:
        filter_ = CorrelationIdFilter("service_name", None)
        record = _record()

        filter_.filter(record)

        assert record.correlation_id == ""


class TestCreateJsonFormatter:
    def test_required_fields_and_rename_map(self) -> None:
        assert REQUIRED_LOG_FIELDS == (
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        )
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_formats_record_with_extra_fields(self) -> None:
        formatter = create_json_formatter()
        record = _record("deep_link_deferred")
        CorrelationIdFilter("bankapp_navigation", lambda: "corr-1").filter(record)
        record.route_id = "accounts-detail-ACC1"

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "deep_link_deferred"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "test"
        assert payload["correlation_id"] == "corr-1"
        assert payload["service"] == "bankapp_navigation"
        assert payload["route_id"] == "accounts-detail-ACC1"
