"""Testes do composition root (wiring e validação de settings)."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from app.bootstrap import (
    bind_monitor_to_auth_source,
    build_app_coordinator,
    build_navigation_runtime,
    build_session_expiry_handler,
    build_session_monitor,
    initialize_app,
    initialize_test_app,
    validate_runtime_settings,
)
from app.coordinators import CoordinatorRegistry
from app.services import InMemoryAuthService
from app.sessions import SessionTimeoutMonitor
from config.logging import CorrelationIdFilter
from config.settings import NavigationSettings, SessionSettings
from routing import AppTab
from tests.fakes.fake_auth_service import FakeAuthService


@pytest.fixture
def _restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestBuilders:
    def test_build_app_coordinator_reads_navigation_settings(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DEFAULT_TAB", "transfer")
        registry = CoordinatorRegistry()

        coordinator = build_app_coordinator(FakeAuthService(), registry=registry)

        assert coordinator.selected_tab is AppTab.TRANSFER
        assert coordinator.registry_key in registry
        coordinator.close()

    def test_explicit_settings_win_over_environment(self) -> None:
        coordinator = build_app_coordinator(
            settings=NavigationSettings(default_tab="more"),
            registry=CoordinatorRegistry(),
        )

        assert coordinator.selected_tab is AppTab.MORE
        coordinator.close()

    def test_session_monitor_disabled(self) -> None:
        assert build_session_monitor(lambda: None, SessionSettings(monitor_enabled=False)) is None

    def test_session_monitor_uses_timeout(self) -> None:
        monitor = build_session_monitor(lambda: None, SessionSettings(timeout_seconds=90))

        assert isinstance(monitor, SessionTimeoutMonitor)
        assert monitor.timeout_seconds == 90

    def test_expiry_handler_resets_navigation_then_marks_source(self) -> None:
        service = FakeAuthService(authenticated=True)
        coordinator = build_app_coordinator(service, registry=CoordinatorRegistry())
        coordinator.handle_deep_link("bankapp://cards/C1")

        build_session_expiry_handler(coordinator, service)()

        assert coordinator.session_expired_modal is not None
        assert coordinator.cards.navigation_stack == ()
        assert service.expire_calls == 1
        assert service.is_authenticated is False
        assert [entry["trigger"] for entry in coordinator.auth_history] == [
            "login_succeeded",
            "session_expired",
        ]
        coordinator.close()

    def test_navigation_runtime(self) -> None:
        runtime = build_navigation_runtime()

        assert isinstance(runtime.auth_service, InMemoryAuthService)
        assert runtime.session_monitor is not None
        assert runtime.coordinator.is_authenticated is False

        runtime.close()

        assert runtime.session_monitor.running is False

    @pytest.mark.asyncio
    async def test_sign_out_from_source_stops_monitor(self) -> None:
        service = FakeAuthService(authenticated=True)
        runtime = build_navigation_runtime(service)
        assert runtime.session_monitor is not None
        runtime.session_monitor.start()

        service.sign_out()

        assert runtime.session_monitor.running is False
        assert runtime.coordinator.is_authenticated is False
        runtime.close()

    @pytest.mark.asyncio
    async def test_unbound_monitor_keeps_running(self) -> None:
        service = FakeAuthService(authenticated=True)
        coordinator = build_app_coordinator(service, registry=CoordinatorRegistry())
        monitor = SessionTimeoutMonitor(60, lambda: None)
        unbind = bind_monitor_to_auth_source(coordinator, monitor)
        monitor.start()

        unbind()
        service.sign_out()

        assert monitor.running is True
        await monitor.aclose()
        coordinator.close()


class TestValidateRuntimeSettings:
    def test_development_only_warns(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG)
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("DEFAULT_TAB", "nowhere")

        validate_runtime_settings()

        assert "settings_validation_failed" in caplog.messages

    def test_production_fails_fast(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("SESSION_TIMEOUT_SECONDS", "0")

        with pytest.raises(RuntimeError, match="production"):
            validate_runtime_settings()

    def test_valid_settings_pass(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("ENVIRONMENT", "DEBUG", "LOG_LEVEL", "SESSION_TIMEOUT_SECONDS", "DEFAULT_TAB"):
            monkeypatch.delenv(name, raising=False)

        validate_runtime_settings()


@pytest.mark.usefixtures("_restore_root_logger")
class TestInitializeApp:
    def test_uses_level_and_service_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        initialize_app()

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_test_app_logs_at_debug(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "ERROR")

        initialize_test_app()

        assert logging.getLogger().level == logging.DEBUG
