"""Testes das settings carregadas do ambiente."""

from __future__ import annotations

import pytest

from config.settings import (
    BaseSettings,
    NavigationSettings,
    SessionSettings,
    get_base_settings,
    get_navigation_settings,
    get_session_settings,
    validate_all_settings,
)
from routing import AppTab


class TestBaseSettings:
    def test_defaults_are_valid(self) -> None:
        settings = BaseSettings()

        assert settings.validate() == []
        assert settings.is_development is True
        assert settings.service_name == "bankapp_navigation"

    def test_debug_in_production_is_invalid(self) -> None:
        errors = BaseSettings(environment="production", debug=True).validate()

        assert any("DEBUG" in error for error in errors)

    def test_invalid_log_level(self) -> None:
        errors = BaseSettings(log_level="LOUD").validate()

        assert errors == ["LOG_LEVEL inválido: LOUD"]

    def test_loads_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ENVIRONMENT", "prod")
        monkeypatch.setenv("SERVICE_NAME", "nav-core")
        monkeypatch.setenv("LOG_LEVEL", "debug")

        settings = get_base_settings()

        assert settings.environment == "production"
        assert settings.service_name == "nav-core"
        assert settings.log_level == "DEBUG"
        assert get_base_settings() is settings


class TestSessionSettings:
    def test_defaults(self) -> None:
        settings = SessionSettings()

        assert settings.timeout_seconds == 1800
        assert settings.monitor_enabled is True
        assert settings.validate() == []

    def test_non_positive_timeout_is_invalid(self) -> None:
        assert SessionSettings(timeout_seconds=0).validate() == [
            "SESSION_TIMEOUT_SECONDS deve ser > 0"
        ]

    def test_loads_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SESSION_TIMEOUT_SECONDS", "60")
        monkeypatch.setenv("SESSION_MONITOR_ENABLED", "false")

        settings = get_session_settings()

        assert settings.timeout_seconds == 60
        assert settings.monitor_enabled is False


class TestNavigationSettings:
    def test_defaults(self) -> None:
        settings = NavigationSettings()

        assert settings.deep_link_scheme == "bankapp"
        assert settings.max_stack_depth == 50
        assert settings.tab is AppTab.HOME
        assert settings.validate() == []

    @pytest.mark.parametrize(
        ("kwargs", "fragment"),
        [
            ({"deep_link_scheme": ""}, "DEEP_LINK_SCHEME"),
            ({"deep_link_scheme": "bank app"}, "DEEP_LINK_SCHEME"),
            ({"max_stack_depth": 0}, "NAVIGATION_MAX_STACK_DEPTH"),
            ({"default_tab": "auth"}, "DEFAULT_TAB"),
        ],
    )
    def test_invalid_values(self, kwargs: dict[str, object], fragment: str) -> None:
        errors = NavigationSettings(**kwargs).validate()  # type: ignore[arg-type]

        assert len(errors) == 1
        assert fragment in errors[0]

    def test_loads_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DEEP_LINK_SCHEME", "BankAppDev")
        monkeypatch.setenv("NAVIGATION_MAX_STACK_DEPTH", "5")
        monkeypatch.setenv("DEFAULT_TAB", "Accounts")

        settings = get_navigation_settings()

        assert settings.deep_link_scheme == "bankappdev"
        assert settings.max_stack_depth == 5
        assert settings.tab is AppTab.ACCOUNTS


class TestValidateAllSettings:
    def test_aggregates_errors_from_every_group(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "LOUD")
        monkeypatch.setenv("SESSION_TIMEOUT_SECONDS", "-1")
        monkeypatch.setenv("DEFAULT_TAB", "nowhere")

        errors = validate_all_settings()

        assert len(errors) == 3

    def test_clean_environment_is_valid(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in (
            "LOG_LEVEL",
            "SERVICE_NAME",
            "ENVIRONMENT",
            "DEBUG",
            "SESSION_TIMEOUT_SECONDS",
            "DEEP_LINK_SCHEME",
            "NAVIGATION_MAX_STACK_DEPTH",
            "DEFAULT_TAB",
        ):
            monkeypatch.delenv(name, raising=False)

        assert validate_all_settings() == []
