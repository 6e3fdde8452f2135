"""Configuração do pytest para o núcleo de navegação bankapp."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from app.coordinators import AppCoordinator, CoordinatorRegistry  # noqa: E402
from config.settings import NavigationSettings, clear_settings_cache  # noqa: E402
from tests.fakes.fake_auth_service import FakeAuthService  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    """Settings são cacheadas por processo; cada teste lê o ambiente atual."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def registry() -> CoordinatorRegistry:
    """Arena isolada por teste."""
    return CoordinatorRegistry()


@pytest.fixture
def auth_service() -> FakeAuthService:
    return FakeAuthService()


@pytest.fixture
def app_coordinator(
    auth_service: FakeAuthService,
    registry: CoordinatorRegistry,
) -> Iterator[AppCoordinator]:
    """App Coordinator sem sessão, com settings padrão."""
    coordinator = AppCoordinator(
        auth_service,
        settings=NavigationSettings(),
        registry=registry,
    )
    yield coordinator
    coordinator.close()


@pytest.fixture
def signed_in_coordinator(
    app_coordinator: AppCoordinator,
    auth_service: FakeAuthService,
) -> AppCoordinator:
    """App Coordinator com sessão ativa."""
    auth_service.sign_in()
    return app_coordinator
