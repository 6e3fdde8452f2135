"""Testes da arena de coordinators."""

from __future__ import annotations

from app.coordinators import AppCoordinator, CoordinatorRegistry


class TestCoordinatorRegistry:
    def test_register_resolve_release(self) -> None:
        registry = CoordinatorRegistry()
        owner = object()

        key = registry.register(owner)

        assert key in registry
        assert len(registry) == 1
        assert registry.resolve(key) is owner
        assert registry.release(key) is True
        assert registry.release(key) is False
        assert registry.resolve(key) is None
        assert len(registry) == 0

    def test_keys_are_never_reused(self) -> None:
        registry = CoordinatorRegistry()
        first = registry.register(object())
        registry.release(first)

        assert registry.register(object()) != first

    def test_resolve_none_key(self) -> None:
        assert CoordinatorRegistry().resolve(None) is None

    def test_children_hold_only_the_parent_key(self, app_coordinator: AppCoordinator) -> None:
        for feature_coordinator in app_coordinator.snapshot().features:
            child = app_coordinator.coordinator_for(feature_coordinator)
            assert child.parent is app_coordinator
            assert "_parent_key" in vars(child)
            assert vars(child)["_parent_key"] == app_coordinator.registry_key
