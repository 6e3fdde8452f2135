"""Testes de correlation_id e métricas via logs."""

from __future__ import annotations

import logging

import pytest

from app.observability import (
    correlation_scope,
    generate_correlation_id,
    get_correlation_id,
    record_deep_link,
    record_navigation_reset,
)


class TestCorrelation:
    def test_scope_sets_and_restores(self) -> None:
        assert get_correlation_id() == ""

        with correlation_scope("req-1") as correlation_id:
            assert correlation_id == "req-1"
            assert get_correlation_id() == "req-1"
            with correlation_scope("req-2"):
                assert get_correlation_id() == "req-2"
            assert get_correlation_id() == "req-1"

        assert get_correlation_id() == ""

    def test_scope_generates_id_when_missing(self) -> None:
        with correlation_scope() as correlation_id:
            assert len(correlation_id) == 32
            assert get_correlation_id() == correlation_id

    def test_generated_ids_are_unique(self) -> None:
        assert generate_correlation_id() != generate_correlation_id()


class TestMetrics:
    def test_deep_link_metric(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG)

        with correlation_scope("req-9"):
            record_deep_link("rejected", error_kind="unknown_route")

        record = next(r for r in caplog.records if r.getMessage() == "metric_deep_link")
        assert record.metric_type == "deep_link"
        assert record.outcome == "rejected"
        assert record.error_kind == "unknown_route"
        assert record.correlation_id == "req-9"
        assert not hasattr(record, "feature")

    def test_navigation_reset_metric(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG)

        record_navigation_reset("logout", 6)

        record = next(r for r in caplog.records if r.getMessage() == "metric_navigation_reset")
        assert record.reason == "logout"
        assert record.coordinators_reset == 6
