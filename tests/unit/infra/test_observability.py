"""Tests for pagelinks.infrastructure.observability."""

from __future__ import annotations

import json
import logging

import structlog
from prometheus_client import REGISTRY

from pagelinks.infrastructure.observability.logging_config import (
    SERVICE_NAME,
    add_service_name,
    get_logger,
    setup_logging,
)
from pagelinks.infrastructure.observability.metrics import PrometheusPaginationMetrics


def _sample(name: str, labels: dict[str, str]) -> float:
    return REGISTRY.get_sample_value(name, labels) or 0.0


class TestPrometheusPaginationMetrics:
    def test_record_link_set(self):
        before = _sample("pagination_link_sets_total", {"style": "path"})
        PrometheusPaginationMetrics().record_link_set("path")
        assert _sample("pagination_link_sets_total", {"style": "path"}) == before + 1

    def test_record_rejection(self):
        labels = {"argument": "proximity"}
        before = _sample("pagination_invalid_arguments_total", labels)
        PrometheusPaginationMetrics().record_rejection("proximity")
        assert _sample("pagination_invalid_arguments_total", labels) == before + 1


class TestLogging:
    def test_add_service_name(self):
        assert add_service_name(None, "info", {})["service"] == SERVICE_NAME

    def test_add_service_name_keeps_existing(self):
        assert add_service_name(None, "info", {"service": "other"})["service"] == "other"

    def test_setup_logging_emits_json(self, capsys):
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            setup_logging("DEBUG")
            assert root.level == logging.DEBUG
            get_logger("pagination").info("pagination_built", total_pages=5)
            line = capsys.readouterr().out.strip().splitlines()[-1]
            event = json.loads(line)
            assert event["event"] == "pagination_built"
            assert event["total_pages"] == 5
            assert event["service"] == SERVICE_NAME
            assert event["level"] == "info"
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)
            structlog.reset_defaults()
