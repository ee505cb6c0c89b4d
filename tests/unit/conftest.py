"""Shared fixtures for unit tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src is importable
sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from pagelinks.application.services.pagination_service import PaginationService
from pagelinks.domain.services.pagination_model import PaginationModel
from pagelinks.infrastructure.settings import PaginationSettings


class RecordingMetrics:
    """In-memory stand-in for the Prometheus metrics adapter."""

    def __init__(self) -> None:
        self.link_sets: list[str] = []
        self.rejections: list[str] = []

    def record_link_set(self, style: str) -> None:
        self.link_sets.append(style)

    def record_rejection(self, argument: str) -> None:
        self.rejections.append(argument)


@pytest.fixture
def model() -> PaginationModel:
    return PaginationModel()


@pytest.fixture
def settings() -> PaginationSettings:
    return PaginationSettings()


@pytest.fixture
def metrics() -> RecordingMetrics:
    return RecordingMetrics()


@pytest.fixture
def pagination_service(settings: PaginationSettings, metrics: RecordingMetrics) -> PaginationService:
    return PaginationService(settings, metrics=metrics)
