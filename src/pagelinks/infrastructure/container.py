"""Dependency injection container for the pagination service.

Wires settings and infrastructure adapters into the application service,
exposing factory functions suitable for FastAPI's ``Depends()`` system.
"""

from __future__ import annotations

import logging

from pagelinks.application.services.pagination_service import PaginationService
from pagelinks.infrastructure.observability.metrics import PrometheusPaginationMetrics
from pagelinks.infrastructure.settings import PaginationSettings, get_settings

logger = logging.getLogger(__name__)


class ServiceContainer:
    """Central DI container that owns all service instances."""

    def __init__(self, settings: PaginationSettings | None = None) -> None:
        self._settings = settings or get_settings()

        self.metrics = PrometheusPaginationMetrics()
        self.pagination_service = PaginationService(self._settings, metrics=self.metrics)

        logger.info("ServiceContainer initialised")

    @property
    def settings(self) -> PaginationSettings:
        return self._settings


_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Return (and lazily create) the global service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """Drop the global container so the next call rebuilds it from the environment."""
    global _container
    _container = None


def get_pagination_service() -> PaginationService:
    return get_container().pagination_service
