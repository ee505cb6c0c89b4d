"""Tests for pagelinks.infrastructure.settings and the service container."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pagelinks.infrastructure import container as container_module
from pagelinks.infrastructure.container import ServiceContainer, get_container, reset_container
from pagelinks.infrastructure.settings import PaginationSettings, get_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "PAGELINKS_ITEMS_PER_PAGE",
        "PAGELINKS_PROXIMITY",
        "PAGELINKS_URI_PATTERN",
        "PAGELINKS_SHOW_ARROWS_ALWAYS",
        "PAGELINKS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_container()
    yield
    reset_container()


class TestPaginationSettings:
    def test_defaults(self):
        settings = PaginationSettings()
        assert settings.items_per_page == 20
        assert settings.proximity == 2
        assert settings.uri_pattern == "page={page}"
        assert settings.label_prev == "&laquo;"
        assert settings.label_next == "&raquo;"
        assert settings.show_arrows_always is True
        assert settings.log_level == "INFO"

    def test_reads_prefixed_environment(self, monkeypatch):
        monkeypatch.setenv("PAGELINKS_ITEMS_PER_PAGE", "50")
        monkeypatch.setenv("PAGELINKS_URI_PATTERN", "page/{page}")
        monkeypatch.setenv("pagelinks_show_arrows_always", "false")
        settings = get_settings()
        assert settings.items_per_page == 50
        assert settings.uri_pattern == "page/{page}"
        assert settings.show_arrows_always is False

    @pytest.mark.parametrize(
        ("name", "value"),
        [("PAGELINKS_ITEMS_PER_PAGE", "0"), ("PAGELINKS_PROXIMITY", "-1")],
    )
    def test_out_of_range_environment_fails_on_load(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValidationError):
            PaginationSettings()

    def test_zero_proximity_is_accepted(self):
        assert PaginationSettings(proximity=0).proximity == 0


class TestServiceContainer:
    def test_service_uses_settings(self):
        container = ServiceContainer(PaginationSettings(proximity=4))
        model = container.pagination_service.create_model()
        assert model.get_proximity() == 4
        assert container.settings.proximity == 4

    def test_get_container_is_cached(self):
        assert get_container() is get_container()

    def test_reset_container(self):
        first = get_container()
        reset_container()
        assert get_container() is not first

    def test_pagination_service_factory(self):
        assert container_module.get_pagination_service() is get_container().pagination_service
