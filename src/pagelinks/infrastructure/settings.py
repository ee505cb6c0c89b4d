"""Pagination defaults loaded from environment variables via Pydantic."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

from pagelinks.domain.models.pagination import (
    DEFAULT_ITEMS_PER_PAGE,
    DEFAULT_LABEL_NEXT,
    DEFAULT_LABEL_PREV,
    DEFAULT_PROXIMITY,
    DEFAULT_URI_PATTERN,
)


class PaginationSettings(BaseSettings):
    """Defaults applied to every pagination model the service creates."""

    model_config = {"env_prefix": "PAGELINKS_", "case_sensitive": False}

    # Pagination
    items_per_page: int = Field(DEFAULT_ITEMS_PER_PAGE, ge=1)
    proximity: int = Field(DEFAULT_PROXIMITY, ge=0)
    uri_pattern: str = DEFAULT_URI_PATTERN

    # Rendering
    label_prev: str = DEFAULT_LABEL_PREV
    label_next: str = DEFAULT_LABEL_NEXT
    show_arrows_always: bool = True

    # Logging
    log_level: str = "INFO"


def get_settings() -> PaginationSettings:
    """Return the settings read from the current environment."""
    return PaginationSettings()
