"""Pagination metadata and navigational link sets."""

from pagelinks.domain.exceptions import DomainError, InvalidArgumentError
from pagelinks.domain.models import (
    LinkDescriptor,
    LinkSet,
    PaginationConfig,
    PaginationOptions,
)
from pagelinks.domain.services.pagination_model import PaginationModel

__version__ = "1.0.0"

__all__ = [
    "DomainError",
    "InvalidArgumentError",
    "LinkDescriptor",
    "LinkSet",
    "PaginationConfig",
    "PaginationModel",
    "PaginationOptions",
]
