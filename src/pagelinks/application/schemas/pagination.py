"""Request and result containers for the pagination service.

``PaginationRequest`` carries the caller's optional overrides;
``PaginationResult`` bundles the derived numbers with the link set.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from pagelinks.domain.models.pagination import LinkDescriptor, PaginationOptions


@dataclass(frozen=True)
class PaginationRequest:
    """Pagination parameters for one list view.

    ``None`` fields fall back to the service defaults.
    """

    total_items: int = 0
    page: Optional[int] = None
    items_per_page: Optional[int] = None
    proximity: Optional[int] = None
    pattern: Optional[str] = None
    uri: Optional[str] = None
    show_arrows_always: Optional[bool] = None

    def to_options(self) -> PaginationOptions:
        return PaginationOptions(
            total_items=self.total_items,
            page=self.page,
            items_per_page=self.items_per_page,
            proximity=self.proximity,
            pattern=self.pattern,
            uri=self.uri,
            show_arrows_always=self.show_arrows_always,
        )


@dataclass
class PaginationResult:
    """Derived pagination values plus the ordered link descriptors."""

    page: int = 1
    size: int = 20
    total: int = 0
    pages: int = 0
    offset: int = 0
    links: List[LinkDescriptor] = field(default_factory=list)
    html: str = ""

    @property
    def has_next(self) -> bool:
        return self.page < self.pages

    @property
    def has_previous(self) -> bool:
        return self.page > 1
