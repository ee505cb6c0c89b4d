from pagelinks.domain.models.pagination import (
    DEFAULT_ITEMS_PER_PAGE,
    DEFAULT_PROXIMITY,
    DEFAULT_URI,
    DEFAULT_URI_PATTERN,
    LinkDescriptor,
    LinkSet,
    PaginationConfig,
    PaginationOptions,
    SlotKey,
    link_set_to_list,
)

__all__ = [
    "DEFAULT_ITEMS_PER_PAGE",
    "DEFAULT_PROXIMITY",
    "DEFAULT_URI",
    "DEFAULT_URI_PATTERN",
    "LinkDescriptor",
    "LinkSet",
    "PaginationConfig",
    "PaginationOptions",
    "SlotKey",
    "link_set_to_list",
]
