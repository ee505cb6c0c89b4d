from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

DEFAULT_ITEMS_PER_PAGE: int = 20
DEFAULT_PROXIMITY: int = 2
DEFAULT_URI_PATTERN: str = "page={page}"
DEFAULT_URI: str = "/"
DEFAULT_LABEL_PREV: str = "&laquo;"
DEFAULT_LABEL_NEXT: str = "&raquo;"
ELLIPSIS_LABEL: str = "&hellip;"

PAGE_TOKEN: str = "{page}"

# Named slots of a link set; numbered slots use the page number as key.
SLOT_PREV: str = "prev"
SLOT_NEXT: str = "next"
SLOT_LESS: str = "less"
SLOT_MORE: str = "more"

CLASS_CURRENT: str = "current"
CLASS_ARROW: str = "arrow"
CLASS_ARROW_UNAVAILABLE: str = "arrow unavailable"
CLASS_UNAVAILABLE: str = "unavailable"

SlotKey = Union[str, int]

# Keys accepted by ``PaginationOptions.from_mapping`` and the option they set.
OPTION_KEYS: dict[str, str] = {
    "items": "total_items",
    "total": "total_items",
    "page": "page",
    "per_page": "items_per_page",
    "uri": "uri",
    "pattern": "pattern",
    "proximity": "proximity",
}


@dataclass
class PaginationConfig:
    total_items: int = 0
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE
    proximity: int = DEFAULT_PROXIMITY
    current_page: int | None = None
    base_uri: str | None = None
    uri_pattern: str = DEFAULT_URI_PATTERN
    label_prev: str = DEFAULT_LABEL_PREV
    label_next: str = DEFAULT_LABEL_NEXT
    show_arrows_always: bool = True


@dataclass(frozen=True)
class PaginationOptions:
    """Bulk configuration for a pagination model.

    Every field is optional; ``None`` leaves the corresponding setting
    untouched.
    """

    total_items: float | None = None
    page: float | None = None
    items_per_page: float | None = None
    uri: str | None = None
    pattern: str | None = None
    proximity: float | None = None
    label_prev: str | None = None
    label_next: str | None = None
    show_arrows_always: bool | None = None

    @classmethod
    def from_mapping(cls, params: Mapping[str, Any] | None) -> PaginationOptions:
        """Build options from a loosely keyed mapping.

        Recognizes ``items``/``total``, ``page``, ``per_page``, ``uri``,
        ``pattern`` and ``proximity``. Unknown keys are ignored; when both
        ``items`` and ``total`` are present the later one wins.
        """
        values: dict[str, Any] = {}
        for key, value in (params or {}).items():
            option = OPTION_KEYS.get(key)
            if option is not None and value is not None:
                values[option] = value
        return cls(**values)


@dataclass(frozen=True)
class LinkDescriptor:
    key: SlotKey
    page: int | None
    uri: str
    is_current: bool = False
    is_disabled: bool = False
    label: str = ""
    css_class: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Template-facing mapping of the descriptor."""
        return {
            "page": self.page,
            "uri": self.uri,
            "isCurrent": self.is_current,
            "isDisabled": self.is_disabled,
            "label": self.label,
            "class": self.css_class,
        }


# Insertion order is rendering order: prev, 1, [less], window, [more], last, next.
LinkSet = dict[SlotKey, LinkDescriptor]


def link_set_to_list(links: LinkSet) -> list[dict[str, Any]]:
    return [{"key": key, **descriptor.to_dict()} for key, descriptor in links.items()]
