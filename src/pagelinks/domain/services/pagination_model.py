"""
Pagination model: configuration, derived values and link-set building.

The model holds a single ``PaginationConfig`` and computes everything else
from it on demand. Typical use::

    model = PaginationModel({"total": 1000, "page": 25}, request_uri=lambda: "/posts")
    model.get_total_pages()   # 50
    model.build_link_set()    # prev, 1, less, 24..26, more, 50, next
    model.render()            # '<ul class="pagination">...</ul>'
"""

from __future__ import annotations

import math
import numbers
import re
from collections.abc import Callable, Mapping
from dataclasses import replace
from typing import Any

from pagelinks.domain.exceptions.pagination_exceptions import InvalidArgumentError
from pagelinks.domain.models.pagination import (
    CLASS_ARROW,
    CLASS_ARROW_UNAVAILABLE,
    CLASS_CURRENT,
    CLASS_UNAVAILABLE,
    DEFAULT_URI,
    ELLIPSIS_LABEL,
    SLOT_LESS,
    SLOT_MORE,
    SLOT_NEXT,
    SLOT_PREV,
    LinkDescriptor,
    LinkSet,
    PaginationConfig,
    PaginationOptions,
)
from pagelinks.domain.services import uri_pattern
from pagelinks.domain.services.html_renderer import render_link_set

RequestUriSource = Callable[[], str | None]


def _at_least(argument: str, value: Any, minimum: int, constraint: str) -> int:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidArgumentError(argument, value, constraint)
    if not value >= minimum or not math.isfinite(value):
        raise InvalidArgumentError(argument, value, constraint)
    return math.floor(value)


def _total_items(value: Any) -> int:
    return _at_least("total_items", value, 0, "a non-negative number")


def _items_per_page(value: Any) -> int:
    return _at_least("items_per_page", value, 1, "a positive integer")


def _page(value: Any) -> int:
    return _at_least("page", value, 1, "a positive integer")


def _proximity(value: Any) -> int:
    return _at_least("proximity", value, 0, "a non-negative integer")


class PaginationModel:
    """Pagination state for one list view.

    ``options`` may be a ``PaginationOptions`` or a mapping with the keys
    ``items``/``total``, ``page``, ``per_page``, ``uri``, ``pattern`` and
    ``proximity``. ``request_uri`` supplies the current request URI when
    no explicit URI is configured.
    """

    def __init__(
        self,
        options: PaginationOptions | Mapping[str, Any] | None = None,
        *,
        request_uri: RequestUriSource | None = None,
    ) -> None:
        self._config = PaginationConfig()
        self._request_uri = request_uri
        if options is not None:
            self.configure(options)

    @property
    def config(self) -> PaginationConfig:
        return replace(self._config)

    def configure(self, options: PaginationOptions | Mapping[str, Any]) -> PaginationModel:
        """Apply *options* all at once; nothing changes if any value is rejected."""
        if not isinstance(options, PaginationOptions):
            options = PaginationOptions.from_mapping(options)

        updates: dict[str, Any] = {}
        if options.total_items is not None:
            updates["total_items"] = _total_items(options.total_items)
        if options.page is not None:
            updates["current_page"] = _page(options.page)
        if options.items_per_page is not None:
            updates["items_per_page"] = _items_per_page(options.items_per_page)
        if options.proximity is not None:
            updates["proximity"] = _proximity(options.proximity)
        if options.uri is not None:
            updates["base_uri"] = options.uri
        if options.pattern is not None:
            updates["uri_pattern"] = options.pattern
        if options.label_prev is not None:
            updates["label_prev"] = options.label_prev
        if options.label_next is not None:
            updates["label_next"] = options.label_next
        if options.show_arrows_always is not None:
            updates["show_arrows_always"] = options.show_arrows_always

        self._config = replace(self._config, **updates)
        return self

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def set_total_items(self, total_items: float) -> PaginationModel:
        self._config.total_items = _total_items(total_items)
        return self

    set_items = set_total_items

    def set_items_per_page(self, items_per_page: float) -> PaginationModel:
        self._config.items_per_page = _items_per_page(items_per_page)
        return self

    set_limit = set_items_per_page

    def set_page(self, page: float) -> PaginationModel:
        self._config.current_page = _page(page)
        return self

    def set_proximity(self, proximity: float) -> PaginationModel:
        """Set how many page links are shown on each side of the current page."""
        self._config.proximity = _proximity(proximity)
        return self

    def set_uri(self, uri: str | None) -> PaginationModel:
        self._config.base_uri = uri
        return self

    def set_pattern(self, pattern: str) -> PaginationModel:
        """Set the URI pattern, e.g. ``"p={page}"`` or ``"page/{page}"``."""
        self._config.uri_pattern = pattern
        return self

    def set_label_prev(self, label: str) -> PaginationModel:
        self._config.label_prev = label
        return self

    def set_label_next(self, label: str) -> PaginationModel:
        self._config.label_next = label
        return self

    def set_show_arrows_always(self, show: bool) -> PaginationModel:
        """Show disabled arrows on the first/last page instead of omitting them."""
        self._config.show_arrows_always = show
        return self

    # ------------------------------------------------------------------
    # Getters and derived values
    # ------------------------------------------------------------------

    def get_total_items(self) -> int:
        return self._config.total_items

    get_items = get_total_items

    def get_items_per_page(self) -> int:
        return self._config.items_per_page

    get_limit = get_items_per_page

    def get_proximity(self) -> int:
        return self._config.proximity

    def get_pattern(self) -> str:
        return self._config.uri_pattern

    def get_uri(self) -> str:
        """Configured URI, else the current request URI, else ``"/"``."""
        if self._config.base_uri:
            return self._config.base_uri
        if self._request_uri is not None:
            uri = self._request_uri()
            if uri:
                return uri
        return DEFAULT_URI

    def get_page(self) -> int:
        """Explicit page, else the page found in the URI, else 1."""
        if self._config.current_page is not None:
            return self._config.current_page
        page = uri_pattern.extract_page(self._config.uri_pattern, self.get_uri())
        if page is not None:
            return page
        return 1

    def get_total_pages(self) -> int:
        return -(-self._config.total_items // self._config.items_per_page)

    def get_offset(self) -> int:
        """Index of the first item on the current page (SQL ``OFFSET``)."""
        return max(0, (self.get_page() - 1) * self._config.items_per_page)

    # ------------------------------------------------------------------
    # URIs
    # ------------------------------------------------------------------

    def build_match_pattern(self) -> re.Pattern[str]:
        return uri_pattern.build_match_pattern(self._config.uri_pattern)

    def create_link(self, page: int) -> str:
        """Return the current URI rewritten to point at *page*."""
        return uri_pattern.create_link(self._config.uri_pattern, self.get_uri(), page)

    # ------------------------------------------------------------------
    # Link set
    # ------------------------------------------------------------------

    def build_link_set(self) -> LinkSet:
        """
        Build the ordered link set for the current configuration.

        Order is ``prev, 1, [less], window..., [more], last, next``. The
        window holds up to ``proximity * 2 + 1`` slots between the first
        and last page; ``less``/``more`` markers take the place of the
        window's outermost pages when pages are skipped.
        """
        cfg = self._config
        result: LinkSet = {}
        page = self.get_page()
        last = self.get_total_pages()
        proximity = cfg.proximity
        max_window = proximity * 2 + 1

        if page == 1:
            if cfg.show_arrows_always:
                result[SLOT_PREV] = self._arrow(SLOT_PREV, cfg.label_prev)
        else:
            result[SLOT_PREV] = self._arrow(SLOT_PREV, cfg.label_prev, page - 1)

        if cfg.total_items > 0:
            result[1] = self._edge_link(1, page)

        if last > 0:
            if last <= max_window:
                first, end = 2, last - 1
            else:
                first = max(2, page - proximity)
                end = min(last - 1, page + proximity)
                while end - first < max_window - 1:
                    if first > 2:
                        first -= 1
                    elif end < last - 1:
                        end += 1
                    else:
                        break

            if first > 2 and proximity:
                result[SLOT_LESS] = self._ellipsis(SLOT_LESS)
                first += 1

            show_more = end < last - 1
            if show_more:
                end -= 1

            cursor = first
            for number in range(first, end + 1):
                result[number] = LinkDescriptor(
                    key=number,
                    page=number,
                    uri=self.create_link(number),
                    is_current=number == page,
                    is_disabled=False,
                    label=str(number),
                    css_class=CLASS_CURRENT if number == page else "",
                )
                cursor = number + 1

            # Without a window the current page still needs its own link.
            if not proximity:
                result[cursor] = LinkDescriptor(
                    key=cursor,
                    page=page,
                    uri=self.create_link(page),
                    is_current=True,
                    is_disabled=False,
                    label=str(page),
                    css_class=CLASS_CURRENT,
                )

            if show_more and proximity:
                result[SLOT_MORE] = self._ellipsis(SLOT_MORE)

        if last > 1:
            result[last] = self._edge_link(last, page)

        if page >= last:
            if cfg.show_arrows_always:
                result[SLOT_NEXT] = self._arrow(SLOT_NEXT, cfg.label_next)
        else:
            result[SLOT_NEXT] = self._arrow(SLOT_NEXT, cfg.label_next, page + 1)

        return result

    def to_list(self) -> list[dict[str, Any]]:
        """Link set as template-ready dictionaries, in rendering order."""
        return [descriptor.to_dict() for descriptor in self.build_link_set().values()]

    def render(self) -> str:
        """Render the link set as HTML; empty when there is a single page or none."""
        if self.get_total_pages() > 1:
            return render_link_set(self.build_link_set())
        return ""

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _arrow(self, key: str, label: str, target: int | None = None) -> LinkDescriptor:
        if target is None:
            return LinkDescriptor(
                key=key,
                page=None,
                uri="#",
                is_disabled=True,
                label=label,
                css_class=CLASS_ARROW_UNAVAILABLE,
            )
        return LinkDescriptor(
            key=key,
            page=target,
            uri=self.create_link(target),
            label=label,
            css_class=CLASS_ARROW,
        )

    def _edge_link(self, number: int, page: int) -> LinkDescriptor:
        current = number == page
        return LinkDescriptor(
            key=number,
            page=number,
            uri=self.create_link(number),
            is_current=current,
            is_disabled=current,
            label=str(number),
            css_class=CLASS_CURRENT if current else "",
        )

    @staticmethod
    def _ellipsis(key: str) -> LinkDescriptor:
        return LinkDescriptor(
            key=key,
            page=None,
            uri="#",
            is_disabled=True,
            label=ELLIPSIS_LABEL,
            css_class=CLASS_UNAVAILABLE,
        )

    def __repr__(self) -> str:
        cfg = self._config
        return (
            f"PaginationModel(total_items={cfg.total_items}, "
            f"items_per_page={cfg.items_per_page}, page={self.get_page()}, "
            f"proximity={cfg.proximity})"
        )
