"""
URI pattern handling for page links.

A pattern is any string containing the ``{page}`` token. Patterns with an
``=`` (e.g. ``page={page}``) describe a query-string parameter; anything
else (e.g. ``page/{page}``) describes a path segment.
"""

from __future__ import annotations

import re
from functools import lru_cache

from pagelinks.domain.models.pagination import PAGE_TOKEN

PAGE_NUMBER_REGEX: str = "([1-9][0-9]*)"


def is_query_style(template: str) -> bool:
    """Return ``True`` when *template* names a query-string parameter."""
    return template.find("=") > 0


def substitute(template: str, page: int) -> str:
    return template.replace(PAGE_TOKEN, str(page))


@lru_cache(maxsize=128)
def build_match_pattern(template: str) -> re.Pattern[str]:
    """
    Compile the regular expression that locates *template* inside a URI.

    The ``{page}`` token becomes a capture group for a page number without
    leading zeros. Query-style patterns must follow ``&`` or ``?`` and end
    at ``&`` or the end of the URI; path-style patterns must follow ``/``
    and end at ``/``, ``?`` or the end of the URI. Matching ignores case.
    """
    body = PAGE_NUMBER_REGEX.join(re.escape(part) for part in template.split(PAGE_TOKEN))
    if is_query_style(template):
        pattern = r"[&?]" + body + r"(?:&|\Z)"
    else:
        pattern = r"/" + body + r"(?:/|\?|\Z)"
    return re.compile(pattern, re.IGNORECASE)


def extract_page(template: str, uri: str) -> int | None:
    """Return the page number *uri* carries for *template*, if any."""
    match = build_match_pattern(template).search(uri)
    if match is None or not match.re.groups:
        return None
    return int(match.group(1))


def create_link(template: str, uri: str, page: int) -> str:
    """Return *uri* rewritten so that it points at *page*."""
    match = build_match_pattern(template).search(uri)
    if match is not None and match.re.groups:
        start, end = match.span(1)
        return f"{uri[:start]}{page}{uri[end:]}"

    segment = substitute(template, page)
    if is_query_style(template):
        separator = "&" if "?" in uri else "?"
        return f"{uri}{separator}{segment}"

    # A trailing slash is dropped so "/" gives "/page/2", not protocol-relative "//page/2".
    if "?" in uri:
        path, query = uri.split("?", 1)
        return f"{path.rstrip('/')}/{segment}?{query}"
    return f"{uri.rstrip('/')}/{segment}"
