from __future__ import annotations

import html

from pagelinks.domain.models.pagination import LinkSet


def render_link_set(links: LinkSet) -> str:
    """Serialize *links* as a Foundation-style ``<ul class="pagination">``.

    Labels are written verbatim since they are HTML snippets (``&laquo;``).
    ``href`` and ``class`` values are attribute-escaped, so a query separator
    comes out as ``&amp;`` (``href="/posts?sort=asc&amp;page=2"``); browsers
    resolve that to the same URI as a raw ``&``.
    """
    items = "".join(
        '<li class="{css_class}"><a href="{uri}">{label}</a></li>'.format(
            css_class=html.escape(link.css_class),
            uri=html.escape(link.uri),
            label=link.label,
        )
        for link in links.values()
    )
    return f'<ul class="pagination">{items}</ul>'
