"""Application service that builds pagination for list views.

``PaginationService`` applies the configured defaults to every
``PaginationModel`` it creates, records metrics through a port, and
turns a model into a ``PaginationResult`` for the presentation layer.
"""

from __future__ import annotations

from typing import Optional, Protocol

from pagelinks.application.schemas.pagination import PaginationRequest, PaginationResult
from pagelinks.domain.exceptions import InvalidArgumentError
from pagelinks.domain.models.pagination import PaginationOptions
from pagelinks.domain.services.pagination_model import PaginationModel, RequestUriSource
from pagelinks.domain.services.uri_pattern import is_query_style
from pagelinks.infrastructure.observability.logging_config import get_logger
from pagelinks.infrastructure.settings import PaginationSettings


# ---------------------------------------------------------------------------
# Ports
# ---------------------------------------------------------------------------


class PaginationMetrics(Protocol):
    """Port: counters for built link sets and rejected arguments."""

    def record_link_set(self, style: str) -> None: ...

    def record_rejection(self, argument: str) -> None: ...


# ---------------------------------------------------------------------------
# Service
# ---------------------------------------------------------------------------


class PaginationService:

    def __init__(
        self,
        settings: PaginationSettings,
        metrics: Optional[PaginationMetrics] = None,
    ) -> None:
        self._settings = settings
        self._metrics = metrics

    def defaults(self) -> PaginationOptions:
        s = self._settings
        return PaginationOptions(
            items_per_page=s.items_per_page,
            proximity=s.proximity,
            pattern=s.uri_pattern,
            label_prev=s.label_prev,
            label_next=s.label_next,
            show_arrows_always=s.show_arrows_always,
        )

    def create_model(
        self,
        options: Optional[PaginationOptions] = None,
        *,
        request_uri: Optional[RequestUriSource] = None,
    ) -> PaginationModel:
        """Return a model with the configured defaults, overridden by *options*."""
        model = PaginationModel(self.defaults(), request_uri=request_uri)
        if options is not None:
            try:
                model.configure(options)
            except InvalidArgumentError as exc:
                if self._metrics is not None:
                    self._metrics.record_rejection(exc.argument)
                get_logger(__name__).info(
                    "pagination_argument_rejected", argument=exc.argument, value=repr(exc.value)
                )
                raise
        return model

    def paginate(
        self,
        request: PaginationRequest,
        *,
        request_uri: Optional[RequestUriSource] = None,
        render_html: bool = False,
    ) -> PaginationResult:
        model = self.create_model(request.to_options(), request_uri=request_uri)
        links = model.build_link_set()

        style = "query" if is_query_style(model.get_pattern()) else "path"
        if self._metrics is not None:
            self._metrics.record_link_set(style)

        result = PaginationResult(
            page=model.get_page(),
            size=model.get_items_per_page(),
            total=model.get_total_items(),
            pages=model.get_total_pages(),
            offset=model.get_offset(),
            links=list(links.values()),
            html=model.render() if render_html else "",
        )
        get_logger(__name__).debug(
            "pagination_built",
            page=result.page,
            total_pages=result.pages,
            links=len(result.links),
            style=style,
            uri=model.get_uri(),
        )
        return result
