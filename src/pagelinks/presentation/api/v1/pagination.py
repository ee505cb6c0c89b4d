"""Pagination API endpoints."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from pagelinks.application.schemas.pagination import PaginationRequest, PaginationResult
from pagelinks.application.services.pagination_service import PaginationService
from pagelinks.domain.services.pagination_model import RequestUriSource
from pagelinks.infrastructure.container import get_pagination_service

from .schemas import ErrorResponse, LinkDescriptorSchema, LinkSetResponse, PaginationMeta

router = APIRouter(prefix="/pagination", tags=["Pagination"])


def current_request_uri(request: Request) -> RequestUriSource:
    """Expose the incoming request's path and query string as the ambient URI."""

    def _read() -> str:
        if request.url.query:
            return f"{request.url.path}?{request.url.query}"
        return request.url.path

    return _read


def pagination_request(
    total: int = Query(0, description="Total number of items."),
    page: int | None = Query(None, description="Current page; parsed from the URI when omitted."),
    per_page: int | None = Query(None, description="Items per page."),
    proximity: int | None = Query(None, description="Page links on each side of the current page."),
    pattern: str | None = Query(None, description='URI pattern, e.g. "page={page}" or "page/{page}".'),
    uri: str | None = Query(None, description="Base URI; defaults to this request's URI."),
    show_arrows_always: bool | None = Query(None, description="Show disabled arrows on edge pages."),
) -> PaginationRequest:
    return PaginationRequest(
        total_items=total,
        page=page,
        items_per_page=per_page,
        proximity=proximity,
        pattern=pattern,
        uri=uri,
        show_arrows_always=show_arrows_always,
    )


def _result_to_response(result: PaginationResult) -> LinkSetResponse:
    return LinkSetResponse(
        pagination=PaginationMeta(
            page=result.page,
            page_size=result.size,
            total_items=result.total,
            total_pages=result.pages,
            offset=result.offset,
        ),
        links=[LinkDescriptorSchema.model_validate(link) for link in result.links],
    )


_ERROR_RESPONSES = {
    422: {"description": "Invalid pagination argument.", "model": ErrorResponse},
}


@router.get(
    "",
    response_model=LinkSetResponse,
    summary="Build the pagination link set",
    responses={200: {"description": "Pagination metadata and links."}, **_ERROR_RESPONSES},
)
async def get_link_set(
    params: Annotated[PaginationRequest, Depends(pagination_request)],
    request_uri: Annotated[RequestUriSource, Depends(current_request_uri)],
    service: PaginationService = Depends(get_pagination_service),
) -> LinkSetResponse:
    result = service.paginate(params, request_uri=request_uri)
    return _result_to_response(result)


@router.get(
    "/html",
    response_class=HTMLResponse,
    summary="Render the pagination as an HTML fragment",
    responses={200: {"description": 'A <ul class="pagination"> fragment.'}, **_ERROR_RESPONSES},
)
async def get_link_set_html(
    params: Annotated[PaginationRequest, Depends(pagination_request)],
    request_uri: Annotated[RequestUriSource, Depends(current_request_uri)],
    service: PaginationService = Depends(get_pagination_service),
) -> HTMLResponse:
    result = service.paginate(params, request_uri=request_uri, render_html=True)
    return HTMLResponse(content=result.html)
