"""
Pydantic v2 response schemas for the pagination API.

Error responses follow RFC 9457 Problem Details.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class _ApiModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        from_attributes=True,
    )


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


class PaginationMeta(_ApiModel):
    """Pagination metadata included in every link-set response."""

    page: int = Field(..., description="Current page number.")
    page_size: int = Field(..., description="Items per page.")
    total_items: int = Field(..., description="Total number of items.")
    total_pages: int = Field(..., description="Total number of pages.")
    offset: int = Field(..., description="Index of the first item on the current page.")


class LinkDescriptorSchema(_ApiModel):
    """One navigational link, in rendering order."""

    key: int | str = Field(
        ...,
        description='Slot identifier: "prev", "next", "less", "more" or a page number.',
        examples=["prev", 3],
    )
    page: int | None = Field(
        default=None,
        description="Target page, or null for disabled arrows and ellipsis markers.",
    )
    uri: str = Field(..., description="Link target.", examples=["/posts?page=3"])
    is_current: bool = Field(default=False)
    is_disabled: bool = Field(default=False)
    label: str = Field(default="", examples=["3", "&laquo;"])
    css_class: str = Field(default="", examples=["current", "arrow unavailable"])


class LinkSetResponse(_ApiModel):
    """Pagination metadata plus the ordered link set."""

    pagination: PaginationMeta
    links: list[LinkDescriptorSchema] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# RFC 9457 Problem Details error response
# ---------------------------------------------------------------------------


class ErrorResponse(_ApiModel):
    """Error response following RFC 9457 Problem Details for HTTP APIs.

    See https://www.rfc-editor.org/rfc/rfc9457
    """

    type: str = Field(
        default="about:blank",
        description="A URI reference that identifies the problem type.",
        examples=["https://pagelinks.example/problems/invalid-argument"],
    )
    title: str = Field(
        ...,
        description="A short, human-readable summary of the problem type.",
        examples=["Invalid Argument"],
    )
    status: int = Field(..., description="The HTTP status code.", examples=[422])
    detail: str = Field(
        ...,
        description="A human-readable explanation specific to this occurrence.",
        examples=["items_per_page must be a positive integer, got 0"],
    )
    instance: str | None = Field(
        default=None,
        description="A URI reference that identifies the specific occurrence.",
        examples=["/api/v1/pagination"],
    )
    errors: list[dict[str, Any]] | None = Field(
        default=None,
        description="Validation error details.",
    )
