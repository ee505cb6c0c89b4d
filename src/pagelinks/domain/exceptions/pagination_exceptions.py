from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Base class for all domain-layer exceptions.

    Carries HTTP-mapping metadata so the presentation layer can produce
    RFC 9457 Problem Details without knowing exception internals.
    """

    def __init__(
        self,
        detail: str = "",
        *,
        title: str = "Domain Error",
        status_code: int = 400,
        error_type: str = "about:blank",
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.title = title
        self.status_code = status_code
        self.error_type = error_type


class InvalidArgumentError(DomainError):
    def __init__(self, argument: str = "", value: Any = None, constraint: str = "") -> None:
        self.argument = argument
        self.value = value
        self.constraint = constraint
        super().__init__(
            detail=f"{argument} must be {constraint}, got {value!r}",
            title="Invalid Argument",
            status_code=422,
            error_type="https://pagelinks.example/problems/invalid-argument",
        )
