from pagelinks.domain.exceptions.pagination_exceptions import DomainError, InvalidArgumentError

__all__ = [
    "DomainError",
    "InvalidArgumentError",
]
