"""Domain exceptions - business rule violations."""

from account_auth.domain.exceptions.domain_exceptions import (
    DomainException,
    InvalidEntityStateException,
    StorageException,
    UsernameTakenException,
)

__all__ = [
    "DomainException",
    "InvalidEntityStateException",
    "StorageException",
    "UsernameTakenException",
]
