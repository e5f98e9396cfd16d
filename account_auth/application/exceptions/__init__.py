"""Application layer exceptions."""

from account_auth.application.exceptions.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    ApplicationError,
    InvalidCredentialsError,
    StorageError,
)

__all__ = [
    "ApplicationError",
    "AccountNotFoundError",
    "AccountAlreadyExistsError",
    "InvalidCredentialsError",
    "StorageError",
]
