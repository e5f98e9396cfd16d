"""Domain layer exceptions for business rule violations."""


class DomainException(Exception):
    """
    Base exception for domain layer.

    Domain exceptions represent business rule violations and should be
    raised when domain invariants are broken.

    Examples:
        - Invalid entity state
        - Storage port failures
    """

    def __init__(self, message: str, error_code: str = "DOMAIN_ERROR"):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidEntityStateException(DomainException):
    """Raised when an entity is in an invalid state."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ENTITY_STATE")


class StorageException(DomainException):
    """
    Raised by repository implementations when a record cannot be persisted.

    Covers driver errors and lost optimistic-version races. The write that
    raised it was not applied.
    """

    def __init__(self, message: str = "Account storage failure"):
        super().__init__(message, error_code="STORAGE_ERROR")


class UsernameTakenException(DomainException):
    """
    Raised by repository implementations when an insert hits the unique
    username index.

    Not a StorageException: the insert was rejected, not lost.
    """

    def __init__(self, username: str):
        super().__init__(
            f"Username {username} already registered",
            error_code="ACCOUNT_ALREADY_EXISTS",
        )
