"""Application layer exceptions."""


class ApplicationError(Exception):
    """Base application layer exception."""

    def __init__(self, message: str, error_code: str = "APPLICATION_ERROR"):
        """
        Initialize application exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
        """
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class InvalidCredentialsError(ApplicationError):
    """Raised when a password does not match the stored credential."""

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message, error_code="INVALID_CREDENTIALS")


class AccountNotFoundError(InvalidCredentialsError):
    """
    Raised when no account exists for the given username.

    Carries the same message and error code as InvalidCredentialsError, so
    a caller outside the service cannot tell an unknown username from a
    wrong password.
    """


class AccountAlreadyExistsError(ApplicationError):
    """Raised when attempting to register a username that is taken."""

    def __init__(self, message: str = "Account already exists"):
        super().__init__(message, error_code="ACCOUNT_ALREADY_EXISTS")


class StorageError(ApplicationError):
    """Raised when an account change could not be persisted."""

    def __init__(self, message: str = "Account could not be saved"):
        super().__init__(message, error_code="STORAGE_ERROR")
