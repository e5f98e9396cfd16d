"""Account repository interface."""

from abc import abstractmethod

from account_auth.domain.entities.account import AccountCredential
from account_auth.domain.repositories.base import IRepository


class IAccountRepository(IRepository[AccountCredential]):
    """
    Storage port for account credentials, keyed by username.

    Implementations own username uniqueness (unique index) and per-record
    read-modify-write atomicity (optimistic version check).
    """

    @abstractmethod
    async def get_by_username(self, username: str) -> AccountCredential | None:
        """
        Find an account by its username.

        Args:
            username: The account's username

        Returns:
            AccountCredential if found, None otherwise
        """
        pass

    @abstractmethod
    async def username_exists(self, username: str) -> bool:
        """
        Check if a username is already registered.

        Args:
            username: The username to check

        Returns:
            True if taken, False otherwise
        """
        pass
