"""Unit of Work interface - domain layer."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from account_auth.domain.repositories.account_repository import IAccountRepository


class IUnitOfWork(ABC):
    """
    Unit of Work interface for managing transactions.

    The UoW is the storage handle the application services receive. It
    gives access to the account repository within a single transactional
    boundary, so a failed password change never leaves a partial write
    visible to later reads.
    """

    accounts: "IAccountRepository"

    @abstractmethod
    async def __aenter__(self) -> "IUnitOfWork":
        """
        Enter async context manager.

        This is where the implementation starts a database transaction/session.
        """
        pass

    @abstractmethod
    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit async context manager.

        If an exception escaped the block, roll back.
        """
        pass

    @abstractmethod
    async def commit(self) -> None:
        """
        Commit the current transaction.

        Raises:
            StorageException: If the commit fails
        """
        pass

    @abstractmethod
    async def rollback(self) -> None:
        """
        Rollback the current transaction.

        Used when you need to abort without raising an exception.
        """
        pass
