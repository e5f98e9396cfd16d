"""Unit of Work implementation using SQLAlchemy."""

from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from account_auth.domain.exceptions import StorageException
from account_auth.domain.repositories.unit_of_work import IUnitOfWork
from account_auth.infrastructure.repositories.account_repository_impl import (
    AccountRepository,
)


class UnitOfWork(IUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work.

    This class:
    1. Manages the SQLAlchemy async session lifecycle
    2. Provides the account repository bound to that session
    3. Commits explicitly; rolls back when the block raises
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        """
        Initialize UoW with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> "UnitOfWork":
        """
        Start a new database session and initialize repositories.

        Returns:
            Self for context manager usage
        """
        self._session = self._session_factory()
        self.accounts = AccountRepository(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: Any,
    ) -> None:
        """
        Exit context manager, rolling back if the block raised.

        Uncommitted work is discarded when the session closes.
        """
        if exc_type is not None:
            await self.rollback()

        # Always close the session
        if self._session is not None:
            await self._session.close()
            self._session = None

    async def commit(self) -> None:
        """Commit the current transaction."""
        if self._session is None:
            raise RuntimeError("Cannot commit: no active session")

        try:
            await self._session.commit()
        except SQLAlchemyError as exc:
            raise StorageException(f"Commit failed: {type(exc).__name__}") from exc

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        if self._session is None:
            raise RuntimeError("Cannot rollback: no active session")

        await self._session.rollback()
