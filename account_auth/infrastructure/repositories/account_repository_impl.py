"""Account repository implementation using SQLAlchemy."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from account_auth.domain.entities.account import AccountCredential
from account_auth.domain.exceptions import StorageException, UsernameTakenException
from account_auth.domain.repositories.account_repository import IAccountRepository
from account_auth.infrastructure.persistence.models.account_model import AccountModel

logger = logging.getLogger(__name__)


class AccountRepository(IAccountRepository):
    """
    SQLAlchemy implementation of IAccountRepository.

    Returns domain entities, never ORM models. Write failures are raised as
    StorageException so the application layer stays free of SQLAlchemy.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with a database session.

        Args:
            session: SQLAlchemy async session (managed by UoW)
        """
        self._session = session

    async def get_by_username(self, username: str) -> AccountCredential | None:
        """Get account by username."""
        model = await self._get_model(username)

        if model is None:
            return None

        return model.to_entity()

    async def username_exists(self, username: str) -> bool:
        """Check if username is already registered."""
        result = await self._session.execute(
            select(AccountModel.id).where(AccountModel.username == username)
        )
        return result.scalar_one_or_none() is not None

    async def add(self, entity: AccountCredential) -> AccountCredential:
        """
        Add a new account.

        The unique index on username rejects a concurrent registration of
        the same name.

        Raises:
            UsernameTakenException: If the username is already stored
            StorageException: If the insert fails for any other reason
        """
        model = AccountModel.from_entity(entity)

        try:
            self._session.add(model)
            await self._session.flush()  # Get generated ID without committing
            await self._session.refresh(model)  # Load created_at
        except IntegrityError as exc:
            raise UsernameTakenException(entity.username) from exc
        except SQLAlchemyError as exc:
            raise StorageException(f"Could not insert account: {type(exc).__name__}") from exc

        return model.to_entity()

    async def update(self, entity: AccountCredential) -> AccountCredential:
        """
        Write the entity's password hash back to its row.

        Only the password hash is mutable; username, salt and created_at are
        never written here.

        Raises:
            StorageException: If the row is gone, was modified since the
                entity was read, or the write fails
        """
        model = await self._get_model(entity.username)

        if model is None:
            raise StorageException(f"Account {entity.username} no longer exists")

        if model.version != entity.version:
            logger.warning(
                f"Stale update rejected for '{entity.username}': "
                f"read version {entity.version}, stored version {model.version}"
            )
            raise StorageException(f"Account {entity.username} was modified concurrently")

        model.password_hash = entity.password_hash

        try:
            await self._session.flush()
        except StaleDataError as exc:
            logger.warning(f"Concurrent update detected for '{entity.username}'")
            raise StorageException(
                f"Account {entity.username} was modified concurrently"
            ) from exc
        except SQLAlchemyError as exc:
            raise StorageException(f"Could not update account: {type(exc).__name__}") from exc

        return model.to_entity()

    async def _get_model(self, username: str) -> AccountModel | None:
        result = await self._session.execute(
            select(AccountModel).where(AccountModel.username == username)
        )
        return result.scalar_one_or_none()
