"""Account service - registration use case."""

import asyncio
import logging
from collections.abc import Callable

from account_auth.application.dtos.account_dto import AccountDTO, CreateAccountDTO
from account_auth.application.exceptions import (
    AccountAlreadyExistsError,
    StorageError,
)
from account_auth.domain.entities.account import AccountCredential
from account_auth.domain.exceptions import StorageException, UsernameTakenException
from account_auth.domain.repositories.unit_of_work import IUnitOfWork
from account_auth.domain.services.password_hasher import ICredentialHasher

logger = logging.getLogger(__name__)


class AccountService:
    """
    Creates account credentials.

    Registration is the only place a salt is generated. Every later
    password change reuses it (see AuthService.change_password).
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        credential_hasher: ICredentialHasher,
    ):
        """
        Initialize service with dependencies.

        Args:
            uow_factory: Factory function that returns IUnitOfWork instances
            credential_hasher: Salted password hasher (abstraction)

        Example:
            # Production
            service = AccountService(
                uow_factory=lambda: UnitOfWork(session_factory),
                credential_hasher=Pbkdf2CredentialHasher()
            )

            # Testing
            service = AccountService(
                uow_factory=lambda: FakeUnitOfWork(),
                credential_hasher=FakeCredentialHasher()
            )
        """
        self._uow_factory = uow_factory
        self._credential_hasher = credential_hasher

    async def create_account(self, dto: CreateAccountDTO) -> AccountDTO:
        """
        Register a new account.

        Business rules:
        1. Username must be unique
        2. A fresh salt is generated and the password is derived with it

        Args:
            dto: Account creation data

        Returns:
            Created account DTO

        Raises:
            AccountAlreadyExistsError: If the username is taken
            StorageError: If the account could not be persisted
        """
        try:
            async with self._uow_factory() as uow:
                if await uow.accounts.username_exists(dto.username):
                    raise AccountAlreadyExistsError(
                        f"Username {dto.username} already registered"
                    )

                salt = self._credential_hasher.generate_salt()
                password_hash = await asyncio.to_thread(
                    self._credential_hasher.derive_hash, dto.password, salt
                )
                account = AccountCredential(
                    username=dto.username,
                    salt=salt,
                    password_hash=password_hash.hex(),
                )

                created = await uow.accounts.add(account)
                await uow.commit()
        except UsernameTakenException as exc:
            # Another registration won the race after username_exists
            logger.info(f"Account '{dto.username}' not created: {exc.message}")
            raise AccountAlreadyExistsError(exc.message) from exc
        except StorageException as exc:
            logger.error(f"Account '{dto.username}' not created: {exc.message}")
            raise StorageError(exc.message) from exc

        logger.info(f"Account created for '{created.username}'")
        return AccountDTO.from_entity(created)
