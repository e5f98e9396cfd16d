"""Authentication service - application layer business logic.

This service orchestrates the credential use cases:
1. Authenticate (lookup + verify)
2. Change password (lookup + verify + re-derive + save)

DEPENDENCY INVERSION in action:
- AuthService depends on ICredentialHasher (abstraction)
- AuthService depends on IUnitOfWork (abstraction)
- No dependencies on cryptography or SQLAlchemy

Nothing in this module logs passwords, salts or hashes.
"""

import asyncio
import logging
from collections.abc import Callable

from account_auth.application.exceptions.exceptions import (
    AccountNotFoundError,
    InvalidCredentialsError,
    StorageError,
)
from account_auth.domain.entities.account import AccountCredential
from account_auth.domain.exceptions import StorageException
from account_auth.domain.repositories.unit_of_work import IUnitOfWork
from account_auth.domain.services.password_hasher import ICredentialHasher

logger = logging.getLogger(__name__)


class AuthService:
    """
    Account authenticator.

    Per attempt: Lookup -> NotFound (fail) | Found -> Verify -> Mismatch (fail) | Match.
    There are no internal retries; retry policy belongs to the caller.

    Unknown usernames raise AccountNotFoundError, which is an
    InvalidCredentialsError with the same message and code. Callers that
    only catch InvalidCredentialsError therefore cannot enumerate usernames.
    The unknown-username path also runs one verification against a
    placeholder credential, so both failures cost one key derivation.

    Derivations run in a worker thread so the event loop keeps serving
    other requests while a key is derived.

    Testing:
    - Unit tests use FakeCredentialHasher and FakeUnitOfWork
    - No database or real KDF required in unit tests
    """

    def __init__(
        self,
        uow_factory: Callable[[], IUnitOfWork],
        credential_hasher: ICredentialHasher,
    ):
        """
        Initialize auth service with dependencies.

        Args:
            uow_factory: Factory function that returns IUnitOfWork instances
            credential_hasher: Salted password hasher (abstraction)
        """
        self._uow_factory = uow_factory
        self._credential_hasher = credential_hasher

        # Never matches; verify() derives the full key before comparing
        self._placeholder_salt = credential_hasher.generate_salt()
        self._placeholder_digest = b"\x00"

    async def authenticate(self, username: str, password: str) -> AccountCredential:
        """
        Verify a login attempt.

        Read-only and safely repeatable.

        Args:
            username: Account username
            password: Supplied plain text password

        Returns:
            The stored AccountCredential on a match

        Raises:
            AccountNotFoundError: If no account has this username
            InvalidCredentialsError: If the password does not match

        Example:
            account = await auth_service.authenticate("alice", "secret")
        """
        async with self._uow_factory() as uow:
            account = await uow.accounts.get_by_username(username)

            if not await self._verify(account, password):
                if account is None:
                    logger.info(f"Authentication failed for '{username}': unknown account")
                    raise AccountNotFoundError()

                logger.info(f"Authentication failed for '{username}': password mismatch")
                raise InvalidCredentialsError()

            logger.debug(f"Authentication succeeded for '{username}'")
            return account

    async def change_password(
        self, username: str, old_password: str, new_password: str
    ) -> None:
        """
        Replace an account's password after checking the current one.

        The new hash is derived with the account's existing salt; the salt
        is never rotated here. The write happens inside one unit of work, so
        on any storage failure the old hash stays in place.

        Args:
            username: Account username
            old_password: Current password
            new_password: Replacement password

        Raises:
            AccountNotFoundError: If no account has this username
            InvalidCredentialsError: If old_password does not match
            StorageError: If the new hash could not be persisted
        """
        try:
            async with self._uow_factory() as uow:
                account = await uow.accounts.get_by_username(username)

                if not await self._verify(account, old_password):
                    if account is None:
                        logger.info(f"Password change refused for '{username}': unknown account")
                        raise AccountNotFoundError()

                    logger.info(f"Password change refused for '{username}': password mismatch")
                    raise InvalidCredentialsError()

                new_hash = await asyncio.to_thread(
                    self._credential_hasher.derive_hash, new_password, account.salt
                )
                account.change_password_hash(new_hash)

                await uow.accounts.update(account)
                await uow.commit()
        except StorageException as exc:
            logger.error(f"Password change for '{username}' not persisted: {exc.message}")
            raise StorageError(exc.message) from exc

        logger.info(f"Password changed for '{username}'")

    async def _verify(self, account: AccountCredential | None, password: str) -> bool:
        """Check the password off the event loop; a missing account never matches."""
        if account is None:
            await asyncio.to_thread(
                self._credential_hasher.verify,
                password,
                self._placeholder_salt,
                self._placeholder_digest,
            )
            return False

        return await asyncio.to_thread(
            self._credential_hasher.verify, password, account.salt, account.password_digest
        )
