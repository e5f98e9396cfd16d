"""FastAPI dependency injection setup.

This module is the COMPOSITION ROOT - where we wire up dependencies.

This is where we decide:
- Use Pbkdf2CredentialHasher with the parameters from Settings
- Use UnitOfWork with SQLAlchemy as the account storage
- Use Settings from environment (not hardcoded config)

The services never look storage up themselves; they receive a UoW
factory here.
"""

from collections.abc import Callable

from fastapi import Depends
from sqlalchemy.ext.asyncio import async_sessionmaker, AsyncEngine

from account_auth.application.services.account_service import AccountService
from account_auth.application.services.auth_service import AuthService
from account_auth.domain.repositories.unit_of_work import IUnitOfWork
from account_auth.domain.services.password_hasher import ICredentialHasher
from account_auth.infrastructure.config.settings import Settings, get_settings
from account_auth.infrastructure.persistence.database import (
    create_database_engine,
    create_session_factory,
)
from account_auth.infrastructure.repositories.unit_of_work_impl import UnitOfWork
from account_auth.infrastructure.security.pbkdf2_credential_hasher import (
    Pbkdf2CredentialHasher,
)


# Module-level singletons (created once, reused throughout app lifecycle)
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker | None = None


def get_database_engine(settings: Settings = Depends(get_settings)) -> AsyncEngine:
    """Get or create database engine singleton.

    Args:
        settings: Application settings (injected)

    Returns:
        AsyncEngine instance
    """
    global _engine
    if _engine is None:
        _engine = create_database_engine(settings)
    return _engine


async def dispose_database_engine() -> None:
    """Dispose the engine singleton, if one was created."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


def get_session_factory(
    engine: AsyncEngine = Depends(get_database_engine),
) -> async_sessionmaker:
    """Get or create session factory singleton.

    Args:
        engine: Database engine (injected)

    Returns:
        Session factory
    """
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(engine)
    return _session_factory


def get_uow_factory(
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> Callable[[], IUnitOfWork]:
    """
    Dependency that provides the storage handle given to the services.

    Each call of the returned factory opens a fresh UnitOfWork.

    Note:
        Tests override this to hand in an in-memory FakeUnitOfWork:

        app.dependency_overrides[get_uow_factory] = lambda: lambda: fake_uow
    """

    def uow_factory() -> IUnitOfWork:
        return UnitOfWork(session_factory)

    return uow_factory


def build_credential_hasher(settings: Settings) -> ICredentialHasher:
    """
    Build the credential hasher from settings.

    Raises:
        HasherConfigurationError: If the KDF settings are unusable
    """
    return Pbkdf2CredentialHasher(
        hash_name=settings.kdf_hash_name,
        iterations=settings.kdf_iterations,
        key_length=settings.kdf_key_length,
        salt_length=settings.salt_length,
    )


def get_credential_hasher(settings: Settings = Depends(get_settings)) -> ICredentialHasher:
    """
    Dependency that provides the credential hasher.

    Hashers are stateless, so a fresh instance per request is cheap.
    The same construction runs once at startup, so bad KDF settings
    stop the app before it serves anything.
    """
    return build_credential_hasher(settings)


def get_auth_service(
    credential_hasher: ICredentialHasher = Depends(get_credential_hasher),
    uow_factory: Callable[[], IUnitOfWork] = Depends(get_uow_factory),
) -> AuthService:
    """
    Dependency that provides AuthService.

    Dependency Graph:
        FastAPI endpoint
            → get_auth_service()
                → get_credential_hasher() → Settings
                → get_uow_factory() → get_session_factory() → get_database_engine() → Settings
    """
    return AuthService(uow_factory=uow_factory, credential_hasher=credential_hasher)


def get_account_service(
    credential_hasher: ICredentialHasher = Depends(get_credential_hasher),
    uow_factory: Callable[[], IUnitOfWork] = Depends(get_uow_factory),
) -> AccountService:
    """Dependency that provides AccountService."""
    return AccountService(uow_factory=uow_factory, credential_hasher=credential_hasher)
