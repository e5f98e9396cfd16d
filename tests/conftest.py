"""Pytest configuration and fixtures.

Shared fixtures for unit tests. Services get fakes
(FakeCredentialHasher, FakeUnitOfWork): no real KDF, no database, and a
fresh instance per test.
"""

from datetime import UTC, datetime

import pytest

from account_auth.application.services.account_service import AccountService
from account_auth.application.services.auth_service import AuthService
from account_auth.domain.entities.account import AccountCredential
from tests.fakes.password_hasher_fake import FakeCredentialHasher
from tests.fakes.unit_of_work_fake import FakeUnitOfWork

ALICE_SALT = b"alice-salt"
BOB_SALT = b"bob-salt"


def make_account(
    hasher: FakeCredentialHasher, username: str, password: str, salt: bytes, id: int
) -> AccountCredential:
    """Build a persisted-looking account whose hash the fake hasher will accept."""
    return AccountCredential(
        id=id,
        username=username,
        salt=salt,
        password_hash=hasher.derive_hash(password, salt).hex(),
        created_at=datetime.now(UTC),
        version=1,
    )


@pytest.fixture
def fake_credential_hasher() -> FakeCredentialHasher:
    """Provide a FakeCredentialHasher for tests."""
    return FakeCredentialHasher()


@pytest.fixture
def alice(fake_credential_hasher) -> AccountCredential:
    """Account 'alice' with password 'correct'."""
    return make_account(fake_credential_hasher, "alice", "correct", ALICE_SALT, id=1)


@pytest.fixture
def bob(fake_credential_hasher) -> AccountCredential:
    """Account 'bob' with password 'hunter22'."""
    return make_account(fake_credential_hasher, "bob", "hunter22", BOB_SALT, id=2)


@pytest.fixture
def fake_uow():
    """Provide an empty FakeUnitOfWork."""
    return FakeUnitOfWork()


@pytest.fixture
def fake_uow_with_accounts(alice, bob):
    """Provide a FakeUnitOfWork pre-populated with alice and bob."""
    return FakeUnitOfWork(initial_accounts=[alice, bob])


@pytest.fixture
def auth_service(fake_uow_with_accounts, fake_credential_hasher) -> AuthService:
    """AuthService over the pre-populated fake storage."""

    def uow_factory():
        return fake_uow_with_accounts

    return AuthService(uow_factory=uow_factory, credential_hasher=fake_credential_hasher)


@pytest.fixture
def account_service(fake_uow, fake_credential_hasher) -> AccountService:
    """AccountService over empty fake storage."""

    def uow_factory():
        return fake_uow

    return AccountService(uow_factory=uow_factory, credential_hasher=fake_credential_hasher)
