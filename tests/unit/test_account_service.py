"""Unit tests for AccountService.

These tests use fake storage to test registration in isolation
without a database.
"""

import pytest

from account_auth.application.dtos.account_dto import CreateAccountDTO
from account_auth.application.exceptions import AccountAlreadyExistsError, StorageError
from account_auth.application.services.auth_service import AuthService

pytestmark = pytest.mark.unit


class TestAccountServiceCreate:
    """Test cases for registering accounts."""

    @pytest.mark.asyncio
    async def test_create_account_success(self, account_service, fake_uow):
        """Test successful registration."""
        # Arrange
        dto = CreateAccountDTO(username="carol", password="password123")

        # Act
        result = await account_service.create_account(dto)

        # Assert
        assert result.username == "carol"
        assert result.id is not None
        assert result.created_at is not None
        assert fake_uow.was_committed()
        assert fake_uow.accounts.count() == 1

    @pytest.mark.asyncio
    async def test_create_account_generates_salt_and_hash(
        self, account_service, fake_uow, fake_credential_hasher
    ):
        """Test that a fresh salt is generated and the password is stored derived."""
        await account_service.create_account(
            CreateAccountDTO(username="carol", password="password123")
        )

        stored = fake_uow.accounts.get_committed("carol")
        assert stored.salt == b"salt-0001"
        assert stored.password_hash != "password123"
        assert stored.password_digest == fake_credential_hasher.derive_hash(
            "password123", b"salt-0001"
        )

    @pytest.mark.asyncio
    async def test_each_account_gets_its_own_salt(self, account_service, fake_uow):
        """Test that salts are never shared between accounts."""
        await account_service.create_account(
            CreateAccountDTO(username="carol", password="password123")
        )
        await account_service.create_account(
            CreateAccountDTO(username="dave", password="password123")
        )

        carol = fake_uow.accounts.get_committed("carol")
        dave = fake_uow.accounts.get_committed("dave")
        assert carol.salt != dave.salt
        assert carol.password_hash != dave.password_hash

    @pytest.mark.asyncio
    async def test_result_does_not_expose_credentials(self, account_service):
        """Test that the returned DTO carries neither salt nor hash."""
        result = await account_service.create_account(
            CreateAccountDTO(username="carol", password="password123")
        )

        assert not hasattr(result, "salt")
        assert not hasattr(result, "password_hash")
        assert set(result.model_dump()) == {"id", "username", "created_at"}

    @pytest.mark.asyncio
    async def test_create_account_duplicate_username(self, account_service):
        """Test registering a taken username raises error."""
        dto = CreateAccountDTO(username="carol", password="password123")
        await account_service.create_account(dto)

        with pytest.raises(AccountAlreadyExistsError) as exc_info:
            await account_service.create_account(dto)

        assert "already registered" in str(exc_info.value)
        assert exc_info.value.error_code == "ACCOUNT_ALREADY_EXISTS"

    @pytest.mark.asyncio
    async def test_create_account_commit_failure(self, account_service, fake_uow):
        """Test that a failed commit raises StorageError and stores nothing."""
        fake_uow.fail_on_commit = True

        with pytest.raises(StorageError):
            await account_service.create_account(
                CreateAccountDTO(username="carol", password="password123")
            )

        assert fake_uow.accounts.count() == 0

    @pytest.mark.asyncio
    async def test_created_account_can_authenticate(
        self, account_service, fake_uow, fake_credential_hasher
    ):
        """Test that a registered account authenticates with its password."""
        await account_service.create_account(
            CreateAccountDTO(username="carol", password="password123")
        )
        auth_service = AuthService(
            uow_factory=lambda: fake_uow, credential_hasher=fake_credential_hasher
        )

        account = await auth_service.authenticate("carol", "password123")

        assert account.username == "carol"

    @pytest.mark.asyncio
    async def test_lost_registration_race_is_a_conflict(
        self, account_service, fake_uow, monkeypatch
    ):
        """Test that a duplicate caught on insert maps to AccountAlreadyExistsError, not StorageError."""
        dto = CreateAccountDTO(username="carol", password="password123")
        await account_service.create_account(dto)

        # The competing registration passed the existence check before carol was stored
        async def username_free(username):
            return False

        monkeypatch.setattr(fake_uow.accounts, "username_exists", username_free)

        with pytest.raises(AccountAlreadyExistsError) as exc_info:
            await account_service.create_account(dto)

        assert exc_info.value.error_code == "ACCOUNT_ALREADY_EXISTS"
        assert fake_uow.accounts.count() == 1
