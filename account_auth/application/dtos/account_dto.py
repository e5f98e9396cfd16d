"""Account DTOs for application layer using Pydantic."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from account_auth.domain.entities.account import AccountCredential

USERNAME_PATTERN = r"^[A-Za-z0-9_\-.]{1,16}$"


def strip_whitespace(v: str | None) -> str | None:
    """Strip whitespace from string values."""
    return v.strip() if isinstance(v, str) else v


Username = Annotated[
    str,
    BeforeValidator(strip_whitespace),
    Field(pattern=USERNAME_PATTERN, description="1-16 letters, digits, '_', '-' or '.'"),
]


class CreateAccountDTO(BaseModel):
    """
    DTO for registering an account.

    Validation:
    - username: surrounding whitespace trimmed, then must match USERNAME_PATTERN
    - password: Must be at least 8 characters (min_length=8)
    """

    username: Username
    password: Annotated[str, Field(min_length=8)]

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "alice",
                "password": "securepassword123",
            }
        }
    )


class AccountDTO(BaseModel):
    """DTO for returning account data to presentation layer. Never carries salt or hash."""

    id: int
    username: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_entity(cls, account: AccountCredential) -> "AccountDTO":
        """
        Convert a PERSISTED domain entity to DTO.

        PRECONDITION: The account MUST be persisted (have id and created_at).

        Args:
            account: AccountCredential domain entity (must be persisted)

        Returns:
            AccountDTO instance

        Raises:
            ValueError: If the entity is not persisted
        """
        if account.id is None:
            raise ValueError(
                "Cannot create AccountDTO from non-persisted entity: missing id. "
                "Ensure the account has been saved via repository before converting to DTO."
            )

        if account.created_at is None:
            raise ValueError(
                "Cannot create AccountDTO from non-persisted entity: missing created_at. "
                "Ensure the account has been saved via repository before converting to DTO."
            )

        return cls(
            id=account.id,
            username=account.username,
            created_at=account.created_at,
        )
