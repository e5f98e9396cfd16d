"""Account ORM model - infrastructure layer SQLAlchemy mapping."""

from datetime import datetime

from sqlalchemy import LargeBinary, String, func
from sqlalchemy.orm import Mapped, mapped_column

from account_auth.domain.entities.account import AccountCredential
from account_auth.infrastructure.persistence.database import Base


class AccountModel(Base):
    """
    SQLAlchemy ORM model for the accounts table.

    Username uniqueness lives here as a unique index. The version column
    is SQLAlchemy's optimistic lock: every UPDATE is guarded by the version
    that was read, so of two concurrent password changes one fails instead
    of silently overwriting the other.
    """

    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)

    username: Mapped[str] = mapped_column(
        String(16),
        unique=True,
        index=True,
        nullable=False,
    )

    # Credentials
    salt: Mapped[bytes] = mapped_column(LargeBinary(64), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(128), nullable=False)

    created_at: Mapped[datetime] = mapped_column(
        insert_default=func.now(),
        nullable=False,
    )

    version: Mapped[int] = mapped_column(nullable=False)

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        """String representation of AccountModel. Credentials are left out."""
        return f"AccountModel(id={self.id!r}, username={self.username!r})"

    def to_entity(self) -> AccountCredential:
        """
        Convert ORM model to domain entity.

        Returns:
            AccountCredential domain entity
        """
        return AccountCredential(
            id=self.id,
            username=self.username,
            salt=self.salt,
            password_hash=self.password_hash,
            created_at=self.created_at,
            version=self.version,
        )

    @staticmethod
    def from_entity(account: AccountCredential) -> "AccountModel":
        """
        Create ORM model for a new account.

        id, created_at and version are assigned on insert.

        Args:
            account: Domain entity

        Returns:
            ORM model ready for persistence
        """
        return AccountModel(
            username=account.username,
            salt=account.salt,
            password_hash=account.password_hash,
        )
