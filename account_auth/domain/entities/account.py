"""Account credential domain entity - pure business logic, no infrastructure."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from account_auth.domain.exceptions import InvalidEntityStateException


@dataclass
class AccountCredential:
    """
    Stored login credential for one username.

    Holds the per-account salt and the hex-encoded key derived from the
    current password and that salt. The salt is fixed for the lifetime of
    the account; only the password hash is ever replaced.

    Username format and uniqueness are enforced at the input boundary and by
    the storage schema, not here.
    """

    username: str
    salt: bytes = field(repr=False)
    password_hash: str = field(repr=False)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    version: int = 0

    def __post_init__(self):
        """
        Validate entity invariants at construction time.

        A credential without salt or without a well-formed hash can never
        verify a password, so it is rejected outright.
        """
        if not self.username:
            raise InvalidEntityStateException(
                "Username is required. Account cannot exist without an identifier."
            )

        if not self.salt:
            raise InvalidEntityStateException(
                f"Salt is required for account '{self.username}'."
            )

        if not self.password_hash:
            raise InvalidEntityStateException(
                f"Password hash is required for account '{self.username}'."
            )

        # fromhex() skips whitespace, so also require a clean round trip
        try:
            well_formed = (
                bytes.fromhex(self.password_hash).hex() == self.password_hash.lower()
            )
        except ValueError:
            well_formed = False

        if not well_formed:
            raise InvalidEntityStateException(
                f"Password hash for account '{self.username}' is not valid hex."
            )

    @property
    def password_digest(self) -> bytes:
        """Raw bytes of the stored password hash."""
        return bytes.fromhex(self.password_hash)

    def change_password_hash(self, new_hash: bytes) -> None:
        """
        Replace the stored password hash.

        The salt is left untouched: the new hash must have been derived
        from the account's existing salt.

        Args:
            new_hash: Derived key for the new password

        Raises:
            InvalidEntityStateException: If the new hash is empty
        """
        if not new_hash:
            raise InvalidEntityStateException(
                f"Cannot set an empty password hash for account '{self.username}'."
            )

        self.password_hash = new_hash.hex()
