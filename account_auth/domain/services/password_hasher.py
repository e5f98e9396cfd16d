"""Credential hashing interface - domain service abstraction.

Password hashing is a business requirement: passwords are never stored,
only a salted derivative of them, and login attempts are checked against
that derivative.

The domain cares that:
1. Every account gets its own unpredictable salt
2. The same (password, salt) pair always derives the same key
3. Verification does not leak timing information

The domain does NOT care which KDF or crypto library implements it.
"""

from abc import ABC, abstractmethod


class ICredentialHasher(ABC):
    """
    Interface for salted password derivation and verification.

    The salt is kept separately from the derived key (it is a field of the
    stored credential), so callers pass it in explicitly. That lets a
    password change reuse the account's original salt.

    Implementations must never log or otherwise expose passwords, salts or
    derived keys.
    """

    @abstractmethod
    def derive_hash(self, password: str, salt: bytes) -> bytes:
        """
        Derive a fixed-length key from a password and salt.

        Deterministic: identical inputs always give identical output.

        Args:
            password: The plain text password
            salt: The account's salt

        Returns:
            Derived key bytes
        """
        pass

    @abstractmethod
    def generate_salt(self) -> bytes:
        """
        Generate a fresh salt from a cryptographically secure source.

        Returns:
            Random salt bytes (never empty)
        """
        pass

    @abstractmethod
    def verify(self, password: str, salt: bytes, expected_hash: bytes) -> bool:
        """
        Check a password against a stored derived key.

        Args:
            password: The plain text password to check
            salt: The salt the expected hash was derived with
            expected_hash: The stored derived key

        Returns:
            True only if the derived key matches exactly

        Example:
            salt = hasher.generate_salt()
            stored = hasher.derive_hash("my_password", salt)

            hasher.verify("my_password", salt, stored)  # Returns: True
            hasher.verify("wrong_password", salt, stored)  # Returns: False
        """
        pass
