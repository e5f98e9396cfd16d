"""Fake credential hasher for testing.

Real PBKDF2 with 10,000 iterations is deliberately slow. Unit tests of
the services care about the lookup/verify/save flow, not the KDF, so they
use this fake: its "hash" is readable and computed in microseconds.

Tests that exercise the real KDF use Pbkdf2CredentialHasher directly.
"""

from account_auth.domain.services.password_hasher import ICredentialHasher


class FakeCredentialHasher(ICredentialHasher):
    """
    Fake credential hasher for unit testing.

    This implementation:
    1. "Derives" by joining a prefix, the salt and the password
    2. Hands out sequential, distinct salts
    3. Verifies by plain comparison

    Usage in tests:
        hasher = FakeCredentialHasher()
        salt = hasher.generate_salt()           # b"salt-0001"
        key = hasher.derive_hash("pw", salt)    # b"HASHED:salt-0001:pw"
        hasher.verify("pw", salt, key)          # True

    Security Note:
        NEVER use this in production! It stores the password in clear.
    """

    HASH_PREFIX = b"HASHED:"

    def __init__(self):
        self._salts_issued = 0

    def derive_hash(self, password: str, salt: bytes) -> bytes:
        """Fake derivation: prefix + salt + ':' + password."""
        return self.HASH_PREFIX + salt + b":" + password.encode("utf-8")

    def generate_salt(self) -> bytes:
        """Return a new sequential salt."""
        self._salts_issued += 1
        return f"salt-{self._salts_issued:04d}".encode()

    def verify(self, password: str, salt: bytes, expected_hash: bytes) -> bool:
        """Compare the fake derivation against the expected hash."""
        return self.derive_hash(password, salt) == expected_hash

    # Helper methods for testing

    @property
    def salts_issued(self) -> int:
        """Number of salts generated so far."""
        return self._salts_issued

    def extract_plain_password(self, hashed: bytes) -> str:
        """
        Recover the password from a fake hash.

        Raises:
            ValueError: If the value was not produced by this fake
        """
        if not hashed.startswith(self.HASH_PREFIX):
            raise ValueError(f"Not a fake hash: {hashed!r}")

        return hashed[len(self.HASH_PREFIX) :].split(b":", 1)[1].decode("utf-8")
