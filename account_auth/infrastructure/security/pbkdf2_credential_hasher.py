"""PBKDF2 credential hasher implementation using cryptography.

This is an INFRASTRUCTURE detail. The domain layer (ICredentialHasher
interface) defines WHAT we need (salt, derive, verify), while this
implementation defines HOW we do it (PBKDF2-HMAC via cryptography).

Dependency flow:
    AuthService (application) → ICredentialHasher (domain) ← Pbkdf2CredentialHasher (infrastructure)

cryptography is only imported here.
"""

import secrets

from cryptography.exceptions import InvalidKey
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from account_auth.domain.services.password_hasher import ICredentialHasher

DEFAULT_HASH_NAME = "sha512"
DEFAULT_ITERATIONS = 10_000
DEFAULT_KEY_LENGTH = 64
DEFAULT_SALT_LENGTH = 64

# "rsa-sha512" is the OpenSSL digest alias existing records were written with
SUPPORTED_HASHES: dict[str, type[hashes.HashAlgorithm]] = {
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
    "rsa-sha512": hashes.SHA512,
}


class HasherConfigurationError(ValueError):
    """
    Raised when the hasher is built with an unusable algorithm or parameters.

    This is a startup failure, never a per-request one: a hasher that cannot
    derive keys cannot serve any request.
    """


class Pbkdf2CredentialHasher(ICredentialHasher):
    """
    Production credential hasher using PBKDF2-HMAC.

    Configuration (defaults match every stored credential):
    - PRF: HMAC-SHA512
    - Iterations: 10,000
    - Derived key length: 64 bytes
    - Salt length: 64 bytes, from the secrets module (OS CSPRNG)

    Changing any of these invalidates existing hashes, since the salt and
    key are stored without the parameters.

    Usage:
        hasher = Pbkdf2CredentialHasher()

        salt = hasher.generate_salt()
        key = hasher.derive_hash("user_password_123", salt)

        hasher.verify("user_password_123", salt, key)  # True
        hasher.verify("wrong_password", salt, key)  # False
    """

    def __init__(
        self,
        hash_name: str = DEFAULT_HASH_NAME,
        iterations: int = DEFAULT_ITERATIONS,
        key_length: int = DEFAULT_KEY_LENGTH,
        salt_length: int = DEFAULT_SALT_LENGTH,
    ):
        """
        Initialize the hasher and validate its parameters.

        Args:
            hash_name: Name of the digest used as PBKDF2 PRF
            iterations: PBKDF2 iteration count
            key_length: Derived key length in bytes
            salt_length: Generated salt length in bytes

        Raises:
            HasherConfigurationError: If the digest is unknown or a size is not positive
        """
        algorithm = SUPPORTED_HASHES.get(hash_name.lower())
        if algorithm is None:
            raise HasherConfigurationError(
                f"Unsupported KDF hash algorithm '{hash_name}'. "
                f"Expected one of: {', '.join(sorted(SUPPORTED_HASHES))}"
            )

        for name, value in (
            ("iterations", iterations),
            ("key_length", key_length),
            ("salt_length", salt_length),
        ):
            if value < 1:
                raise HasherConfigurationError(f"{name} must be positive, got {value}")

        self._algorithm = algorithm
        self._iterations = iterations
        self._key_length = key_length
        self._salt_length = salt_length

    def derive_hash(self, password: str, salt: bytes) -> bytes:
        """
        Derive a key from the UTF-8 encoded password and the salt.

        Args:
            password: The plain text password
            salt: The account's salt

        Returns:
            key_length bytes of derived key
        """
        return self._kdf(salt).derive(password.encode("utf-8"))

    def generate_salt(self) -> bytes:
        """Return salt_length bytes from the OS CSPRNG."""
        return secrets.token_bytes(self._salt_length)

    def verify(self, password: str, salt: bytes, expected_hash: bytes) -> bool:
        """
        Verify a password against a stored derived key.

        PBKDF2HMAC.verify re-derives the key and compares it with
        cryptography's constant-time comparison.

        Args:
            password: The plain text password to verify
            salt: The salt the stored key was derived with
            expected_hash: The stored derived key

        Returns:
            True if the password matches, False otherwise
        """
        try:
            self._kdf(salt).verify(password.encode("utf-8"), expected_hash)
        except InvalidKey:
            return False
        return True

    def _kdf(self, salt: bytes) -> PBKDF2HMAC:
        # PBKDF2HMAC instances are single-use
        return PBKDF2HMAC(
            algorithm=self._algorithm(),
            length=self._key_length,
            salt=salt,
            iterations=self._iterations,
        )
