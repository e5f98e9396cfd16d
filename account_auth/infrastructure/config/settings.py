"""Application settings using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from account_auth.infrastructure.security.pbkdf2_credential_hasher import (
    DEFAULT_HASH_NAME,
    DEFAULT_ITERATIONS,
    DEFAULT_KEY_LENGTH,
    DEFAULT_SALT_LENGTH,
    SUPPORTED_HASHES,
)


class Settings(BaseSettings):
    """Application configuration - single source of truth.

    All settings loaded from environment variables or .env files.

    Usage:
        settings = get_settings()
        print(settings.database_url)
        print(settings.kdf_iterations)
    """

    # Database
    db_host: str = Field(default="localhost")
    db_port: int = Field(default=5432)
    db_user: str = Field(default="postgres")
    db_password: str = Field(default="postgres")
    db_name: str = Field(default="accounts_db")
    db_echo: bool = Field(default=False)
    db_pool_size: int = Field(default=5)
    db_max_overflow: int = Field(default=10)
    db_create_tables: bool = Field(default=False)
    database_url_override: str | None = Field(
        default=None,
        description="Full SQLAlchemy async URL; takes precedence over the db_* fields.",
    )

    # Credential hashing. Existing hashes only verify with the values they were written with.
    kdf_hash_name: str = Field(default=DEFAULT_HASH_NAME)
    kdf_iterations: int = Field(default=DEFAULT_ITERATIONS, ge=1)
    kdf_key_length: int = Field(default=DEFAULT_KEY_LENGTH, ge=1)
    salt_length: int = Field(default=DEFAULT_SALT_LENGTH, ge=1)

    # Application
    environment: Literal["dev", "prod", "test"] = Field(default="dev")
    debug: bool = Field(default=False)
    app_name: str = Field(default="Account Credential Service")
    app_version: str = Field(default="1.0.0")

    # CORS
    cors_origins: str = Field(default="http://localhost:3000")

    # Logging
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("kdf_hash_name")
    @classmethod
    def validate_kdf_hash_name(cls, v: str) -> str:
        """Reject digests the credential hasher cannot use."""
        if v.lower() not in SUPPORTED_HASHES:
            raise ValueError(
                f"KDF_HASH_NAME must be one of: {', '.join(sorted(SUPPORTED_HASHES))}"
            )
        return v.lower()

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    @property
    def database_url(self) -> str:
        """Build async PostgreSQL URL."""
        if self.database_url_override:
            return self.database_url_override
        return f"postgresql+asyncpg://{self.db_user}:{self.db_password}@{self.db_host}:{self.db_port}/{self.db_name}"

    @property
    def is_production(self) -> bool:
        """Check if running in production."""
        return self.environment == "prod"

    @property
    def is_testing(self) -> bool:
        """Check if running in test mode."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded once and cached for the application lifecycle.
    For testing, clear the cache with: get_settings.cache_clear()

    Returns:
        Settings instance loaded from environment
    """
    return Settings()
