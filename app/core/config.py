"""Application configuration loaded from environment variables."""

import re
from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for MONGODB_URI (module-level so validators can use it).
VALID_MONGODB_URI_PREFIXES = (
    "mongodb://",
    "mongodb+srv://",
)

# Lowercase, uppercase, digit and special character; 8 to 128 characters.
DEFAULT_PASSWORD_POLICY = r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[^A-Za-z0-9]).{8,128}$"


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    API_V1_PREFIX: str = "/api/v1"
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # MongoDB document store
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DB_NAME: str = "TheDune"
    MONGODB_TIMEOUT_MS: int = 5000

    # JWT authentication. No default: the app refuses to start without a secret.
    JWT_SECRET: SecretStr | None = None
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_MINUTES: int = 60

    # Password strength policy applied at registration and password change
    PASSWORD_POLICY_PATTERN: str = DEFAULT_PASSWORD_POLICY
    PASSWORD_POLICY_HINT: str = (
        "Password must be 8-128 characters and contain an uppercase letter, "
        "a lowercase letter, a digit and a special character."
    )

    @field_validator("MONGODB_URI")
    @classmethod
    def validate_mongodb_uri(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("MONGODB_URI must be set and non-empty")
        if not any(v.strip().startswith(prefix) for prefix in VALID_MONGODB_URI_PREFIXES):
            raise ValueError(
                "MONGODB_URI must be a MongoDB URL (e.g. mongodb:// or mongodb+srv://)"
            )
        return v.strip()

    @field_validator("MONGODB_DB_NAME")
    @classmethod
    def validate_mongodb_db_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("MONGODB_DB_NAME must be set and non-empty")
        return v.strip()

    @field_validator("MONGODB_TIMEOUT_MS")
    @classmethod
    def validate_mongodb_timeout(cls, v: int) -> int:
        if v < 100 or v > 60000:
            raise ValueError("MONGODB_TIMEOUT_MS must be between 100 and 60000")
        return v

    @field_validator("JWT_SECRET")
    @classmethod
    def validate_jwt_secret(cls, v: SecretStr | None) -> SecretStr | None:
        # Blank counts as unset; the startup check reports it as a ConfigError.
        if v is None or not v.get_secret_value().strip():
            return None
        return v

    @field_validator("JWT_ALGORITHM")
    @classmethod
    def validate_jwt_algorithm(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("JWT_ALGORITHM must be set and non-empty")
        return v.strip()

    @field_validator("JWT_EXPIRE_MINUTES")
    @classmethod
    def validate_jwt_expire_minutes(cls, v: int) -> int:
        if v < 1 or v > 10080:
            raise ValueError(
                "JWT_EXPIRE_MINUTES must be between 1 and 10080 (1 min to 7 days)"
            )
        return v

    @field_validator("PASSWORD_POLICY_PATTERN")
    @classmethod
    def validate_password_policy(cls, v: str) -> str:
        if not v:
            raise ValueError("PASSWORD_POLICY_PATTERN must be set and non-empty")
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"PASSWORD_POLICY_PATTERN is not a valid regex: {e}") from e
        return v


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
