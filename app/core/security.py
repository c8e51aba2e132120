"""Password hashing, password policy and JWT creation/verification."""

import re
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import TYPE_CHECKING, Any

import bcrypt
import jwt

from app.core.exceptions import ConfigError, ValidationError

if TYPE_CHECKING:
    from app.core.config import Settings

# Bcrypt cost (rounds); 12 is a good default for security vs speed.
BCRYPT_ROUNDS = 12

# Min/max lengths for username and password validation.
USERNAME_MIN_LEN = 1
USERNAME_MAX_LEN = 255
PASSWORD_MAX_LEN = 128

# Claims every access token must carry.
REQUIRED_CLAIMS = ("sub", "role", "exp")


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password for storage. Do not store plain passwords."""
    # bcrypt has a 72-byte limit; truncate to avoid errors (validation already limits length).
    pw_bytes = plain_password.encode("utf-8")[:72]
    return bcrypt.hashpw(pw_bytes, bcrypt.gensalt(rounds=BCRYPT_ROUNDS)).decode("utf-8")


def verify_password(plain_password: str, hashed: str) -> bool:
    """Verify a plain password against a stored hash (constant-time inside bcrypt)."""
    pw_bytes = plain_password.encode("utf-8")[:72]
    try:
        return bcrypt.checkpw(pw_bytes, hashed.encode("utf-8"))
    except (ValueError, TypeError):
        return False


@lru_cache(maxsize=1)
def dummy_password_hash() -> str:
    """Hash compared against when no account exists, so both login failures cost one bcrypt check."""
    return hash_password("no-such-account")


def check_password_policy(password: str, settings: "Settings") -> None:
    """Raise ValidationError unless password matches PASSWORD_POLICY_PATTERN."""
    if len(password) > PASSWORD_MAX_LEN or not re.search(
        settings.PASSWORD_POLICY_PATTERN, password
    ):
        raise ValidationError(settings.PASSWORD_POLICY_HINT)


def get_jwt_secret(settings: "Settings") -> str:
    """Return the signing secret or raise ConfigError when it is not configured."""
    if settings.JWT_SECRET is None:
        raise ConfigError("JWT_SECRET is not configured")
    secret = settings.JWT_SECRET.get_secret_value()
    if not secret.strip():
        raise ConfigError("JWT_SECRET is not configured")
    return secret


def create_access_token(sub: str, role: str, settings: "Settings") -> str:
    """Create a JWT access token with sub (username), role, iat and exp."""
    secret = get_jwt_secret(settings)
    now = datetime.now(UTC)
    expire = now + timedelta(minutes=settings.JWT_EXPIRE_MINUTES)
    payload: dict[str, Any] = {
        "sub": str(sub),
        "role": role,
        "exp": expire,
        "iat": now,
    }
    return jwt.encode(
        payload,
        secret,
        algorithm=settings.JWT_ALGORITHM,
    )


def decode_access_token(token: str, settings: "Settings") -> dict[str, Any]:
    """
    Decode and validate JWT; return payload (sub, role, exp, iat).
    Raises jwt.PyJWTError on invalid, incomplete or expired token.
    """
    secret = get_jwt_secret(settings)
    return jwt.decode(
        token,
        secret,
        algorithms=[settings.JWT_ALGORITHM],
        options={"require": list(REQUIRED_CLAIMS)},
    )
