"""Registration, credential verification, token issuance and role gates."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import jwt
from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import (
    DuplicateError,
    ForbiddenError,
    InvalidCredentialsError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from app.core.security import (
    USERNAME_MAX_LEN,
    check_password_policy,
    create_access_token,
    decode_access_token,
    dummy_password_hash,
    hash_password,
    verify_password,
)
from app.schemas.account import AccountView
from app.schemas.auth import PasswordChangeRequest, RegisterRequest, Role, TokenClaim

if TYPE_CHECKING:
    from app.core.config import Settings
    from app.stores.accounts import AccountStore

logger = logging.getLogger(__name__)

# Same text for unknown username and wrong password so responses do not leak which.
INVALID_CREDENTIALS_MESSAGE = "Invalid username or password."


def register(accounts: AccountStore, command: RegisterRequest, settings: Settings) -> None:
    """
    Create an account with role "user", level 1 and no experience.

    Raises ValidationError for empty fields or a password that fails the
    configured policy, DuplicateError when the username is taken.
    """
    _create_account(accounts, command, Role.USER, settings)


def create_account(
    accounts: AccountStore,
    command: RegisterRequest,
    role: Role,
    settings: Settings,
) -> None:
    """Administrative variant of register that can assign any role."""
    _create_account(accounts, command, role, settings)


def _create_account(
    accounts: AccountStore,
    command: RegisterRequest,
    role: Role,
    settings: Settings,
) -> None:
    username = command.username.strip()
    email = command.email.strip()
    if not username:
        raise ValidationError("Username is required.")
    if len(username) > USERNAME_MAX_LEN:
        raise ValidationError("Invalid username length.")
    if not command.password:
        raise ValidationError("Password is required.")
    if not email:
        raise ValidationError("Email is required.")
    check_password_policy(command.password, settings)

    # Checked up front for a clean error; the unique index still guards the race.
    if accounts.find_by_username(username) is not None:
        raise DuplicateError("User already exists")

    accounts.insert(
        {
            "username": username,
            "password_hash": hash_password(command.password),
            "email": email,
            "role": role.value,
            "registration_date": datetime.now(UTC).isoformat(),
            "profile": {
                "level": 1,
                "experience": 0,
                "attributes": {"strength": 0, "dexterity": 0, "intelligence": 0},
            },
            "inventory": [],
        }
    )
    logger.info("Account registered", extra={"username": username, "role": role.value})


def authenticate(accounts: AccountStore, username: str, password: str) -> AccountView:
    """
    Verify credentials and return the public account view.

    Raises NotFoundError for an unknown username and InvalidCredentialsError for
    a wrong password; both carry the same message.
    """
    doc = accounts.find_by_username(username)
    if doc is None:
        verify_password(password, dummy_password_hash())
        logger.info("Login failed", extra={"username": username, "reason": "unknown_user"})
        raise NotFoundError(INVALID_CREDENTIALS_MESSAGE)
    if not verify_password(password, doc.get("password_hash", "")):
        logger.info("Login failed", extra={"username": username, "reason": "bad_password"})
        raise InvalidCredentialsError(INVALID_CREDENTIALS_MESSAGE)
    return AccountView.from_document(doc)


def issue_token(account: AccountView, settings: Settings) -> str:
    """Sign {sub: username, role} with JWT_EXPIRE_MINUTES validity. ConfigError without a secret."""
    return create_access_token(sub=account.username, role=account.role.value, settings=settings)


def decode_claim(token: str | None, settings: Settings) -> TokenClaim:
    """Validate signature and expiry; UnauthorizedError if missing, malformed or expired."""
    if not token:
        raise UnauthorizedError("Not authenticated")
    try:
        payload: dict[str, Any] = decode_access_token(token, settings)
    except jwt.ExpiredSignatureError:
        logger.info("Token rejected", extra={"reason": "expired"})
        raise UnauthorizedError("Token expired")
    except jwt.PyJWTError:
        logger.info("Token rejected", extra={"reason": "invalid"})
        raise UnauthorizedError("Invalid or expired token")
    try:
        return TokenClaim.model_validate(payload)
    except PydanticValidationError:
        logger.info("Token rejected", extra={"reason": "bad_payload"})
        raise UnauthorizedError("Invalid token payload")


def role_satisfies(actual: Role, required: Role) -> bool:
    """Admin satisfies every policy; user satisfies only the user policy."""
    return actual == Role.ADMIN or actual == required


def require_role(token: str | None, role: Role, settings: Settings) -> TokenClaim:
    """
    Gate a protected operation.

    Role.USER is the "any authenticated user" policy, Role.ADMIN is admin only.
    The role is read from the token, not re-read from the account.
    """
    claim = decode_claim(token, settings)
    if not role_satisfies(claim.role, role):
        logger.info(
            "Access denied",
            extra={"username": claim.sub, "role": claim.role.value, "required": role.value},
        )
        raise ForbiddenError(f"{role.value.capitalize()} access required")
    return claim


def change_password(
    accounts: AccountStore,
    username: str,
    command: PasswordChangeRequest,
    settings: Settings,
) -> None:
    """Verify the current password, enforce the policy and store a fresh hash."""
    authenticate(accounts, username, command.current_password)
    check_password_policy(command.new_password, settings)
    if accounts.update_password(username, hash_password(command.new_password)) == 0:
        raise NotFoundError("User not found")
    logger.info("Password changed", extra={"username": username})
