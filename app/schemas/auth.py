"""Request/response schemas for auth endpoints."""

from enum import Enum

from pydantic import BaseModel, Field


class Role(str, Enum):
    """Account roles. Admin satisfies every user-level policy."""

    USER = "user"
    ADMIN = "admin"


class LoginRequest(BaseModel):
    """Credentials for login and token generation."""

    username: str = Field(..., max_length=255, description="Username")
    password: str = Field(..., max_length=128, description="Password")


class RegisterRequest(BaseModel):
    """New account. Emptiness and password strength are checked by the service."""

    username: str = Field(..., max_length=255, description="Username")
    password: str = Field(..., max_length=128, description="Password")
    email: str = Field(..., max_length=320, description="Contact email")


class PasswordChangeRequest(BaseModel):
    """Credential update for the authenticated account."""

    current_password: str = Field(..., max_length=128)
    new_password: str = Field(..., max_length=128)


class TokenResponse(BaseModel):
    """JWT access token returned after successful authentication."""

    access_token: str = Field(..., description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")


class TokenClaim(BaseModel):
    """Verified token payload. Role is as of issuance and may be stale."""

    sub: str
    role: Role
    exp: int


class MessageResponse(BaseModel):
    message: str
