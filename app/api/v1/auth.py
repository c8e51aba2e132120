"""Registration, login, token generation and the role-gate dependencies."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import Settings, get_settings
from app.schemas.account import AccountView
from app.schemas.auth import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    Role,
    TokenClaim,
    TokenResponse,
)
from app.services import auth as auth_service
from app.stores import AccountStore, get_account_store

router = APIRouter()
security = HTTPBearer(auto_error=False)


def _bearer_token(credentials: HTTPAuthorizationCredentials | None) -> str | None:
    return credentials.credentials if credentials is not None else None


def get_current_claim(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenClaim:
    """Dependency: any authenticated user. Raises 401 if the Bearer token is missing or invalid."""
    return auth_service.require_role(_bearer_token(credentials), Role.USER, settings)


def require_admin(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenClaim:
    """Dependency: require a token whose role claim is 'admin'. Raises 403 for non-admin."""
    return auth_service.require_role(_bearer_token(credentials), Role.ADMIN, settings)


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(
    body: RegisterRequest,
    accounts: Annotated[AccountStore, Depends(get_account_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> MessageResponse:
    """Create a player account (role 'user', level 1, no experience)."""
    auth_service.register(accounts, body, settings)
    return MessageResponse(message="User created successfully")


@router.post("/login", response_model=AccountView)
def login(
    body: LoginRequest,
    accounts: Annotated[AccountStore, Depends(get_account_store)],
) -> AccountView:
    """Verify username and password; returns the account without credentials."""
    return auth_service.authenticate(accounts, body.username, body.password)


@router.post("/generate-token", response_model=TokenResponse)
def generate_token(
    body: LoginRequest,
    accounts: Annotated[AccountStore, Depends(get_account_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenResponse:
    """
    Authenticate with username and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <access_token>
    """
    account = auth_service.authenticate(accounts, body.username, body.password)
    token = auth_service.issue_token(account, settings)
    return TokenResponse(access_token=token, token_type="bearer")
