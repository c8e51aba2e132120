"""Account self-service and admin account management."""

from typing import Annotated

from fastapi import APIRouter, Depends

from app.api.v1.auth import get_current_claim, require_admin
from app.core.config import Settings, get_settings
from app.schemas.account import AccountView
from app.schemas.auth import MessageResponse, PasswordChangeRequest, TokenClaim
from app.services import accounts as account_service
from app.services import auth as auth_service
from app.stores import AccountStore, get_account_store

router = APIRouter()


@router.get("/me", response_model=AccountView)
def get_me(
    claim: Annotated[TokenClaim, Depends(get_current_claim)],
    accounts: Annotated[AccountStore, Depends(get_account_store)],
) -> AccountView:
    return account_service.get_account(accounts, claim.sub)


@router.put("/me/password", response_model=MessageResponse)
def change_my_password(
    body: PasswordChangeRequest,
    claim: Annotated[TokenClaim, Depends(get_current_claim)],
    accounts: Annotated[AccountStore, Depends(get_account_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> MessageResponse:
    """Change the caller's password; the current password must be supplied."""
    auth_service.change_password(accounts, claim.sub, body, settings)
    return MessageResponse(message="Password updated successfully")


@router.get("/{username}", response_model=AccountView)
def get_user(
    username: str,
    _admin: Annotated[TokenClaim, Depends(require_admin)],
    accounts: Annotated[AccountStore, Depends(get_account_store)],
) -> AccountView:
    """View any account (admin only)."""
    return account_service.get_account(accounts, username)


@router.delete("/{username}", response_model=MessageResponse)
def delete_user(
    username: str,
    _admin: Annotated[TokenClaim, Depends(require_admin)],
    accounts: Annotated[AccountStore, Depends(get_account_store)],
) -> MessageResponse:
    """Delete an account (admin only). Outstanding tokens are not revoked."""
    account_service.delete_account(accounts, username)
    return MessageResponse(message="User deleted successfully")
