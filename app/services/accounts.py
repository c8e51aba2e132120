"""Account views and administrative account removal."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.core.exceptions import NotFoundError
from app.schemas.account import AccountView

if TYPE_CHECKING:
    from app.stores.accounts import AccountStore

logger = logging.getLogger(__name__)


def get_account(accounts: AccountStore, username: str) -> AccountView:
    doc = accounts.find_by_username(username)
    if doc is None:
        raise NotFoundError("User not found")
    return AccountView.from_document(doc)


def delete_account(accounts: AccountStore, username: str) -> None:
    """Hard delete. Tokens already issued for the account stay valid until expiry."""
    if accounts.delete(username) == 0:
        raise NotFoundError("User not found")
    logger.info("Account deleted", extra={"username": username})
