"""Account store: user documents keyed by username."""

from typing import Any

from pymongo.database import Database

from app.stores.base import PUBLIC_PROJECTION, DocumentCollection

USERS_COLLECTION = "users"


class AccountStore(DocumentCollection):
    """
    Owns user records: credentials, role and progression.

    Progression lives under ``profile.level`` / ``profile.experience``.
    """

    def __init__(self, db: Database) -> None:
        super().__init__(db, USERS_COLLECTION, "username")

    def find_by_username(self, username: str) -> dict[str, Any] | None:
        return self.collection.find_one({"username": username}, PUBLIC_PROJECTION)

    def update_progression(
        self,
        username: str,
        expected_level: int | None,
        expected_experience: int | None,
        level: int,
        experience: int,
    ) -> int:
        """
        Compare-and-set the progression fields.

        Only matches when the stored level/experience still equal the values the
        caller read, so a concurrent encounter or deletion yields 0. None means
        the caller found the field absent; the filter then requires it still is.
        """
        result = self.collection.update_one(
            {
                "username": username,
                "profile.level": _expected(expected_level),
                "profile.experience": _expected(expected_experience),
            },
            {"$set": {"profile.level": level, "profile.experience": experience}},
        )
        return result.matched_count

    def update_password(self, username: str, password_hash: str) -> int:
        return self.update(username, {"password_hash": password_hash})


def _expected(value: int | None) -> Any:
    return {"$exists": False} if value is None else value
