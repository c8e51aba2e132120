"""Public account views (never carry password fields)."""

from typing import Any

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from app.core.exceptions import CorruptRecordError
from app.schemas.auth import Role


class ProfileAttributes(BaseModel):
    strength: int = 0
    dexterity: int = 0
    intelligence: int = 0


class AccountView(BaseModel):
    """Account as returned to clients: identity, role and progression."""

    username: str
    email: str = ""
    role: Role = Role.USER
    level: int = Field(default=1, ge=1)
    experience: int = Field(default=0, ge=0)
    attributes: ProfileAttributes = Field(default_factory=ProfileAttributes)
    registration_date: str | None = None

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "AccountView":
        """
        Build from a stored user document; drops password_hash and inventory.

        Raises CorruptRecordError when the stored fields (role, progression)
        do not fit the view.
        """
        profile = doc.get("profile") or {}
        try:
            return cls(
                username=doc["username"],
                email=doc.get("email", ""),
                role=doc.get("role", Role.USER),
                level=profile.get("level", 1),
                experience=profile.get("experience", 0),
                attributes=ProfileAttributes(**(profile.get("attributes") or {})),
                registration_date=doc.get("registration_date"),
            )
        except (KeyError, TypeError, PydanticValidationError) as e:
            raise CorruptRecordError(
                f"Stored account '{doc.get('username')}' is malformed"
            ) from e
