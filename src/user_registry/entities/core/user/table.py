"""User database table model."""

from datetime import date

from sqlmodel import Field

from user_registry.entities.core._base import EntityTable
from user_registry.entities.core.user.entity import (
    USER_DEFAULT_AVATAR_URL,
    USER_DEFAULT_ROLE,
)


class UserTable(EntityTable, table=True):
    """Database persistence model for users.

    The unique index on ``email`` is the actual enforcement of e-mail
    uniqueness; the application-level check only fails fast.
    """

    __tablename__ = "users"

    name: str
    email: str = Field(index=True, unique=True)
    phone: str
    birthdate: date
    avatar_url: str = Field(default=USER_DEFAULT_AVATAR_URL)
    role: str = Field(default=USER_DEFAULT_ROLE.value)
    password: str
