"""User domain entity and the value objects derived from it."""

from datetime import date, datetime
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator

from user_registry.entities.core._base import Entity


class UserRole(StrEnum):
    ADMINISTRATOR = "administrador"
    COLLABORATOR = "colaborador"
    CUSTOMER = "cliente"


USER_DEFAULT_AVATAR_URL = "/src/frontend/assets/images/default-avatar.png"
USER_DEFAULT_ROLE = UserRole.CUSTOMER


class UserMapped(Entity):
    """Public view of a user: everything except the password hash.

    This is the only user shape ever returned to a caller.
    """

    name: str = Field(description="User's full name")
    email: str = Field(description="User's e-mail address, unique in the system")
    phone: str = Field(description="Phone number, digits with optional leading '+'")
    birthdate: date = Field(description="User's birthdate")
    avatar_url: str = Field(default=USER_DEFAULT_AVATAR_URL)
    role: UserRole = Field(default=USER_DEFAULT_ROLE)


class User(UserMapped):
    """User entity as persisted, including the password hash."""

    password: str = Field(description="Irreversible password hash", repr=False)

    def to_mapped(self) -> UserMapped:
        return UserMapped.model_validate(self.model_dump(exclude={"password"}))


class UserCreateData(BaseModel):
    """Caller-supplied data for creating a user.

    Every field is optional at the type level: absence is a business error
    reported by the validator, not a parsing error. ``birthdate`` holds the
    raw value when the transport layer could not parse it as a date; a
    ``datetime`` keeps only its calendar date.
    """

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    birthdate: date | str | None = None
    password: str | None = Field(default=None, repr=False)

    @field_validator("birthdate", mode="before")
    @classmethod
    def _datetime_to_date(cls, value):
        if isinstance(value, datetime):
            return value.date()
        return value
