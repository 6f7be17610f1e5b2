"""Composite validation of user creation data."""

from user_registry.core.contracts.validators import (
    UserBirthdateValidator,
    UserCreateDataValidator,
    UserEmailValidator,
    UserPasswordValidator,
    UserPhoneValidator,
    UserUniqueEmailValidator,
)
from user_registry.core.errors import ApplicationError, MissingParamError, ServerError
from user_registry.entities.core.user.entity import UserCreateData

# Checked in this order; the label names the field in error messages.
REQUIRED_FIELDS: tuple[tuple[str, str], ...] = (
    ("name", "nome"),
    ("email", "email"),
    ("phone", "telefone"),
    ("birthdate", "data de nascimento"),
    ("password", "senha"),
)


class CompositeUserCreateDataValidator(UserCreateDataValidator):
    """Fail-fast validation pipeline for a new user.

    Order: required fields, e-mail format, e-mail uniqueness, phone,
    birthdate, password. The first failure is raised and nothing after it
    runs. Errors from the underlying validators that are not application
    errors are wrapped in ServerError.
    """

    def __init__(
        self,
        email_validator: UserEmailValidator,
        unique_email_validator: UserUniqueEmailValidator,
        phone_validator: UserPhoneValidator,
        birthdate_validator: UserBirthdateValidator,
        password_validator: UserPasswordValidator,
    ) -> None:
        self._email_validator = email_validator
        self._unique_email_validator = unique_email_validator
        self._phone_validator = phone_validator
        self._birthdate_validator = birthdate_validator
        self._password_validator = password_validator

    async def validate(self, data: UserCreateData) -> None:
        for field, label in REQUIRED_FIELDS:
            if not getattr(data, field, None):
                raise MissingParamError(label)

        try:
            self._email_validator.validate(data.email)
            await self._unique_email_validator.validate(data.email)
            self._phone_validator.validate(data.phone)
            self._birthdate_validator.validate(data.birthdate)
            self._password_validator.validate(data.password)
        except ApplicationError:
            raise
        except Exception as e:
            raise ServerError(e) from e
