"""E-mail format validation backed by the email-validator package."""

from email_validator import EmailNotValidError, validate_email

from user_registry.core.contracts.validators import UserEmailValidator
from user_registry.core.errors import InvalidParamError, ServerError


class EmailValidatorAdapter(UserEmailValidator):
    """Syntax-only e-mail check; no DNS or deliverability lookups."""

    def validate(self, email: str) -> None:
        try:
            validate_email(email, check_deliverability=False)
        except EmailNotValidError as e:
            raise InvalidParamError("e-mail", "formato inválido") from e
        except Exception as e:
            raise ServerError(e) from e
