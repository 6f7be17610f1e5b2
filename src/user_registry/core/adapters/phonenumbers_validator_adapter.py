"""Phone validation backed by phonenumbers (libphonenumber port)."""

import phonenumbers
from phonenumbers import NumberParseException

from user_registry.core.contracts.validators import UserPhoneValidator
from user_registry.core.errors import InvalidParamError, ServerError


class PhonenumbersValidatorAdapter(UserPhoneValidator):
    """Country-aware phone validation.

    Numbers without a leading '+' are parsed as belonging to ``region``.
    """

    def __init__(self, region: str = "BR") -> None:
        self._region = region

    def validate(self, phone: str) -> None:
        try:
            number = phonenumbers.parse(phone, self._region)
        except NumberParseException as e:
            raise InvalidParamError("telefone", "formato inválido") from e
        except Exception as e:
            raise ServerError(e) from e

        if not phonenumbers.is_valid_number(number):
            raise InvalidParamError("telefone", "formato inválido")
