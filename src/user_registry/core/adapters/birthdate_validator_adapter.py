"""Birthdate validation: real date, in the past, inside the age window."""

from collections.abc import Callable
from datetime import date, datetime

from user_registry.core.contracts.validators import UserBirthdateValidator
from user_registry.core.errors import ApplicationError, InvalidParamError, ServerError

_FIELD = "data de nascimento"


def age_in_years(birthdate: date, today: date) -> int:
    """Whole years elapsed between ``birthdate`` and ``today``."""
    had_birthday = (today.month, today.day) >= (birthdate.month, birthdate.day)
    return today.year - birthdate.year - (0 if had_birthday else 1)


class AgeWindowBirthdateValidator(UserBirthdateValidator):
    def __init__(
        self,
        min_age: int = 18,
        max_age: int = 70,
        today: Callable[[], date] | None = None,
    ) -> None:
        self._min_age = min_age
        self._max_age = max_age
        self._today = today or date.today

    def validate(self, birthdate: date | str | None) -> None:
        try:
            if isinstance(birthdate, datetime):
                birthdate = birthdate.date()
            if not isinstance(birthdate, date):
                raise InvalidParamError(_FIELD, "data inválida")

            today = self._today()
            if birthdate >= today:
                raise InvalidParamError(_FIELD, "não pode ser no futuro")

            age = age_in_years(birthdate, today)
            if age < self._min_age:
                raise InvalidParamError(
                    _FIELD, f"usuário deve ter pelo menos {self._min_age} anos"
                )
            if age > self._max_age:
                raise InvalidParamError(
                    _FIELD, f"idade excede o limite máximo de {self._max_age} anos"
                )
        except ApplicationError:
            raise
        except Exception as e:
            raise ServerError(e) from e
