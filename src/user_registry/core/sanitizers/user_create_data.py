"""Normalization of raw user creation data before validation."""

import re
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from user_registry.core.contracts.sanitizers import (
    UserCreateDataSanitizer,
    XssSanitizer,
)
from user_registry.core.errors import InvalidParamError
from user_registry.core.validators.user_create_data import REQUIRED_FIELDS
from user_registry.entities.core.user.entity import UserCreateData

_WHITESPACE_RUN = re.compile(r"\s+")
_NON_DIGIT = re.compile(r"\D")
_FIELD_LABELS = dict(REQUIRED_FIELDS)


class DefaultUserCreateDataSanitizer(UserCreateDataSanitizer):
    """Sanitizer for user creation data.

    - email: trimmed and lowercased
    - name: trimmed, internal whitespace collapsed, markup stripped
    - phone: trimmed, reduced to digits with a single optional leading '+',
      e.g. "+55 (11) 98765-4321" -> "+5511987654321"
    - password and birthdate pass through untouched
    """

    def __init__(self, xss_sanitizer: XssSanitizer) -> None:
        self._xss_sanitizer = xss_sanitizer

    def sanitize(
        self, data: UserCreateData | Mapping[str, Any] | None
    ) -> UserCreateData:
        if not data:
            return UserCreateData()
        if not isinstance(data, UserCreateData):
            try:
                data = UserCreateData.model_validate(dict(data))
            except ValidationError as e:
                field = str(e.errors()[0]["loc"][0])
                raise InvalidParamError(
                    _FIELD_LABELS.get(field, field), "formato inválido"
                ) from e

        return data.model_copy(
            update={
                "email": self._sanitize_email(data.email),
                "name": self._sanitize_name(data.name),
                "phone": self._sanitize_phone(data.phone),
            }
        )

    @staticmethod
    def _sanitize_email(email: str | None) -> str:
        if not email:
            return ""
        return email.strip().lower()

    def _sanitize_name(self, name: str | None) -> str:
        if not name:
            return ""
        normalized = _WHITESPACE_RUN.sub(" ", name.strip())
        # Markup removal can leave whitespace behind, e.g. "<b> </b>John".
        cleaned = self._xss_sanitizer.sanitize(normalized)
        return _WHITESPACE_RUN.sub(" ", cleaned).strip()

    @staticmethod
    def _sanitize_phone(phone: str | None) -> str:
        if not phone:
            return ""
        trimmed = phone.strip()
        prefix = "+" if trimmed.startswith("+") else ""
        return prefix + _NON_DIGIT.sub("", trimmed)
