"""Validator contracts. A rejection is always a raised ApplicationError."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from user_registry.entities.core.user.entity import UserCreateData


class UserEmailValidator(ABC):
    @abstractmethod
    def validate(self, email: str) -> None:
        pass


class UserPhoneValidator(ABC):
    @abstractmethod
    def validate(self, phone: str) -> None:
        pass


class UserBirthdateValidator(ABC):
    @abstractmethod
    def validate(self, birthdate: date | str | None) -> None:
        pass


class UserPasswordValidator(ABC):
    @abstractmethod
    def validate(self, password: str) -> None:
        pass


class UserUniqueEmailValidator(ABC):
    @abstractmethod
    async def validate(self, email: str) -> None:
        """Raise DuplicateResourceError when ``email`` is already registered."""
        pass


class UserCreateDataValidator(ABC):
    @abstractmethod
    async def validate(self, data: UserCreateData) -> None:
        """Validate sanitized creation data, failing on the first problem."""
        pass
