"""Use-case contracts exposed to the presentation layer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from user_registry.entities.core.user.entity import UserCreateData, UserMapped


class UserCreateUseCase(ABC):
    @abstractmethod
    async def create(self, data: UserCreateData | Mapping[str, Any] | None) -> None:
        pass


class UserListUseCase(ABC):
    @abstractmethod
    async def list(self) -> list[UserMapped]:
        pass
