"""Input sanitizer contracts.

Sanitizers normalize rather than validate. The only failure they raise is
InvalidParamError for a value of a type the input model cannot hold.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from user_registry.entities.core.user.entity import UserCreateData


class XssSanitizer(ABC):
    @abstractmethod
    def sanitize(self, text: str) -> str:
        """Strip markup from ``text``, keeping its textual content."""
        pass


class UserCreateDataSanitizer(ABC):
    @abstractmethod
    def sanitize(
        self, data: UserCreateData | Mapping[str, Any] | None
    ) -> UserCreateData:
        """Normalize raw creation data. ``None`` yields an empty object."""
        pass
