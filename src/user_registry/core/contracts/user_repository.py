"""Persistence contract for users."""

from __future__ import annotations

from abc import ABC, abstractmethod

from user_registry.entities.core.user.entity import User, UserCreateData, UserMapped


class UserRepository(ABC):
    """Abstract storage for users. Owns storage, not business rules."""

    @abstractmethod
    async def create(self, data: UserCreateData) -> None:
        """Persist a new user.

        Args:
            data: Sanitized, validated data whose password is already hashed.
                Identifier, avatar, role and timestamps are assigned here.
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> User | None:
        """Find a user by e-mail, ignoring case.

        Returns:
            The stored user, password hash included, or None.
        """
        pass

    @abstractmethod
    async def list(self) -> list[UserMapped]:
        """Return every stored user without the password."""
        pass
