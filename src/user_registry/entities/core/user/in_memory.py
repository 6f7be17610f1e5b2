"""In-memory user repository, used as a test double and for local runs."""

from __future__ import annotations

from user_registry.core.contracts.user_repository import UserRepository
from user_registry.entities.core.user.entity import User, UserCreateData, UserMapped


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: list[User] = []

    async def create(self, data: UserCreateData) -> None:
        self._users.append(
            User(
                name=data.name,
                email=data.email,
                phone=data.phone,
                birthdate=data.birthdate,
                password=data.password,
            )
        )

    async def find_by_email(self, email: str) -> User | None:
        wanted = email.lower()
        return next((u for u in self._users if u.email.lower() == wanted), None)

    async def list(self) -> list[UserMapped]:
        return [user.to_mapped() for user in self._users]
