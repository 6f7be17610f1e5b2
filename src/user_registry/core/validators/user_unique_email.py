"""E-mail uniqueness check against the user repository."""

from user_registry.core.contracts.user_repository import UserRepository
from user_registry.core.contracts.validators import UserUniqueEmailValidator
from user_registry.core.errors import DuplicateResourceError


class RepositoryUniqueEmailValidator(UserUniqueEmailValidator):
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    async def validate(self, email: str) -> None:
        existing_user = await self._user_repository.find_by_email(email)
        if existing_user is not None:
            raise DuplicateResourceError("e-mail")
