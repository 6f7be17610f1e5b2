"""User listing use case."""

from user_registry.core.contracts.logger_provider import LoggerProvider
from user_registry.core.contracts.usecases import UserListUseCase
from user_registry.core.contracts.user_repository import UserRepository
from user_registry.core.errors import (
    UNKNOWN_ERROR_MESSAGE,
    ApplicationError,
    ServerError,
)
from user_registry.entities.core.user.entity import UserMapped


class UserListService(UserListUseCase):
    def __init__(
        self, user_repository: UserRepository, logger_provider: LoggerProvider
    ) -> None:
        self._user_repository = user_repository
        self._logger = logger_provider.with_context(
            {"service": "UserListService", "method": "list"}
        )

    async def list(self) -> list[UserMapped]:
        """Return every user, without passwords.

        Raises:
            ApplicationError: Raised by the repository, passed through as is.
            ServerError: Wrapping any other repository failure.
        """
        self._logger.info("Iniciando listagem de usuários")
        try:
            users = await self._user_repository.list()
        except Exception as error:
            detail = str(error) or UNKNOWN_ERROR_MESSAGE.capitalize()
            self._logger.error(f"Erro ao listar usuários: {detail}")
            if isinstance(error, ApplicationError):
                raise
            raise ServerError(error) from error

        self._logger.info(
            f"Listagem de usuários concluída com sucesso. "
            f"Total: {len(users)} usuários encontrados",
            {"metadata": {"count": len(users)}},
        )
        return users
