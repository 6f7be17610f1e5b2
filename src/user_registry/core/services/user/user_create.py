"""User creation use case."""

import traceback
from collections.abc import Mapping
from typing import Any

from loguru import logger

from user_registry.core.contracts.hash_provider import HashProvider
from user_registry.core.contracts.logger_provider import LoggerProvider
from user_registry.core.contracts.sanitizers import UserCreateDataSanitizer
from user_registry.core.contracts.usecases import UserCreateUseCase
from user_registry.core.contracts.user_repository import UserRepository
from user_registry.core.contracts.validators import UserCreateDataValidator
from user_registry.entities.core.user.entity import UserCreateData

REDACTED = "[REDACTED]"


class UserCreateService(UserCreateUseCase):
    """Orchestrates the creation of a new user.

    Steps run strictly in sequence:

    1. sanitize the raw input
    2. validate the sanitized data
    3. hash the password
    4. persist the user with the hashed password

    Only step 4 writes, so any failure before it leaves the repository
    untouched. Errors are logged and re-raised unchanged; translating them
    into responses is the controller's job.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        sanitizer: UserCreateDataSanitizer,
        validator: UserCreateDataValidator,
        hash_provider: HashProvider,
        logger_provider: LoggerProvider,
    ) -> None:
        self._user_repository = user_repository
        self._sanitizer = sanitizer
        self._validator = validator
        self._hash_provider = hash_provider
        self._logger = logger_provider.with_context(
            {"service": "UserCreateService", "method": "create"}
        )

    async def create(self, data: UserCreateData | Mapping[str, Any] | None) -> None:
        """Create a user from raw, caller-supplied data.

        Raises:
            MissingParamError: A required field is absent.
            InvalidParamError: A field has an invalid format or value.
            DuplicateResourceError: The e-mail is already registered.
            ServerError: An adapter failed unexpectedly.
        """
        log = self._logger.with_context(
            {"metadata": {"user_email": _raw_email(data)}}
        )

        try:
            log.debug("Iniciando processo de criação de usuário")

            sanitized = self._sanitizer.sanitize(data)
            log.trace(
                "Dados sanitizados com sucesso",
                {
                    "metadata": {
                        "user_email": sanitized.email,
                        "sanitized_data": {
                            **sanitized.model_dump(mode="json"),
                            "password": REDACTED,
                        },
                    }
                },
            )

            await self._validator.validate(sanitized)
            log.debug("Dados validados com sucesso")

            hashed_password = await self._hash_provider.hash(sanitized.password)
            log.debug("Senha criptografada com sucesso")

            await self._user_repository.create(
                sanitized.model_copy(update={"password": hashed_password})
            )
            log.info(
                "Usuário criado com sucesso",
                {"metadata": {"user_email": sanitized.email}},
            )
        except Exception as error:
            try:
                log.error(
                    "Erro ao criar usuário",
                    {
                        "metadata": {
                            "user_email": _raw_email(data),
                            "error": _describe(error),
                        }
                    },
                )
            except Exception:
                logger.opt(exception=True).warning("Failed to log user creation error")
            raise


def _raw_email(data: Any) -> str | None:
    if isinstance(data, UserCreateData):
        return data.email
    if isinstance(data, Mapping):
        email = data.get("email")
        return email if isinstance(email, str) else None
    return None


def _describe(error: BaseException) -> dict[str, Any]:
    return {
        "name": type(error).__name__,
        "message": str(error),
        "stack": "".join(traceback.format_exception(error)),
    }
