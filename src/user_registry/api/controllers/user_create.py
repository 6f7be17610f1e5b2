from datetime import date, datetime
from typing import Any

from pydantic import ValidationError

from user_registry.api.controllers.protocols import Controller, HttpRequest, HttpResponse
from user_registry.api.controllers.responses import created, handle_error
from user_registry.core.contracts.usecases import UserCreateUseCase
from user_registry.core.errors import InvalidParamError, MissingParamError
from user_registry.entities.core.user.entity import UserCreateData

_TEXT_FIELDS = ("name", "email", "phone", "password")


def parse_birthdate(value: Any) -> date | str | None:
    """Parse an ISO-8601 date or datetime; unparseable values are returned as-is.

    The birthdate validator rejects anything that is not a date, so there is
    a single place deciding what counts as an invalid date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date) or not value or not isinstance(value, str):
        return value
    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        return value


class UserCreateController(Controller):
    def __init__(self, user_create_service: UserCreateUseCase) -> None:
        self._user_create_service = user_create_service

    async def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            body = request.body
            if not body:
                raise MissingParamError("corpo da requisição não informado")
            if not isinstance(body, dict):
                raise InvalidParamError("corpo da requisição", "deve ser um objeto JSON")

            await self._user_create_service.create(self._to_create_data(body))
            return created(request.request_id)
        except Exception as error:
            return handle_error(error, request.request_id)

    @staticmethod
    def _to_create_data(body: dict[str, Any]) -> UserCreateData:
        for field in _TEXT_FIELDS:
            value = body.get(field)
            if value is not None and not isinstance(value, str):
                raise InvalidParamError(field, "deve ser um texto")
        try:
            return UserCreateData(
                **{field: body.get(field) for field in _TEXT_FIELDS},
                birthdate=parse_birthdate(body.get("birthdate")),
            )
        except ValidationError as e:
            raise InvalidParamError("corpo da requisição", "formato inválido") from e
