from user_registry.api.controllers.protocols import Controller, HttpRequest, HttpResponse
from user_registry.api.controllers.responses import handle_error, ok
from user_registry.core.contracts.usecases import UserListUseCase


class UserListController(Controller):
    def __init__(self, user_list_service: UserListUseCase) -> None:
        self._user_list_service = user_list_service

    async def handle(self, request: HttpRequest) -> HttpResponse:
        try:
            users = await self._user_list_service.list()
            return ok(
                [user.model_dump(mode="json", by_alias=True) for user in users],
                request.request_id,
            )
        except Exception as error:
            return handle_error(error, request.request_id)
