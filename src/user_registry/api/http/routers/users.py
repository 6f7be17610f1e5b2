"""User API router."""

from fastapi import APIRouter, Depends, Request
from starlette.responses import JSONResponse

from user_registry.api.controllers import UserCreateController, UserListController
from user_registry.api.http.deps import (
    get_user_create_controller,
    get_user_list_controller,
)
from user_registry.api.http.route_adapter import adapt_route

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", status_code=201)
async def create_user(
    request: Request,
    controller: UserCreateController = Depends(get_user_create_controller),
) -> JSONResponse:
    """Register a new user.

    Body: ``{name, email, phone, birthdate, password}`` with ``birthdate`` as
    an ISO-8601 string.
    """
    return await adapt_route(request, controller)


@router.get("")
async def list_users(
    request: Request,
    controller: UserListController = Depends(get_user_list_controller),
) -> JSONResponse:
    """List every registered user, without passwords."""
    return await adapt_route(request, controller)
