from .protocols import Controller, HttpRequest, HttpResponse
from .user_create import UserCreateController
from .user_list import UserListController

__all__ = [
    "Controller",
    "HttpRequest",
    "HttpResponse",
    "UserCreateController",
    "UserListController",
]
