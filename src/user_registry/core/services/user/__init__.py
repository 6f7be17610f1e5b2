from .user_create import UserCreateService
from .user_list import UserListService

__all__ = ["UserCreateService", "UserListService"]
