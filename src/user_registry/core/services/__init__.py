"""Core services exports."""

from .database.db_session import DbSessionService
from .user import UserCreateService, UserListService

__all__ = [
    "DbSessionService",
    "UserCreateService",
    "UserListService",
]
