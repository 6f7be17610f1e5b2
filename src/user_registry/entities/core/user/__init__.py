"""User entity package.

- entity.py: domain model and value objects
- table.py: database persistence model
- repository.py: SQLModel data access
- in_memory.py: in-memory data access
"""

from .entity import (
    USER_DEFAULT_AVATAR_URL,
    USER_DEFAULT_ROLE,
    User,
    UserCreateData,
    UserMapped,
    UserRole,
)
from .in_memory import InMemoryUserRepository
from .repository import SqlModelUserRepository
from .table import UserTable

__all__ = [
    "USER_DEFAULT_AVATAR_URL",
    "USER_DEFAULT_ROLE",
    "InMemoryUserRepository",
    "SqlModelUserRepository",
    "User",
    "UserCreateData",
    "UserMapped",
    "UserRole",
    "UserTable",
]
