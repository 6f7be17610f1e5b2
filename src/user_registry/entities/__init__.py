"""Entities organized by business concept.

Each entity package colocates its domain model, table and repositories.
"""

from .core.user import (
    InMemoryUserRepository,
    SqlModelUserRepository,
    User,
    UserCreateData,
    UserMapped,
    UserRole,
    UserTable,
)

__all__ = [
    "InMemoryUserRepository",
    "SqlModelUserRepository",
    "User",
    "UserCreateData",
    "UserMapped",
    "UserRole",
    "UserTable",
]
