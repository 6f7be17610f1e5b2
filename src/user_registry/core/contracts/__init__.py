"""Contracts the core depends on. Implementations are injected."""

from .hash_provider import HashOptions, HashProvider
from .logger_provider import LoggerProvider, LogLevel, LogPayload
from .sanitizers import UserCreateDataSanitizer, XssSanitizer
from .usecases import UserCreateUseCase, UserListUseCase
from .user_repository import UserRepository
from .validators import (
    UserBirthdateValidator,
    UserCreateDataValidator,
    UserEmailValidator,
    UserPasswordValidator,
    UserPhoneValidator,
    UserUniqueEmailValidator,
)

__all__ = [
    "HashOptions",
    "HashProvider",
    "LogLevel",
    "LogPayload",
    "LoggerProvider",
    "UserBirthdateValidator",
    "UserCreateDataSanitizer",
    "UserCreateDataValidator",
    "UserCreateUseCase",
    "UserEmailValidator",
    "UserListUseCase",
    "UserPasswordValidator",
    "UserPhoneValidator",
    "UserRepository",
    "UserUniqueEmailValidator",
    "XssSanitizer",
]
