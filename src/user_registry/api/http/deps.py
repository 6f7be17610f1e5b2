"""FastAPI dependency implementations.

Request-scoped objects (session, repository, services, controllers) are
assembled here from the process-wide ApplicationDependencies.
"""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from user_registry.api.controllers import UserCreateController, UserListController
from user_registry.api.http.app_data import ApplicationDependencies
from user_registry.core.adapters import (
    AgeWindowBirthdateValidator,
    BleachXssSanitizer,
    EmailValidatorAdapter,
    PhonenumbersValidatorAdapter,
    RuleSetPasswordValidator,
)
from user_registry.core.contracts import (
    HashProvider,
    LoggerProvider,
    UserCreateDataValidator,
    UserRepository,
)
from user_registry.core.sanitizers import DefaultUserCreateDataSanitizer
from user_registry.core.services import UserCreateService, UserListService
from user_registry.core.validators import (
    CompositeUserCreateDataValidator,
    RepositoryUniqueEmailValidator,
)
from user_registry.entities.core.user import SqlModelUserRepository
from user_registry.runtime.config.config_data import ConfigData


def get_app_dependencies(request: Request) -> ApplicationDependencies:
    return request.app.state.app_dependencies


def get_app_config(
    deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> ConfigData:
    return deps.config


def get_db_session(
    deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> Iterator[Session]:
    """Yield a database session that is closed when the request ends."""
    session = deps.database_service.get_session()
    try:
        yield session
    finally:
        session.close()


def get_user_repository(session: Session = Depends(get_db_session)) -> UserRepository:
    return SqlModelUserRepository(session)


def get_hash_provider(
    deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> HashProvider:
    return deps.hash_provider


def get_logger_provider(
    request: Request,
    deps: ApplicationDependencies = Depends(get_app_dependencies),
) -> LoggerProvider:
    request_id = getattr(request.state, "request_id", None)
    return deps.logger_provider.with_context({"request_id": request_id})


def get_user_create_data_validator(
    config: ConfigData = Depends(get_app_config),
    user_repository: UserRepository = Depends(get_user_repository),
) -> UserCreateDataValidator:
    policy = config.users
    return CompositeUserCreateDataValidator(
        email_validator=EmailValidatorAdapter(),
        unique_email_validator=RepositoryUniqueEmailValidator(user_repository),
        phone_validator=PhonenumbersValidatorAdapter(region=policy.phone_region),
        birthdate_validator=AgeWindowBirthdateValidator(
            min_age=policy.min_age, max_age=policy.max_age
        ),
        password_validator=RuleSetPasswordValidator(
            min_length=policy.password_min_length,
            denylist=policy.password_denylist,
        ),
    )


def get_user_create_service(
    user_repository: UserRepository = Depends(get_user_repository),
    validator: UserCreateDataValidator = Depends(get_user_create_data_validator),
    hash_provider: HashProvider = Depends(get_hash_provider),
    logger_provider: LoggerProvider = Depends(get_logger_provider),
) -> UserCreateService:
    return UserCreateService(
        user_repository=user_repository,
        sanitizer=DefaultUserCreateDataSanitizer(BleachXssSanitizer()),
        validator=validator,
        hash_provider=hash_provider,
        logger_provider=logger_provider,
    )


def get_user_list_service(
    user_repository: UserRepository = Depends(get_user_repository),
    logger_provider: LoggerProvider = Depends(get_logger_provider),
) -> UserListService:
    return UserListService(user_repository, logger_provider)


def get_user_create_controller(
    service: UserCreateService = Depends(get_user_create_service),
) -> UserCreateController:
    return UserCreateController(service)


def get_user_list_controller(
    service: UserListService = Depends(get_user_list_service),
) -> UserListController:
    return UserListController(service)
