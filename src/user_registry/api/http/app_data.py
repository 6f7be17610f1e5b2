from dataclasses import dataclass

from user_registry.core.contracts.hash_provider import HashProvider
from user_registry.core.contracts.logger_provider import LoggerProvider
from user_registry.core.services.database.db_session import DbSessionService
from user_registry.runtime.config.config_data import ConfigData


@dataclass
class ApplicationDependencies:
    """Process-wide resources created once at startup."""

    config: ConfigData
    database_service: DbSessionService
    hash_provider: HashProvider
    logger_provider: LoggerProvider
