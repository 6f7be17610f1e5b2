"""Pydantic models for parsing the config.yaml configuration file.

These models mirror the structure of config.yaml and handle validation and
type conversion of the YAML data. Every field has a default so the service
can start without a configuration file.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from user_registry.core.adapters.password_validator_adapter import (
    DEFAULT_PASSWORD_DENYLIST,
)
from user_registry.core.contracts.hash_provider import HashOptions


class CORSConfig(BaseModel):
    """CORS configuration for the application."""

    origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:3001"]
    )
    allow_credentials: bool = True
    allow_methods: list[str] = Field(default=["GET", "POST", "OPTIONS"])
    allow_headers: list[str] = Field(default=["*"])


class AppConfig(BaseModel):
    """Application configuration model."""

    environment: Literal["development", "production", "test"] = Field(
        default="development", description="Application environment"
    )
    host: str = Field(default="0.0.0.0", description="Application host")
    port: int = Field(default=3000, description="Application port")
    cors: CORSConfig = Field(
        default_factory=CORSConfig, description="CORS configuration"
    )


class LoggingConfig(BaseModel):
    """Logging configuration model."""

    level: str = Field(default="INFO", description="Logging level")
    format: Literal["json", "plain"] = Field(default="json", description="Log format")
    file: str | None = Field(default="logs/app.log", description="Log file path")
    max_size_mb: int = Field(default=10, description="Maximum log file size in MB")
    backup_count: int = Field(
        default=5, description="Number of backup log files to keep"
    )


class DatabaseConfig(BaseModel):
    """Database configuration model."""

    url: str = Field(
        default="sqlite:///./database.db", description="Database connection URL"
    )
    echo: bool = Field(default=False, description="Log every SQL statement")
    pool_size: int = Field(default=5, description="Connection pool size")
    max_overflow: int = Field(default=10, description="Maximum pool overflow")
    pool_timeout: int = Field(default=30, description="Pool timeout in seconds")
    pool_recycle: int = Field(default=1800, description="Pool recycle time in seconds")


class HashingConfig(BaseModel):
    """Argon2id cost parameters used for password hashing."""

    iterations: int = Field(default=3, description="Time cost (passes)")
    memory_cost: int = Field(default=65536, description="Memory cost in KiB")
    parallelism: int = Field(default=4, description="Degree of parallelism")
    hash_length: int = Field(default=32, description="Hash length in bytes")

    def to_options(self) -> HashOptions:
        return HashOptions(**self.model_dump())


class UserPolicyConfig(BaseModel):
    """Business rules applied when registering users."""

    min_age: int = Field(default=18, description="Minimum age in whole years")
    max_age: int = Field(default=70, description="Maximum age in whole years")
    phone_region: str = Field(
        default="BR", description="Region assumed for phones without country code"
    )
    password_min_length: int = Field(default=8, description="Minimum password length")
    password_denylist: list[str] = Field(
        default_factory=lambda: list(DEFAULT_PASSWORD_DENYLIST),
        description="Passwords rejected as too common",
    )


class ConfigData(BaseModel):
    """Root of the application configuration."""

    app: AppConfig = Field(default_factory=AppConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    hashing: HashingConfig = Field(default_factory=HashingConfig)
    users: UserPolicyConfig = Field(default_factory=UserPolicyConfig)
