"""Configuration template substitution utilities."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic import ValidationError

from user_registry.runtime.config.config_data import ConfigData

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(text: str) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message
    """

    def replacer(match: re.Match[str]) -> str:
        var_expr = match.group(1)

        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return os.getenv(var_name, default)

        if ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = os.getenv(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        value = os.getenv(var_expr)
        if value is None:
            raise ValueError(f"Required environment variable {var_expr} not set")
        return value

    return _PLACEHOLDER.sub(replacer, text)


def load_templated_yaml(file_path: Path) -> ConfigData:
    """
    Load a YAML configuration file with environment variable substitution.

    The file is expected to hold a top-level ``config`` mapping.

    Args:
        file_path: Path to the YAML file

    Returns:
        The validated configuration

    Raises:
        ValueError: If required environment variables are missing or the
            content does not validate
        FileNotFoundError: If the YAML file doesn't exist
    """
    content = file_path.read_text(encoding="utf-8")
    substituted_content = substitute_env_vars(content)

    try:
        loaded = yaml.safe_load(substituted_content) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e

    try:
        config = ConfigData(**(loaded.get("config") or {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    logger.debug(
        "Loaded configuration from {} for environment {}",
        file_path,
        config.app.environment,
    )
    return config


def load_config(file_path: Path | None = None) -> ConfigData:
    """Load configuration from ``file_path`` or ``$APP_CONFIG_FILE``.

    Falls back to defaults when the file does not exist.
    """
    path = file_path or Path(os.getenv("APP_CONFIG_FILE", "config.yaml"))
    if not path.exists():
        logger.warning("Configuration file {} not found; using defaults", path)
        return ConfigData()
    return load_templated_yaml(path)
