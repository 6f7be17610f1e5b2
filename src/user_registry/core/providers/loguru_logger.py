"""LoggerProvider implementation on top of loguru."""

from __future__ import annotations

from typing import Any

from loguru import logger as _root_logger

from user_registry.core.contracts.logger_provider import (
    LoggerProvider,
    LogLevel,
    LogPayload,
)

_LOGURU_LEVELS = {
    LogLevel.ERROR: "ERROR",
    LogLevel.WARN: "WARNING",
    LogLevel.INFO: "INFO",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.TRACE: "TRACE",
}


class LoguruLoggerProvider(LoggerProvider):
    """Structured logger.

    The merged context and payload are bound as loguru ``extra`` fields, so
    they appear in JSON sinks and can be used in format strings.
    ``with_context`` never mutates the receiver.
    """

    def __init__(self, context: LogPayload | None = None, sink_logger: Any = None) -> None:
        self._context: LogPayload = dict(context or {})
        self._logger = sink_logger if sink_logger is not None else _root_logger

    @property
    def context(self) -> LogPayload:
        return dict(self._context)

    def log(self, level: LogLevel, message: str, payload: LogPayload | None = None) -> None:
        combined = {**self._context, **(payload or {})}
        # depth=2 reports the caller of info()/error()/..., not this method
        self._logger.opt(depth=2).bind(**combined).log(
            _LOGURU_LEVELS[LogLevel(level)], message
        )

    def with_context(self, context: LogPayload) -> LoggerProvider:
        return LoguruLoggerProvider({**self._context, **context}, self._logger)
