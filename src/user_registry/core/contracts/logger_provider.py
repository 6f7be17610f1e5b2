"""Structured logging contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any

LogPayload = dict[str, Any]


class LogLevel(StrEnum):
    ERROR = "error"
    WARN = "warn"
    INFO = "info"
    DEBUG = "debug"
    TRACE = "trace"


class LoggerProvider(ABC):
    """Level-based logger that merges a bound context into every payload.

    Typical payload keys are ``service``, ``method``, ``action``,
    ``request_id`` and ``metadata``; any key is accepted.
    """

    @abstractmethod
    def log(self, level: LogLevel, message: str, payload: LogPayload | None = None) -> None:
        pass

    def error(self, message: str, payload: LogPayload | None = None) -> None:
        self.log(LogLevel.ERROR, message, payload)

    def warn(self, message: str, payload: LogPayload | None = None) -> None:
        self.log(LogLevel.WARN, message, payload)

    def info(self, message: str, payload: LogPayload | None = None) -> None:
        self.log(LogLevel.INFO, message, payload)

    def debug(self, message: str, payload: LogPayload | None = None) -> None:
        self.log(LogLevel.DEBUG, message, payload)

    def trace(self, message: str, payload: LogPayload | None = None) -> None:
        self.log(LogLevel.TRACE, message, payload)

    @abstractmethod
    def with_context(self, context: LogPayload) -> LoggerProvider:
        """Return a new logger whose context is ours merged with ``context``."""
        pass
