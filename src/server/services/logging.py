"""Structured logging wrapper used by server-side services"""
import os
import logging
from typing import Any

from src.server.enums import LogLevel

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class StructuredLogger:
    """
    Thin wrapper over the standard logging module

    Extra keyword fields are appended to the message as key=value pairs so
    that log lines stay greppable.
    """

    def __init__(self, name: str, level: LogLevel = LogLevel.INFO):
        """
        Initialize logger

        Args:
            name: Logger name
            level: Minimum level to emit
        """
        self._logger = logging.getLogger(name)
        self._logger.setLevel(level.logging_level)
        if not self._logger.handlers:
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(_FORMAT))
            self._logger.addHandler(handler)
        self._level = level

    @classmethod
    def from_env(cls, name: str) -> "StructuredLogger":
        """Create logger with level taken from LOG_LEVEL (default info)"""
        level_str = os.getenv("LOG_LEVEL", LogLevel.INFO.value).strip().lower()
        try:
            level = LogLevel(level_str)
        except ValueError:
            level = LogLevel.INFO
        return cls(name, level)

    @property
    def level(self) -> LogLevel:
        return self._level

    @staticmethod
    def _format(message: str, fields: dict) -> str:
        if not fields:
            return message
        details = ", ".join(f"{key}={value}" for key, value in fields.items())
        return f"{message} - {details}"

    def log(self, level: LogLevel, message: str, **fields: Any) -> None:
        self._logger.log(level.logging_level, self._format(message, fields))

    def debug(self, message: str, **fields: Any) -> None:
        self.log(LogLevel.DEBUG, message, **fields)

    def info(self, message: str, **fields: Any) -> None:
        self.log(LogLevel.INFO, message, **fields)

    def warning(self, message: str, **fields: Any) -> None:
        self.log(LogLevel.WARNING, message, **fields)

    def error(self, message: str, **fields: Any) -> None:
        self.log(LogLevel.ERROR, message, **fields)
