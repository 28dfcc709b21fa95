"""Structured logger for the web extraction client."""

import logging
from enum import Enum
from typing import Any

from pydantic_settings import BaseSettings, SettingsConfigDict


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LoggerSettings(BaseSettings):
    level: LogLevel = LogLevel.INFO
    format_str: str = "%(asctime)s - [%(levelname)s] - %(name)s - %(funcName)s - %(message)s"

    model_config = SettingsConfigDict(env_prefix="LOG_")


ExcInfoType = (
    bool
    | tuple[type[BaseException], BaseException, Any]
    | tuple[None, None, None]
    | BaseException
    | None
)

# Keys owned by logging.LogRecord; passing them through ``extra`` raises KeyError.
_RESERVED_RECORD_KEYS = frozenset(
    logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
) | {"message", "asctime"}


def _safe_extra(context: dict[str, Any]) -> dict[str, Any]:
    return {(f"ctx_{key}" if key in _RESERVED_RECORD_KEYS else key): value for key, value in context.items()}


class Logger:
    _instances: dict[str, "Logger"] = {}
    _root_configured: bool = False

    @property
    def logger(self) -> logging.Logger:
        return self._log_instance

    @classmethod
    def get_logger(cls, name: str) -> "Logger":
        if not cls._root_configured:
            cls._configure_root_logging()
            cls._root_configured = True

        if name not in cls._instances:
            cls._instances[name] = cls(name)
        return cls._instances[name]

    @classmethod
    def _configure_root_logging(cls) -> None:
        """Configure root logger once"""
        settings = LoggerSettings()

        formatter = logging.Formatter(fmt=settings.format_str, datefmt="%Y-%m-%d %H:%M:%S")

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.setLevel(settings.level.value)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    def __init__(self, name: str):
        self.name = name
        self._log_instance = logging.getLogger(name)
        self.settings = LoggerSettings()
        self._log_instance.setLevel(self.settings.level.value)

    def _log(
        self,
        level: int,
        message: str,
        exc_info: ExcInfoType,
        extra: dict[str, Any] | None,
        context: dict[str, Any],
    ) -> None:
        # stacklevel=3 keeps %(funcName)s pointing at the caller, not this wrapper
        self._log_instance.log(
            level, message, exc_info=exc_info, extra=_safe_extra(extra or context), stacklevel=3
        )

    def debug(
        self,
        message: str,
        *,
        exc_info: ExcInfoType = None,
        extra: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        self._log(logging.DEBUG, message, exc_info, extra, kwargs)

    def info(
        self,
        message: str,
        *,
        exc_info: ExcInfoType = None,
        extra: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        self._log(logging.INFO, message, exc_info, extra, kwargs)

    def warning(
        self,
        message: str,
        *,
        exc_info: ExcInfoType = None,
        extra: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        self._log(logging.WARNING, message, exc_info, extra, kwargs)

    def error(
        self,
        message: str,
        *,
        exc_info: ExcInfoType = None,
        extra: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        self._log(logging.ERROR, message, exc_info, extra, kwargs)

    def critical(
        self,
        message: str,
        *,
        exc_info: ExcInfoType = None,
        extra: dict[str, Any] | None = None,
        **kwargs: Any,
    ) -> None:
        self._log(logging.CRITICAL, message, exc_info, extra, kwargs)
