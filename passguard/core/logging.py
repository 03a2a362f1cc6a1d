# ruff: noqa: A005
"""Structured logging for the policy engine.

Domain modules call ``get_logger(__name__)`` at import time. That only builds
a wrapper around ``structlog.get_logger``; nothing global is touched, so the
host application's structlog and stdlib setup stay in charge of output.
Applications that want passguard to own the pipeline call
``configure_logging()`` explicitly.

Every record, including values bound with ``log_context``, goes through the
filter chain before it reaches structlog, so a field named like ``password``
or ``secret`` is masked even when a caller binds one.
"""

import logging
import re
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any

import structlog

from passguard.core.enums import Environment, LogFormat, LogLevel
from passguard.core.errors import ConfigurationError

MIN_MESSAGE_LENGTH = 1000


@dataclass
class LogConfig:
    """
    Level gate, filter switches and output format.

    Environment defaults are applied after construction: development renders
    to the console with caller info, testing only lets warnings through, and
    production always renders JSON with masking forced on.
    """

    level: LogLevel = field(default=LogLevel.INFO)
    format: LogFormat = field(default=LogFormat.JSON)
    environment: Environment = field(default=Environment.PRODUCTION)

    enable_timestamps: bool = field(default=True)
    enable_caller_info: bool = field(default=False)
    enable_sensitive_data_filtering: bool = field(default=True)
    preserve_masked_length: bool = field(default=False)
    max_message_length: int = field(default=10000)

    def __post_init__(self):
        if self.max_message_length < MIN_MESSAGE_LENGTH:
            raise ConfigurationError(
                f"Maximum message length must be at least {MIN_MESSAGE_LENGTH} characters"
            )

        if self.environment == Environment.DEVELOPMENT:
            self.format = LogFormat.CONSOLE
            self.enable_caller_info = True
        elif self.environment == Environment.TESTING:
            self.level = LogLevel.WARNING
            self.format = LogFormat.PLAIN
        else:
            self.format = LogFormat.JSON
            self.enable_caller_info = False
            self.enable_sensitive_data_filtering = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level.level_name,
            "format": self.format.value,
            "environment": self.environment.value,
            "enable_timestamps": self.enable_timestamps,
            "enable_caller_info": self.enable_caller_info,
            "enable_sensitive_data_filtering": self.enable_sensitive_data_filtering,
            "preserve_masked_length": self.preserve_masked_length,
            "max_message_length": self.max_message_length,
        }


class LogFilter(ABC):
    """Transforms a record before it is emitted."""

    @abstractmethod
    def filter(self, record: dict[str, Any]) -> dict[str, Any]:
        """Return the sanitized copy of ``record``."""


class SensitiveDataFilter(LogFilter):
    """
    Masks values whose key looks like a secret.

    Nested dicts, and dicts inside lists, are walked recursively. ``None``
    stays ``None`` so "no value" remains distinguishable from a masked one.
    """

    SENSITIVE_KEY = re.compile(
        r"password|passwd|candidate|token|secret|credential", re.IGNORECASE
    )

    def __init__(self, mask_char: str = "*", preserve_length: bool = False):
        self.mask_char = mask_char
        self.preserve_length = preserve_length

    def filter(self, record: dict[str, Any]) -> dict[str, Any]:
        return {key: self._filter_value(key, value) for key, value in record.items()}

    def _filter_value(self, key: str, value: Any) -> Any:
        if self.SENSITIVE_KEY.search(key):
            return self._mask(value)
        if isinstance(value, dict):
            return self.filter(value)
        if isinstance(value, list):
            return [self.filter(item) if isinstance(item, dict) else item for item in value]
        return value

    def _mask(self, value: Any) -> str | None:
        if value is None:
            return None
        if self.preserve_length:
            return self.mask_char * len(str(value))
        return f"{self.mask_char * 3}[MASKED]"


class MessageLengthFilter(LogFilter):
    """Truncates the event message beyond ``max_length`` characters."""

    def __init__(self, max_length: int = 10000, truncation_suffix: str = "... [TRUNCATED]"):
        self.max_length = max_length
        self.truncation_suffix = truncation_suffix

    def filter(self, record: dict[str, Any]) -> dict[str, Any]:
        message = record.get("message")
        if not isinstance(message, str) or len(message) <= self.max_length:
            return record

        keep = self.max_length - len(self.truncation_suffix)
        return {
            **record,
            "message": message[:keep] + self.truncation_suffix,
            "message_truncated": True,
        }


class StructuredLogger:
    """
    Level gate and filter chain in front of a structlog logger.

    Bound context variables are merged into each record before filtering.
    """

    def __init__(self, name: str, config: LogConfig):
        self.name = name
        self._logger = structlog.get_logger(name)
        self.apply_config(config)

    def apply_config(self, config: LogConfig) -> None:
        self.config = config
        self.filters: list[LogFilter] = []
        if config.enable_sensitive_data_filtering:
            self.filters.append(
                SensitiveDataFilter(preserve_length=config.preserve_masked_length)
            )
        self.filters.append(MessageLengthFilter(config.max_message_length))

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(LogLevel.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(LogLevel.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(LogLevel.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log(LogLevel.ERROR, message, **kwargs)

    def prepare_record(self, message: str, **kwargs: Any) -> dict[str, Any]:
        """Build the filtered record that would be emitted for ``message``."""
        record = {
            **structlog.contextvars.get_contextvars(),
            **kwargs,
            "message": message,
        }
        for log_filter in self.filters:
            record = log_filter.filter(record)
        return record

    def _log(self, level: LogLevel, message: str, **kwargs: Any) -> None:
        if level.priority < self.config.level.priority:
            return

        record = self.prepare_record(message, **kwargs)
        event = record.pop("message")
        getattr(self._logger, level.level_name.lower())(event, **record)


def build_processors(config: LogConfig) -> list[Any]:
    """structlog processor chain for ``config``, ending with its renderer."""
    processors: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
    ]

    if config.enable_timestamps:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if config.enable_caller_info:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            )
        )

    processors.append(structlog.processors.UnicodeDecoder())

    if config.format == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    elif config.format == LogFormat.CONSOLE:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.KeyValueRenderer())

    return processors


class LoggerFactory:
    """Hands out one ``StructuredLogger`` per name and owns their config."""

    def __init__(self, config: LogConfig):
        self.config = config
        self._loggers: dict[str, StructuredLogger] = {}

    def get_logger(self, name: str) -> StructuredLogger:
        if name not in self._loggers:
            self._loggers[name] = StructuredLogger(name, self.config)
        return self._loggers[name]

    def configure(self, config: LogConfig) -> None:
        """Install ``config`` in structlog, stdlib logging and every issued logger."""
        self.config = config
        for logger in self._loggers.values():
            logger.apply_config(config)

        structlog.configure(
            processors=build_processors(config),
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )
        logging.basicConfig(format="%(message)s", stream=sys.stdout)
        logging.getLogger("passguard").setLevel(config.level.to_logging_level())


_logger_factory = LoggerFactory(LogConfig())


def configure_logging(config: LogConfig | None = None) -> None:
    """
    Route passguard logging through its own structlog pipeline.

    Never called implicitly. Loggers obtained earlier pick up the new level
    and filters.

    Args:
        config: Logging configuration (defaults if not provided)
    """
    _logger_factory.configure(config or LogConfig())


def get_logger(name: str) -> StructuredLogger:
    """Get the structured logger for ``name`` (usually ``__name__``)."""
    return _logger_factory.get_logger(name)


@contextmanager
def log_context(**kwargs: Any) -> Iterator[None]:
    """Bind ``kwargs`` to every record logged inside the block."""
    with structlog.contextvars.bound_contextvars(**kwargs):
        yield


__all__ = [
    "LogConfig",
    "LogFilter",
    "LoggerFactory",
    "MessageLengthFilter",
    "SensitiveDataFilter",
    "StructuredLogger",
    "build_processors",
    "configure_logging",
    "get_logger",
    "log_context",
]
