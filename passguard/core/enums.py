"""Enumerations for the logging layer."""

from enum import Enum


class Environment(Enum):
    """Deployment environment; selects logging defaults."""

    DEVELOPMENT = "dev"
    TESTING = "test"
    PRODUCTION = "prod"


class LogLevel(Enum):
    """Log levels as (name, stdlib priority) pairs."""

    DEBUG = ("DEBUG", 10)
    INFO = ("INFO", 20)
    WARNING = ("WARNING", 30)
    ERROR = ("ERROR", 40)

    def __init__(self, level_name: str, priority: int):
        self.level_name = level_name
        self.priority = priority

    def to_logging_level(self) -> int:
        return self.priority


class LogFormat(Enum):
    """Renderer used once logging is configured."""

    JSON = "json"
    CONSOLE = "console"
    PLAIN = "plain"
