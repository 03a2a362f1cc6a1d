"""Policy configuration loading.

Builds a ``PolicyConfig`` from environment variables (with an optional
``.env`` file as fallback) with per-environment overrides. ``validate`` and
``generate`` never read the environment themselves; applications that want
environment-driven policies call ``get_policy_config()`` and pass the result.

Recognized variables (prefix ``PASSGUARD_``):

    PASSWORD_MIN_LENGTH, PASSWORD_MAX_LENGTH,
    PASSWORD_REQUIRE_UPPERCASE, PASSWORD_REQUIRE_LOWERCASE,
    PASSWORD_REQUIRE_NUMBERS, PASSWORD_REQUIRE_SPECIAL_CHARS,
    PASSWORD_FORBIDDEN_SUBSTRINGS (comma separated)
"""

import os
from collections.abc import Mapping
from enum import Enum
from functools import lru_cache
from typing import Any

from passguard.core.errors import ConfigurationError
from passguard.domain.value_objects import DEFAULT_POLICY, PolicyConfig

ENV_PREFIX = "PASSGUARD_"

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


class EnvironmentLoader:
    """
    Environment variable loader with type conversion and validation.

    Values from ``env_file`` are kept in a private mapping and only consulted
    for variables the environment does not set; the process environment is
    never written to.
    """

    def __init__(
        self,
        env_file: str | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        """
        Initialize environment loader.

        Args:
            env_file: Optional environment file to read as a fallback
            environ: Mapping to read from; ``os.environ`` if None
        """
        self.env_file = env_file
        self.environ = os.environ if environ is None else environ
        self.file_values: dict[str, str] = self._read_env_file()

    def _read_env_file(self) -> dict[str, str]:
        """Parse ``KEY=value`` lines from the env file if it exists."""
        values: dict[str, str] = {}
        if not self.env_file or not os.path.exists(self.env_file):
            return values

        try:
            with open(self.env_file, encoding="utf-8") as f:
                for raw_line in f:
                    line = raw_line.strip()

                    if not line or line.startswith("#") or "=" not in line:
                        continue

                    key, value = line.split("=", 1)
                    value = value.strip()

                    if (value.startswith('"') and value.endswith('"')) or (
                        value.startswith("'") and value.endswith("'")
                    ):
                        value = value[1:-1]

                    values[key.strip()] = value

        except OSError as e:
            raise ConfigurationError(
                f"Failed to load environment file {self.env_file}: {e}"
            ) from e

        return values

    def _lookup(self, key: str) -> str | None:
        value = self.environ.get(key)
        if value is None:
            value = self.file_values.get(key)
        return value

    def get_string(self, key: str, default: str | None = None) -> str | None:
        """Get string value from environment."""
        value = self._lookup(key)
        return default if value is None else value

    def get_integer(
        self,
        key: str,
        default: int | None = None,
        min_value: int | None = None,
    ) -> int | None:
        """Get integer value from environment."""
        value = self._lookup(key)
        if value is None:
            return default

        try:
            parsed = int(value.strip())
        except ValueError as e:
            raise ConfigurationError(
                f"{key} must be an integer, got {value!r}",
                details={"key": key},
            ) from e

        if min_value is not None and parsed < min_value:
            raise ConfigurationError(f"{key} must be >= {min_value}", details={"key": key})
        return parsed

    def get_boolean(self, key: str, default: bool | None = None) -> bool | None:
        """Get boolean value from environment."""
        value = self._lookup(key)
        if value is None:
            return default

        normalized = value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        raise ConfigurationError(
            f"{key} must be a boolean, got {value!r}", details={"key": key}
        )

    def get_list(self, key: str, default: list[str] | None = None) -> list[str] | None:
        """Get comma-separated list value from environment."""
        value = self._lookup(key)
        if value is None:
            return default
        return [item.strip() for item in value.split(",") if item.strip()]


class PolicyEnvironment(Enum):
    """Policy environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    STAGING = "staging"
    PRODUCTION = "production"


class PolicyConfigManager:
    """Builds the password policy with environment-specific overrides."""

    def __init__(
        self,
        environment: PolicyEnvironment = PolicyEnvironment.PRODUCTION,
        loader: EnvironmentLoader | None = None,
    ):
        self.environment = environment
        self.loader = loader or EnvironmentLoader()
        self._config = self._load_config()

    def _load_config(self) -> PolicyConfig:
        base = self._apply_environment_overrides(DEFAULT_POLICY)
        return base.with_overrides(**self._read_environment(base))

    def _apply_environment_overrides(self, policy: PolicyConfig) -> PolicyConfig:
        """Apply environment-specific configuration overrides."""
        if self.environment == PolicyEnvironment.DEVELOPMENT:
            # Relaxed password requirements for development
            return policy.with_overrides(min_length=6, require_special_chars=False)
        return policy

    def _read_environment(self, base: PolicyConfig) -> dict[str, Any]:
        """Collect policy fields set through environment variables."""
        loader = self.loader
        prefix = f"{ENV_PREFIX}PASSWORD_"

        values: dict[str, Any] = {
            "min_length": loader.get_integer(f"{prefix}MIN_LENGTH", min_value=0),
            "max_length": loader.get_integer(f"{prefix}MAX_LENGTH", min_value=0),
            "require_uppercase": loader.get_boolean(f"{prefix}REQUIRE_UPPERCASE"),
            "require_lowercase": loader.get_boolean(f"{prefix}REQUIRE_LOWERCASE"),
            "require_numbers": loader.get_boolean(f"{prefix}REQUIRE_NUMBERS"),
            "require_special_chars": loader.get_boolean(f"{prefix}REQUIRE_SPECIAL_CHARS"),
            "forbidden_substrings": loader.get_list(f"{prefix}FORBIDDEN_SUBSTRINGS"),
        }
        return {key: value for key, value in values.items() if value is not None}

    def get_password_config(self) -> PolicyConfig:
        """Get password policy configuration."""
        return self._config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "environment": self.environment.value,
            "password": self._config.to_dict(),
        }


@lru_cache
def get_policy_config() -> PolicyConfig:
    """Get the cached production policy built from the process environment."""
    return PolicyConfigManager().get_password_config()


__all__ = [
    "ENV_PREFIX",
    "EnvironmentLoader",
    "PolicyConfigManager",
    "PolicyEnvironment",
    "get_policy_config",
]
