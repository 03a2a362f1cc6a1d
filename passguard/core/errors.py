"""Error classes for the password policy engine.

Rejected passwords are reported through ``ValidationResult.errors`` and never
raise. The exceptions below signal caller bugs: wrong argument types, an
impossible policy, or a generator that could not satisfy its policy.
"""

import logging
import time
import uuid
from enum import Enum
from typing import Any

SENSITIVE_KEYS = frozenset(
    {"password", "token", "secret", "key", "credential", "authorization"}
)


class ErrorSeverity(Enum):
    """Error severity levels for monitoring and alerting."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class PassGuardError(Exception):
    """
    Base exception for all passguard errors.

    Carries an error code, free-form details and a severity, and logs itself
    on construction with sensitive detail keys redacted.
    """

    default_code: str = "ERROR"
    severity: ErrorSeverity = ErrorSeverity.MEDIUM

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(message)
        self.message = message
        self.code = kwargs.get("code") or self.default_code
        self.details = kwargs.get("details") or {}
        self.error_id = str(uuid.uuid4())
        self.timestamp = time.time()
        self.recovery_hint = kwargs.get("recovery_hint")

        self._log_error()

    def _log_error(self) -> None:
        """Log error with structured data."""
        logger = logging.getLogger(f"passguard.errors.{self.__class__.__name__}")
        log_data = {
            "error_id": self.error_id,
            "code": self.code,
            "error_message": self.message,
            "severity": self.severity.value,
            "details": self._sanitize_details(self.details),
            "error_class": self.__class__.__name__,
        }

        if self.severity == ErrorSeverity.CRITICAL:
            logger.critical("Critical error occurred", extra=log_data)
        elif self.severity == ErrorSeverity.HIGH:
            logger.error("High severity error", extra=log_data)
        elif self.severity == ErrorSeverity.MEDIUM:
            logger.warning("Medium severity error", extra=log_data)
        else:
            logger.info("Low severity error", extra=log_data)

    def _sanitize_details(self, details: dict) -> dict:
        """Sanitize error details to remove sensitive information."""
        sanitized = {}

        for key, value in details.items():
            if any(sensitive in key.lower() for sensitive in SENSITIVE_KEYS):
                sanitized[key] = "***REDACTED***"
            elif isinstance(value, dict):
                sanitized[key] = self._sanitize_details(value)
            else:
                sanitized[key] = value

        return sanitized

    def to_dict(self, include_details: bool = True) -> dict[str, Any]:
        """Serialize error for API/logging."""
        data = {
            "error": self.code,
            "message": self.message,
            "timestamp": self.timestamp,
        }

        if include_details and self.details:
            data["details"] = self._sanitize_details(self.details)

        if self.recovery_hint:
            data["recovery_hint"] = self.recovery_hint

        return data

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class ConfigurationError(PassGuardError):
    """Configuration error."""

    default_code = "CONFIGURATION_ERROR"
    severity = ErrorSeverity.HIGH


class PolicyConfigurationError(ConfigurationError):
    """A password policy whose settings cannot be satisfied or are mistyped."""

    default_code = "INVALID_POLICY"

    def __init__(self, message: str, field: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        if field:
            self.details["field"] = field


class InvalidInputError(PassGuardError, TypeError):
    """An API function was called with an argument of the wrong type or range."""

    default_code = "INVALID_INPUT"
    severity = ErrorSeverity.LOW

    def __init__(self, message: str, argument: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        if argument:
            self.details["argument"] = argument


class PasswordGenerationError(PassGuardError):
    """The generator exhausted its attempts without producing a valid password."""

    default_code = "GENERATION_EXHAUSTED"
    default_recovery_hint = "Relax the policy or raise max_attempts"

    def __init__(self, message: str, attempts: int, **kwargs: Any) -> None:
        kwargs.setdefault("recovery_hint", self.default_recovery_hint)
        super().__init__(message, **kwargs)
        self.attempts = attempts
        self.details["attempts"] = attempts


__all__ = [
    "ConfigurationError",
    "ErrorSeverity",
    "InvalidInputError",
    "PassGuardError",
    "PasswordGenerationError",
    "PolicyConfigurationError",
]
