"""
passguard: password policy validation, strength scoring and generation.

    >>> from passguard import validate, PolicyConfig
    >>> result = validate("Tr0ub4dor&9Zq")
    >>> result.is_valid, result.score, result.strength_category.label
    (True, 8, 'Good')
    >>> validate("hunter2", PolicyConfig(min_length=6)).errors[0]
    'Password must contain at least one uppercase letter'

All functions are pure and safe to call from any thread.
"""

from passguard.core.errors import (
    ConfigurationError,
    InvalidInputError,
    PassGuardError,
    PasswordGenerationError,
    PolicyConfigurationError,
)
from passguard.domain.enums import StrengthCategory
from passguard.domain.rules import classify, is_common_password, validate
from passguard.domain.services import generate, generate_valid
from passguard.domain.value_objects import (
    DEFAULT_POLICY,
    PolicyConfig,
    PolicyViolation,
    ValidationResult,
)

__version__ = "1.0.0"

__all__ = [
    "DEFAULT_POLICY",
    "ConfigurationError",
    "InvalidInputError",
    "PassGuardError",
    "PasswordGenerationError",
    "PolicyConfig",
    "PolicyConfigurationError",
    "PolicyViolation",
    "StrengthCategory",
    "ValidationResult",
    "classify",
    "generate",
    "generate_valid",
    "is_common_password",
    "validate",
]
