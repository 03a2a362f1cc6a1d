"""
Password Domain Business Rules

Policy validator, strength tiers and pattern predicates.
"""

from .base import BusinessRule
from .common_passwords import is_common_password
from .password_policy import PasswordPolicy, validate
from .patterns import (
    SEQUENTIAL_WINDOWS,
    find_sequential_pattern,
    has_repeated_characters,
    has_sequential_pattern,
)
from .strength_classifier import STRENGTH_TIERS, classify

__all__ = [
    "SEQUENTIAL_WINDOWS",
    "STRENGTH_TIERS",
    "BusinessRule",
    "PasswordPolicy",
    "classify",
    "find_sequential_pattern",
    "has_repeated_characters",
    "has_sequential_pattern",
    "is_common_password",
    "validate",
]
