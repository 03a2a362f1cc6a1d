"""
Password Domain Value Objects

Immutable policy, violation and result types.
"""

from .policy_config import DEFAULT_POLICY, PolicyConfig
from .policy_violation import PolicyViolation
from .validation_result import ValidationResult

__all__ = [
    "DEFAULT_POLICY",
    "PolicyConfig",
    "PolicyViolation",
    "ValidationResult",
]
