"""
Validation Result Value Object

Represents the outcome of validating one password against one policy.
"""

from dataclasses import dataclass
from typing import Any

from passguard.domain.constants import MAX_SCORE, MIN_SCORE
from passguard.domain.enums import StrengthCategory

from .policy_violation import PolicyViolation


@dataclass(frozen=True)
class ValidationResult:
    """
    Value object representing a password validation result.

    ``errors`` and ``is_valid`` are derived from ``violations`` so a result can
    never claim validity while carrying errors. Violations keep rule-check
    order.
    """

    violations: tuple[PolicyViolation, ...]
    score: int
    strength_category: StrengthCategory

    def __post_init__(self) -> None:
        """Validate result data."""
        if not MIN_SCORE <= self.score <= MAX_SCORE:
            raise ValueError(
                f"Score must be between {MIN_SCORE} and {MAX_SCORE}, got {self.score}"
            )
        object.__setattr__(self, "violations", tuple(self.violations))

    @property
    def errors(self) -> tuple[str, ...]:
        """Violation messages in rule-check order."""
        return tuple(violation.message for violation in self.violations)

    @property
    def is_valid(self) -> bool:
        return not self.violations

    @property
    def failed_rules(self) -> tuple[str, ...]:
        return tuple(violation.rule_name for violation in self.violations)

    @property
    def strength_percentage(self) -> int:
        return self.strength_category.percentage

    def has_failed(self, rule_name: str) -> bool:
        """Check whether the named rule produced a violation."""
        return rule_name in self.failed_rules

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "is_valid": self.is_valid,
            "errors": list(self.errors),
            "score": self.score,
            "max_score": MAX_SCORE,
            "strength": self.strength_category.value,
            "strength_label": self.strength_category.label,
            "strength_percentage": self.strength_percentage,
            "violations": [violation.to_dict() for violation in self.violations],
        }
