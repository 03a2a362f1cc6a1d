"""
Base Business Rule

Foundation for the password rules.
"""

from abc import ABC, abstractmethod
from typing import Any

from passguard.domain.value_objects import PolicyViolation


class BusinessRule(ABC):
    """Base class for business rules that report violations."""

    def __init__(self, rule_name: str | None = None):
        self.rule_name = rule_name or self.__class__.__name__
        self.version = "1.0.0"
        self.description = self.__doc__ or "Business rule validation"

    @abstractmethod
    def validate(self, *args, **kwargs) -> list[PolicyViolation]:
        """Validate the rule and return any violations."""

    def is_compliant(self, *args, **kwargs) -> bool:
        """Check if the rule is compliant."""
        return not self.validate(*args, **kwargs)

    def get_rule_metadata(self) -> dict[str, Any]:
        """Get metadata about this rule."""
        return {
            "name": self.rule_name,
            "version": self.version,
            "description": self.description.strip().splitlines()[0],
            "class": self.__class__.__name__,
        }
