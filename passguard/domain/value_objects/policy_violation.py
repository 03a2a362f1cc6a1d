"""
Policy Violation Value Object

A single failed rule check.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PolicyViolation:
    """A failed rule check: the rule's name and its user-facing message."""

    rule_name: str
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"rule_name": self.rule_name, "message": self.message}

    def __str__(self) -> str:
        return self.message
