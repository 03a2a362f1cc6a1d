"""
Password Policy

Business rules for password validation and scoring.
"""

import re

from passguard.core.errors import InvalidInputError
from passguard.core.logging import get_logger
from passguard.domain.constants import SPECIAL_CHARACTERS, ViolationMessages
from passguard.domain.value_objects import (
    DEFAULT_POLICY,
    PolicyConfig,
    PolicyViolation,
    ValidationResult,
)

from .base import BusinessRule
from .patterns import has_repeated_characters, has_sequential_pattern
from .strength_classifier import classify

logger = get_logger(__name__)

_UPPERCASE = re.compile(r"[A-Z]")
_LOWERCASE = re.compile(r"[a-z]")
_DIGIT = re.compile(r"[0-9]")
_SPECIAL = re.compile(f"[{re.escape(SPECIAL_CHARACTERS)}]")


class PasswordPolicy(BusinessRule):
    """
    Password policy validation and scoring.

    Nine checks run in a fixed order and each contributes at most one
    violation:

    1. minimum length         6. special character
    2. maximum length         7. forbidden substrings (first match only)
    3. uppercase letter       8. no run of 3 identical characters
    4. lowercase letter       9. no sequential / keyboard triplet
    5. digit

    Every check except 7 adds one point when it passes, giving a score in
    [0, 8]. A character class the policy does not require counts as passed.
    """

    def __init__(self, policy_config: PolicyConfig | None = None):
        super().__init__("PasswordPolicy")
        if policy_config is None:
            policy_config = DEFAULT_POLICY
        if not isinstance(policy_config, PolicyConfig):
            raise InvalidInputError(
                f"policy must be a PolicyConfig, got {type(policy_config).__name__}",
                argument="policy",
            )
        self.config = policy_config

    def validate(self, password: str) -> list[PolicyViolation]:
        """Validate password against policy."""
        return list(self.evaluate(password).violations)

    def evaluate(self, password: str) -> ValidationResult:
        """
        Validate and score a password.

        Rejections are reported in the result, never raised.

        Raises:
            InvalidInputError: If ``password`` is not a str
        """
        if not isinstance(password, str):
            raise InvalidInputError(
                f"password must be a str, got {type(password).__name__}",
                argument="password",
            )

        violations: list[PolicyViolation] = []
        score = 0

        score += self._validate_length(password, violations)
        score += self._validate_character_requirements(password, violations)
        self._validate_forbidden_substrings(password, violations)
        score += self._validate_patterns(password, violations)

        result = ValidationResult(
            violations=tuple(violations),
            score=score,
            strength_category=classify(score, len(password)),
        )

        logger.debug(
            "password_validated",
            score=result.score,
            strength=result.strength_category.value,
            violation_count=len(violations),
            failed_rules=list(result.failed_rules),
        )
        return result

    def _validate_length(self, password: str, violations: list[PolicyViolation]) -> int:
        """Validate password length requirements."""
        passed = 0

        if len(password) < self.config.min_length:
            violations.append(PolicyViolation(
                rule_name="min_length",
                message=ViolationMessages.TOO_SHORT.format(
                    min_length=self.config.min_length
                ),
            ))
        else:
            passed += 1

        if len(password) > self.config.max_length:
            violations.append(PolicyViolation(
                rule_name="max_length",
                message=ViolationMessages.TOO_LONG.format(
                    max_length=self.config.max_length
                ),
            ))
        else:
            passed += 1

        return passed

    def _validate_character_requirements(
        self, password: str, violations: list[PolicyViolation]
    ) -> int:
        """Validate character type requirements."""
        requirements = (
            ("uppercase", self.config.require_uppercase, _UPPERCASE,
             ViolationMessages.MISSING_UPPERCASE),
            ("lowercase", self.config.require_lowercase, _LOWERCASE,
             ViolationMessages.MISSING_LOWERCASE),
            ("digits", self.config.require_numbers, _DIGIT,
             ViolationMessages.MISSING_DIGIT),
            ("special_chars", self.config.require_special_chars, _SPECIAL,
             ViolationMessages.MISSING_SPECIAL),
        )

        passed = 0
        for rule_name, required, pattern, message in requirements:
            if required and not pattern.search(password):
                violations.append(PolicyViolation(rule_name=rule_name, message=message))
            else:
                passed += 1
        return passed

    def _validate_forbidden_substrings(
        self, password: str, violations: list[PolicyViolation]
    ) -> None:
        """Report the first forbidden substring found; contributes no score."""
        password_lower = password.lower()
        for pattern in self.config.forbidden_substrings:
            if pattern.lower() in password_lower:
                violations.append(PolicyViolation(
                    rule_name="forbidden_substring",
                    message=ViolationMessages.FORBIDDEN_SUBSTRING.format(pattern=pattern),
                ))
                return

    def _validate_patterns(self, password: str, violations: list[PolicyViolation]) -> int:
        """Detect repeated-character runs and sequential patterns."""
        passed = 0

        if has_repeated_characters(password):
            violations.append(PolicyViolation(
                rule_name="repeated_characters",
                message=ViolationMessages.REPEATED_CHARACTERS,
            ))
        else:
            passed += 1

        if has_sequential_pattern(password):
            violations.append(PolicyViolation(
                rule_name="sequential_pattern",
                message=ViolationMessages.SEQUENTIAL_PATTERN,
            ))
        else:
            passed += 1

        return passed


def validate(password: str, policy: PolicyConfig | None = None) -> ValidationResult:
    """Validate ``password`` against ``policy`` (the default policy if None)."""
    return PasswordPolicy(policy).evaluate(password)
