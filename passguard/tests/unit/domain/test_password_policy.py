"""
Test cases for the PasswordPolicy validator.

Covers rule order, scoring, short-circuiting of forbidden substrings,
disabled requirements, contract violations and result invariants.
"""

import pytest

from passguard import validate
from passguard.core.errors import InvalidInputError
from passguard.domain.constants import ViolationMessages
from passguard.domain.enums import StrengthCategory
from passguard.domain.rules import PasswordPolicy, classify
from passguard.domain.value_objects import PolicyConfig

TOO_SHORT_8 = ViolationMessages.TOO_SHORT.format(min_length=8)


class TestReferencePasswords:
    """Documented reference passwords under the default policy."""

    def test_empty_password(self):
        """Empty string passes only max length, repeat and sequence checks."""
        result = validate("")

        assert result.is_valid is False
        assert result.score == 3
        assert result.errors == (
            TOO_SHORT_8,
            ViolationMessages.MISSING_UPPERCASE,
            ViolationMessages.MISSING_LOWERCASE,
            ViolationMessages.MISSING_DIGIT,
            ViolationMessages.MISSING_SPECIAL,
        )
        assert result.strength_category == StrengthCategory.WEAK

    def test_password_literal(self):
        """'password' is forbidden and misses three character classes."""
        result = validate("password")

        assert result.is_valid is False
        assert result.errors == (
            ViolationMessages.MISSING_UPPERCASE,
            ViolationMessages.MISSING_DIGIT,
            ViolationMessages.MISSING_SPECIAL,
            'Password cannot contain common patterns like "password"',
        )
        assert result.score == 5
        # score 5 at length 8 sits in the Fair tier
        assert result.strength_category == StrengthCategory.FAIR

    def test_strong_thirteen_character_password(self):
        """All nine checks pass but length keeps it out of the Strong tier."""
        result = validate("Tr0ub4dor&9Zq")

        assert result.is_valid is True
        assert result.errors == ()
        assert result.score == 8
        assert result.strength_category == StrengthCategory.GOOD

    def test_sixteen_character_password_is_strong(self):
        result = validate("Tr0ub4dor&9ZqXm#")

        assert result.is_valid is True
        assert result.score == 8
        assert result.strength_category == StrengthCategory.STRONG


class TestRuleChecks:
    """Individual rule checks and their messages."""

    def test_too_long(self):
        policy = PolicyConfig(max_length=10)
        result = validate("Tr0ub4dor&9Zq", policy)

        assert result.errors == (
            ViolationMessages.TOO_LONG.format(max_length=10),
        )
        assert result.failed_rules == ("max_length",)
        assert result.score == 7
        assert result.strength_category == StrengthCategory.GOOD

    def test_min_length_message_uses_policy_value(self):
        result = validate("Tr0ub4dor&9Zq", PolicyConfig(min_length=20))

        assert result.errors == (ViolationMessages.TOO_SHORT.format(min_length=20),)
        assert "20 characters" in result.errors[0]

    def test_length_boundaries_are_inclusive(self):
        policy = PolicyConfig(min_length=13, max_length=13)
        result = validate("Tr0ub4dor&9Zq", policy)

        assert result.is_valid is True

    def test_uppercase_must_be_ascii(self):
        """Non-ASCII capitals do not satisfy the uppercase requirement."""
        result = validate("Élan#vital9")

        assert result.errors == (ViolationMessages.MISSING_UPPERCASE,)
        assert result.score == 7

    def test_repeated_characters(self):
        result = validate("Baaad#Kite9")

        assert result.errors == (ViolationMessages.REPEATED_CHARACTERS,)
        assert result.score == 7
        assert result.strength_category == StrengthCategory.FAIR

    def test_sequential_pattern(self):
        result = validate("Xyz#Plum42")

        assert result.errors == (ViolationMessages.SEQUENTIAL_PATTERN,)
        assert result.failed_rules == ("sequential_pattern",)
        assert result.score == 7

    def test_whitespace_only_password(self):
        result = validate(" " * 8)

        assert result.failed_rules == (
            "uppercase",
            "lowercase",
            "digits",
            "special_chars",
            "repeated_characters",
        )
        assert result.score == 3

    def test_every_rule_can_fail_in_order(self):
        """Messages follow rule-check order regardless of input layout."""
        policy = PolicyConfig(min_length=10, max_length=10)
        result = validate("qwerty", policy)

        assert result.failed_rules == (
            "min_length",
            "uppercase",
            "digits",
            "special_chars",
            "forbidden_substring",
            "sequential_pattern",
        )


class TestForbiddenSubstrings:
    """Forbidden substring matching."""

    def test_only_first_match_is_reported(self):
        """Several forbidden entries match; only the first in policy order is named."""
        result = validate("Admin_Test_User9")

        assert result.errors == (
            'Password cannot contain common patterns like "admin"',
        )

    def test_forbidden_check_does_not_affect_score(self):
        """A forbidden match costs nothing; category depends on score and length only."""
        result = validate("Admin_Test_User9")

        assert result.score == 8
        assert result.is_valid is False
        assert result.strength_category == StrengthCategory.STRONG

    def test_match_is_case_insensitive_both_ways(self):
        policy = PolicyConfig(forbidden_substrings=("ACME",))
        result = validate("myAcmeCo9!X", policy)

        assert result.errors == ('Password cannot contain common patterns like "ACME"',)

    def test_policy_order_decides_reported_entry(self):
        policy = PolicyConfig(forbidden_substrings=["user", "admin"])
        result = validate("Admin_Test_User9", policy)

        assert result.errors == ('Password cannot contain common patterns like "user"',)

    def test_empty_forbidden_list(self):
        policy = PolicyConfig(forbidden_substrings=())
        result = validate("Password#1x", policy)

        assert result.is_valid is True


class TestDisabledRequirements:
    """A character class the policy does not require counts as satisfied."""

    def test_disabled_requirement_still_scores(self):
        policy = PolicyConfig(require_uppercase=False)
        result = validate("tr0ub4dor&9zq", policy)

        assert result.is_valid is True
        assert result.score == 8

    def test_all_requirements_disabled(self, relaxed_policy):
        result = validate("correcthorse", relaxed_policy)

        assert result.is_valid is True
        assert result.score == 8
        assert result.strength_category == StrengthCategory.GOOD

    def test_disabled_requirement_with_class_present(self, relaxed_policy):
        result = validate("Tr0ub4dor&9Zq", relaxed_policy)

        assert result.score == 8


class TestContractViolations:
    """Programming errors raise instead of producing a result."""

    @pytest.mark.parametrize("password", [None, 12345678, b"Tr0ub4dor&9Zq", ["a"]])
    def test_non_string_password(self, password):
        with pytest.raises(InvalidInputError) as exc_info:
            validate(password)
        assert exc_info.value.details["argument"] == "password"

    def test_invalid_input_is_a_type_error(self):
        with pytest.raises(TypeError):
            validate(None)

    def test_non_policy_object(self):
        with pytest.raises(InvalidInputError, match="PolicyConfig"):
            validate("Tr0ub4dor&9Zq", {"min_length": 4})


class TestResultInvariants:
    """Properties that hold for every password and policy."""

    @pytest.mark.parametrize(
        "policy",
        [
            PolicyConfig(),
            PolicyConfig(min_length=0, max_length=4),
            PolicyConfig(min_length=16, require_special_chars=False),
            PolicyConfig(
                require_uppercase=False,
                require_lowercase=False,
                require_numbers=False,
                require_special_chars=False,
                forbidden_substrings=(),
            ),
        ],
    )
    def test_invariants(self, policy, arbitrary_passwords):
        for password in arbitrary_passwords:
            result = validate(password, policy)

            assert result.is_valid == (len(result.errors) == 0)
            assert 0 <= result.score <= 8
            assert result.strength_category == classify(result.score, len(password))
            assert len(result.errors) <= 9

    def test_idempotent(self, arbitrary_passwords):
        for password in arbitrary_passwords:
            assert validate(password) == validate(password)

    def test_policy_object_and_function_agree(self, default_policy):
        validator = PasswordPolicy(default_policy)

        assert validator.evaluate("password") == validate("password")
        assert validator.validate("password") == list(validate("password").violations)
        assert validator.is_compliant("Tr0ub4dor&9Zq") is True
        assert validator.is_compliant("password") is False

    def test_rule_metadata(self):
        metadata = PasswordPolicy().get_rule_metadata()

        assert metadata["name"] == "PasswordPolicy"
        assert metadata["description"] == "Password policy validation and scoring."
