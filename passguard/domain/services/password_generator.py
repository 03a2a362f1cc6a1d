"""
Password Generator

Builds random passwords that structurally satisfy a policy's character-class
requirements.
"""

import random
import secrets

from passguard.core.errors import InvalidInputError, PasswordGenerationError
from passguard.core.logging import get_logger, log_context
from passguard.domain.constants import (
    DEFAULT_GENERATION_ATTEMPTS,
    DIGITS,
    GENERATED_PASSWORD_LENGTH,
    GENERATOR_SPECIAL_CHARACTERS,
    LOWERCASE_LETTERS,
    UPPERCASE_LETTERS,
)
from passguard.domain.rules import PasswordPolicy
from passguard.domain.value_objects import DEFAULT_POLICY, PolicyConfig

logger = get_logger(__name__)

CLASS_ALPHABETS: dict[str, str] = {
    "uppercase": UPPERCASE_LETTERS,
    "lowercase": LOWERCASE_LETTERS,
    "numbers": DIGITS,
    "special_chars": GENERATOR_SPECIAL_CHARACTERS,
}

FULL_ALPHABET = "".join(CLASS_ALPHABETS.values())


def generate(policy: PolicyConfig | None = None, rng: random.Random | None = None) -> str:
    """
    Generate a 12-character password.

    One character is drawn from each class the policy requires, the rest from
    the union of all four class alphabets, and the result is shuffled so the
    guaranteed characters sit at random positions.

    Only the character classes are guaranteed. Repeated runs and sequential
    triplets are unlikely but possible; use ``generate_valid`` when the full
    policy must hold.

    Args:
        policy: Policy whose required classes are seeded (default policy if None)
        rng: Randomness source; a fresh ``secrets.SystemRandom`` if None.
            Pass a seeded ``random.Random`` for reproducible output.
    """
    policy = _check_policy(policy)
    rng = _check_rng(rng)

    chars = [rng.choice(CLASS_ALPHABETS[name]) for name in policy.required_classes]
    chars.extend(
        rng.choice(FULL_ALPHABET)
        for _ in range(GENERATED_PASSWORD_LENGTH - len(chars))
    )
    rng.shuffle(chars)

    logger.debug(
        "password_generated",
        length=len(chars),
        seeded_classes=list(policy.required_classes),
    )
    return "".join(chars)


def generate_valid(
    policy: PolicyConfig | None = None,
    rng: random.Random | None = None,
    max_attempts: int = DEFAULT_GENERATION_ATTEMPTS,
) -> str:
    """
    Generate passwords until one passes full validation.

    Raises:
        InvalidInputError: If ``max_attempts`` is not a positive int
        PasswordGenerationError: If no candidate passed within ``max_attempts``,
            e.g. because the policy's length bounds exclude 12 characters
    """
    if isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1:
        raise InvalidInputError(
            f"max_attempts must be a positive int, got {max_attempts!r}",
            argument="max_attempts",
        )

    policy = _check_policy(policy)
    rng = _check_rng(rng)
    validator = PasswordPolicy(policy)

    # Validation events emitted per attempt carry the same context
    with log_context(
        operation="generate_valid",
        max_attempts=max_attempts,
        required_classes=list(policy.required_classes),
    ):
        for attempt in range(1, max_attempts + 1):
            candidate = generate(policy, rng)
            result = validator.evaluate(candidate)
            if result.is_valid:
                logger.debug("valid_password_generated", attempts=attempt)
                return candidate
            logger.debug(
                "generated_password_rejected",
                attempt=attempt,
                failed_rules=list(result.failed_rules),
            )

        logger.warning("password_generation_exhausted", attempts=max_attempts)

    raise PasswordGenerationError(
        f"No valid password generated in {max_attempts} attempts",
        attempts=max_attempts,
        details={"policy": policy.to_dict()},
    )


def _check_policy(policy: PolicyConfig | None) -> PolicyConfig:
    if policy is None:
        return DEFAULT_POLICY
    if not isinstance(policy, PolicyConfig):
        raise InvalidInputError(
            f"policy must be a PolicyConfig, got {type(policy).__name__}",
            argument="policy",
        )
    return policy


def _check_rng(rng: random.Random | None) -> random.Random:
    if rng is None:
        return secrets.SystemRandom()
    if not isinstance(rng, random.Random):
        raise InvalidInputError(
            f"rng must be a random.Random, got {type(rng).__name__}",
            argument="rng",
        )
    return rng
