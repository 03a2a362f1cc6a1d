"""
Global pytest configuration and fixtures for all tests.

Provides:
- Policies (default, relaxed)
- Seeded randomness sources
- A seeded Faker for arbitrary password input
"""

import random

import pytest
from faker import Faker

from passguard.domain.value_objects import DEFAULT_POLICY, PolicyConfig

FAKER_SEED = 20240613


@pytest.fixture
def default_policy() -> PolicyConfig:
    """The documented default policy."""
    return DEFAULT_POLICY


@pytest.fixture
def relaxed_policy() -> PolicyConfig:
    """Policy with every character-class requirement disabled."""
    return PolicyConfig(
        require_uppercase=False,
        require_lowercase=False,
        require_numbers=False,
        require_special_chars=False,
    )


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic randomness source."""
    return random.Random(1337)


@pytest.fixture
def fake() -> Faker:
    """Seeded Faker instance."""
    faker = Faker()
    faker.seed_instance(FAKER_SEED)
    return faker


@pytest.fixture
def arbitrary_passwords(fake: Faker) -> list[str]:
    """A mix of realistic, degenerate and oversized password inputs."""
    passwords = [
        "",
        " ",
        "        ",
        "a",
        "aaa",
        "password",
        "Tr0ub4dor&9Zq",
        "x" * 200,
        "\n\n\n",
        "Ünïcödé-Pässwörd-2024",
    ]
    for length in (4, 8, 12, 16, 24):
        passwords.extend(fake.password(length=length) for _ in range(20))
        passwords.extend(
            fake.password(length=length, special_chars=False, upper_case=False)
            for _ in range(5)
        )
    passwords.extend(fake.word() for _ in range(20))
    passwords.extend(fake.sentence() for _ in range(10))
    return passwords
