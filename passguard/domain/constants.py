"""
Password Policy Constants

Read-only lookup tables used by the validator, the pattern detector and the
generator.
"""

import string

# Score contributions: min/max length, four character classes, repeat, sequence
MAX_SCORE = 8
MIN_SCORE = 0

GENERATED_PASSWORD_LENGTH = 12
DEFAULT_GENERATION_ATTEMPTS = 100

REPEAT_RUN_LENGTH = 3
SEQUENCE_WINDOW = 3

UPPERCASE_LETTERS = string.ascii_uppercase
LOWERCASE_LETTERS = string.ascii_lowercase
DIGITS = string.digits

# Characters accepted as "special" when validating
SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{};':\"\\|,.<>/?"

# Characters drawn when generating; every one is also in SPECIAL_CHARACTERS
GENERATOR_SPECIAL_CHARACTERS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

SEQUENTIAL_REFERENCE_STRINGS = (
    "0123456789",
    "abcdefghijklmnopqrstuvwxyz",
    "qwertyuiop",
    "asdfghjkl",
    "zxcvbnm",
)

DEFAULT_FORBIDDEN_SUBSTRINGS = (
    "password",
    "123456",
    "qwerty",
    "abc123",
    "admin",
    "user",
    "test",
)

COMMON_PASSWORDS = frozenset(
    {
        "password",
        "123456",
        "123456789",
        "qwerty",
        "abc123",
        "password123",
        "admin",
        "letmein",
        "welcome",
        "monkey",
        "1234567890",
        "password1",
        "qwerty123",
        "dragon",
        "master",
        "hello",
        "freedom",
        "whatever",
        "qazwsx",
        "trustno1",
    }
)


class ViolationMessages:
    """User-facing messages for each failed check."""

    TOO_SHORT = "Password must be at least {min_length} characters long"
    TOO_LONG = "Password must be no more than {max_length} characters long"
    MISSING_UPPERCASE = "Password must contain at least one uppercase letter"
    MISSING_LOWERCASE = "Password must contain at least one lowercase letter"
    MISSING_DIGIT = "Password must contain at least one number"
    MISSING_SPECIAL = "Password must contain at least one special character"
    FORBIDDEN_SUBSTRING = 'Password cannot contain common patterns like "{pattern}"'
    REPEATED_CHARACTERS = (
        "Password cannot contain more than 2 consecutive identical characters"
    )
    SEQUENTIAL_PATTERN = "Password cannot contain sequential patterns (e.g., 123, abc)"
