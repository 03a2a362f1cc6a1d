"""
Common Password Check

Flags passwords built around a well-known weak password.
"""

from passguard.core.errors import InvalidInputError
from passguard.domain.constants import COMMON_PASSWORDS


def is_common_password(password: str) -> bool:
    """
    Check if password contains, or is contained in, a common password.

    ``"MyPassword1!"`` contains ``"password"``; ``"qwer"`` is part of
    ``"qwerty"``. Comparison is case-insensitive.
    """
    if not isinstance(password, str):
        raise InvalidInputError(
            f"password must be a str, got {type(password).__name__}",
            argument="password",
        )

    lowered = password.lower()
    return any(
        common in lowered or lowered in common for common in COMMON_PASSWORDS
    )
