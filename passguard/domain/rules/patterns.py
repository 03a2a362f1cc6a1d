"""
Pattern Detection

Pure predicates for runs of identical characters and for sequential or
keyboard-row triplets.
"""

import re

from passguard.domain.constants import (
    REPEAT_RUN_LENGTH,
    SEQUENCE_WINDOW,
    SEQUENTIAL_REFERENCE_STRINGS,
)

_REPEATED_RUN = re.compile(r"(.)\1{%d}" % (REPEAT_RUN_LENGTH - 1), re.DOTALL)

# Every width-3 window of every reference string, in reference order
SEQUENTIAL_WINDOWS: tuple[str, ...] = tuple(
    sequence[i : i + SEQUENCE_WINDOW]
    for sequence in SEQUENTIAL_REFERENCE_STRINGS
    for i in range(len(sequence) - SEQUENCE_WINDOW + 1)
)


def has_repeated_characters(password: str) -> bool:
    """True if three identical characters appear consecutively (case-sensitive)."""
    return _REPEATED_RUN.search(password) is not None


def find_sequential_pattern(password: str) -> str | None:
    """
    Return the first sequential window found in ``password``, else None.

    Matching is case-insensitive and forward-only: ``"abc"`` and ``"QWE"`` are
    found, ``"cba"`` is not.
    """
    lowered = password.lower()
    for window in SEQUENTIAL_WINDOWS:
        if window in lowered:
            return window
    return None


def has_sequential_pattern(password: str) -> bool:
    """True if the password contains a digit, alphabet or keyboard-row triplet."""
    return find_sequential_pattern(password) is not None
