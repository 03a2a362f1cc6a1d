"""
Strength Classifier

Maps a validation score and a password length to a strength category.
"""

from passguard.core.errors import InvalidInputError
from passguard.domain.enums import StrengthCategory

# (category, minimum score, minimum length), strongest first; both must hold
STRENGTH_TIERS: tuple[tuple[StrengthCategory, int, int], ...] = (
    (StrengthCategory.STRONG, 7, 16),
    (StrengthCategory.GOOD, 5, 12),
    (StrengthCategory.FAIR, 3, 8),
)


def classify(score: int, length: int) -> StrengthCategory:
    """
    Classify a password by score and length.

    The first tier whose score and length thresholds are both met wins;
    anything below the FAIR tier, including negative values, is WEAK.

    Raises:
        InvalidInputError: If ``score`` or ``length`` is not an int
    """
    for name, value in (("score", score), ("length", length)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidInputError(
                f"{name} must be an int, got {type(value).__name__}",
                argument=name,
            )

    for category, min_score, min_length in STRENGTH_TIERS:
        if score >= min_score and length >= min_length:
            return category
    return StrengthCategory.WEAK
