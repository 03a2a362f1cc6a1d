"""
Password Domain Enums

Ordinal strength categories produced by the strength classifier.
"""

from enum import Enum


class StrengthCategory(Enum):
    """Password strength category, ordered weakest to strongest."""

    WEAK = "weak"
    FAIR = "fair"
    GOOD = "good"
    STRONG = "strong"

    @property
    def rank(self) -> int:
        """Ordinal position, 0 for WEAK up to 3 for STRONG."""
        return _RANKS[self]

    @property
    def label(self) -> str:
        """Human-readable label."""
        return self.value.capitalize()

    @property
    def percentage(self) -> int:
        """Progress-bar fill for this category."""
        return (self.rank + 1) * 25

    def __lt__(self, other: "StrengthCategory") -> bool:
        if not isinstance(other, StrengthCategory):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: "StrengthCategory") -> bool:
        if not isinstance(other, StrengthCategory):
            return NotImplemented
        return self.rank <= other.rank


_RANKS = {
    StrengthCategory.WEAK: 0,
    StrengthCategory.FAIR: 1,
    StrengthCategory.GOOD: 2,
    StrengthCategory.STRONG: 3,
}
