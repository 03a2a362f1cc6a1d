"""
Policy Config Value Object

Immutable description of the password rules in force.
"""

from collections.abc import Iterable
from dataclasses import asdict, dataclass, field, replace
from typing import Any

from passguard.core.errors import PolicyConfigurationError
from passguard.domain.constants import DEFAULT_FORBIDDEN_SUBSTRINGS

_FLAG_FIELDS = (
    "require_uppercase",
    "require_lowercase",
    "require_numbers",
    "require_special_chars",
)


@dataclass(frozen=True)
class PolicyConfig:
    """
    Value object representing a password policy.

    All fields have defaults, so ``PolicyConfig(min_length=12)`` is a complete
    policy. Construction fails fast with ``PolicyConfigurationError`` when the
    settings are mistyped or contradictory (``min_length > max_length``).
    Forbidden substrings are matched case-insensitively; any iterable of
    strings is accepted and stored as a tuple.
    """

    min_length: int = 8
    max_length: int = 128
    require_uppercase: bool = True
    require_lowercase: bool = True
    require_numbers: bool = True
    require_special_chars: bool = True
    forbidden_substrings: tuple[str, ...] = field(
        default=DEFAULT_FORBIDDEN_SUBSTRINGS
    )

    def __post_init__(self) -> None:
        """Validate and normalize policy settings."""
        for name in ("min_length", "max_length"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise PolicyConfigurationError(
                    f"{name} must be an integer, got {type(value).__name__}",
                    field=name,
                )
            if value < 0:
                raise PolicyConfigurationError(
                    f"{name} cannot be negative", field=name
                )

        if self.min_length > self.max_length:
            raise PolicyConfigurationError(
                f"min_length ({self.min_length}) cannot exceed "
                f"max_length ({self.max_length})",
                field="min_length",
            )

        for name in _FLAG_FIELDS:
            if not isinstance(getattr(self, name), bool):
                raise PolicyConfigurationError(
                    f"{name} must be a boolean", field=name
                )

        object.__setattr__(
            self,
            "forbidden_substrings",
            _normalize_substrings(self.forbidden_substrings),
        )

    @property
    def required_classes(self) -> tuple[str, ...]:
        """Names of the character classes this policy requires."""
        return tuple(
            name.removeprefix("require_")
            for name in _FLAG_FIELDS
            if getattr(self, name)
        )

    def with_overrides(self, **changes: Any) -> "PolicyConfig":
        """Return a validated copy with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        data = asdict(self)
        data["forbidden_substrings"] = list(self.forbidden_substrings)
        return data


def _normalize_substrings(substrings: Any) -> tuple[str, ...]:
    if isinstance(substrings, str) or not isinstance(substrings, Iterable):
        raise PolicyConfigurationError(
            "forbidden_substrings must be a sequence of strings",
            field="forbidden_substrings",
        )

    normalized = tuple(substrings)
    for entry in normalized:
        if not isinstance(entry, str):
            raise PolicyConfigurationError(
                f"forbidden substring {entry!r} is not a string",
                field="forbidden_substrings",
            )
        # An empty entry is a substring of every password
        if not entry:
            raise PolicyConfigurationError(
                "forbidden substrings cannot be empty",
                field="forbidden_substrings",
            )
    return normalized


DEFAULT_POLICY = PolicyConfig()
