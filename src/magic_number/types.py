"""
Shared type definitions for the magic number trick.

This module contains the fundamental dataclasses used across the cards,
game and settings submodules to avoid circular import issues.

Types:
    Card: One binary-bit question shown to the player
    NumberLayout: How a card's numbers are arranged for display
    Settings: User-configurable options persisted across sessions
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Tuple

# Range ceilings offered by the settings screen. Each is 2^k - 1 so the
# all-yes answer reaches the ceiling exactly.
SUPPORTED_MAX_NUMBERS: Tuple[int, ...] = (31, 63, 127)
DEFAULT_MAX_NUMBER = 63


class InvalidRangeError(ValueError):
    """Raised when a range ceiling is not a supported positive value."""
    pass


def validate_max_number(max_number: Any, strict: bool = True) -> int:
    """Check a range ceiling and return it.

    Args:
        max_number: Candidate ceiling.
        strict: If True, only SUPPORTED_MAX_NUMBERS are accepted.
                If False, any positive integer is accepted.

    Raises:
        InvalidRangeError: If the value is not an int, not positive, or
                           (in strict mode) not a supported ceiling.
    """
    # bool is an int subclass; True would otherwise pass as 1
    if isinstance(max_number, bool) or not isinstance(max_number, int):
        raise InvalidRangeError(
            f"max_number must be an integer, got {type(max_number).__name__}: {max_number!r}"
        )
    if max_number <= 0:
        raise InvalidRangeError(f"max_number must be positive, got {max_number}")
    if strict and max_number not in SUPPORTED_MAX_NUMBERS:
        raise InvalidRangeError(
            f"Unsupported max_number {max_number}. "
            f"Supported values are: {list(SUPPORTED_MAX_NUMBERS)}"
        )
    return max_number


class NumberLayout(Enum):
    """How numbers are arranged on each card. Cosmetic only."""
    ASCENDING = "ASCENDING"    # Listed in ascending order (default)
    SCATTERED = "SCATTERED"    # Shuffled across the card

    @classmethod
    def parse(cls, value: Any) -> "NumberLayout":
        """Convert a layout name (any case) or member to a NumberLayout.

        Raises:
            ValueError: If the name is unknown
        """
        if isinstance(value, cls):
            return value
        try:
            return cls[str(value).strip().upper()]
        except KeyError:
            raise ValueError(
                f"Unknown number layout {value!r}. "
                f"Valid layouts are: {[m.name for m in cls]}"
            ) from None


@dataclass(frozen=True)
class Card:
    """A single card in the magic number trick.

    Frozen so a generated card set cannot drift during a game.

    Attributes:
        key_number: The power of two this card represents (1, 2, 4, ...)
        bit_position: Which bit this card tests; key_number == 2 ** bit_position
        numbers: Every number in the active range with this bit set, ascending
    """
    key_number: int
    bit_position: int
    numbers: Tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.key_number != 1 << self.bit_position:
            raise ValueError(
                f"Card key_number {self.key_number} does not match "
                f"bit_position {self.bit_position} (expected {1 << self.bit_position})"
            )

    def __len__(self) -> int:
        return len(self.numbers)

    def contains(self, number: int) -> bool:
        """Check whether a number appears on this card."""
        return number in self.numbers

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "key_number": self.key_number,
            "bit_position": self.bit_position,
            "numbers": list(self.numbers),
        }


@dataclass(frozen=True)
class Settings:
    """User-configurable settings.

    Attributes:
        max_number: The maximum number in the range (31, 63 or 127)
        number_layout: How numbers are displayed on cards
    """
    max_number: int = DEFAULT_MAX_NUMBER
    number_layout: NumberLayout = NumberLayout.ASCENDING

    VALID_KEYS = frozenset({"max_number", "number_layout"})

    def __post_init__(self):
        validate_max_number(self.max_number)
        if not isinstance(self.number_layout, NumberLayout):
            raise ValueError(f"number_layout must be a NumberLayout, got {self.number_layout!r}")

    @property
    def card_count(self) -> int:
        """Number of cards needed for this range."""
        return self.max_number.bit_length()

    def with_max_number(self, max_number: int) -> "Settings":
        return replace(self, max_number=max_number)

    def with_number_layout(self, layout: NumberLayout) -> "Settings":
        return replace(self, number_layout=NumberLayout.parse(layout))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "max_number": self.max_number,
            "number_layout": self.number_layout.name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Convert from dict with validation.

        Missing keys fall back to defaults; unknown keys are rejected.

        Raises:
            ValueError: If keys are unknown or a value is invalid
                        (InvalidRangeError for an unsupported max_number)
        """
        unknown = set(data.keys()) - cls.VALID_KEYS
        if unknown:
            raise ValueError(
                f"Settings has unknown key(s): {sorted(unknown)}. "
                f"Valid keys are: {sorted(cls.VALID_KEYS)}"
            )
        return cls(
            max_number=data.get("max_number", DEFAULT_MAX_NUMBER),
            number_layout=NumberLayout.parse(data.get("number_layout", NumberLayout.ASCENDING)),
        )


__all__ = [
    'SUPPORTED_MAX_NUMBERS',
    'DEFAULT_MAX_NUMBER',
    'InvalidRangeError',
    'validate_max_number',
    'NumberLayout',
    'Card',
    'Settings',
]
