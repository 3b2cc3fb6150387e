"""
Card generation and result calculation for the binary magic number trick.

Each card represents a power of two and contains every number in the range
that has that bit set in its binary representation. Reading back which cards
the player's number appears on is reading the number's bits, so summing the
key numbers of the "yes" cards reconstructs it.

Usage:
    from magic_number.cards import generate_cards, calculate_result

    cards = generate_cards(63)          # 6 cards: 1, 2, 4, 8, 16, 32
    calculate_result([True, True, False, False, True, False], cards)  # 19
"""

import logging
from typing import List, Sequence

from ..types import Card, InvalidRangeError, validate_max_number

logger = logging.getLogger(__name__)


def generate_cards(max_number: int, strict: bool = True) -> List[Card]:
    """Generate the cards needed for the given maximum number.

    Args:
        max_number: The maximum number in the range (e.g. 31, 63, 127)
        strict: If True (default), only supported ceilings are accepted.
                If False, any positive integer is accepted.

    Returns:
        List of cards, one per bit position, lowest bit first

    Raises:
        InvalidRangeError: If max_number is not a valid ceiling
    """
    validate_max_number(max_number, strict=strict)

    # bit_length() == ceil(log2(max_number + 1)) for positive ints
    num_bits = max_number.bit_length()

    cards = []
    for bit_position in range(num_bits):
        key_number = 1 << bit_position
        numbers = tuple(n for n in range(1, max_number + 1) if n & key_number)
        cards.append(Card(key_number=key_number, bit_position=bit_position, numbers=numbers))

    logger.debug(f"Generated {len(cards)} cards for range 1..{max_number}")
    return cards


def calculate_result(responses: Sequence[bool], cards: Sequence[Card],
                     strict: bool = True) -> int:
    """Calculate the player's number from their responses.

    Args:
        responses: One answer per card, in card order (True = number was on card)
        cards: The cards that were shown
        strict: If True (default), mismatched lengths raise ValueError.
                If False, only pairs up to the shorter sequence are used.

    Returns:
        Sum of key numbers of the cards answered "yes" (0 if none)

    Raises:
        ValueError: In strict mode, if responses and cards differ in length
    """
    if strict and len(responses) != len(cards):
        raise ValueError(
            f"Got {len(responses)} responses for {len(cards)} cards; "
            "responses must be aligned one-to-one with cards"
        )
    return sum(card.key_number for card, response in zip(cards, responses) if response)


def responses_for(number: int, cards: Sequence[Card]) -> List[bool]:
    """Build the answers a truthful player holding `number` would give.

    Args:
        number: The secret number
        cards: The cards being shown

    Returns:
        One boolean per card, True where the number's bit is set
    """
    return [bool(number & card.key_number) for card in cards]


__all__ = [
    'InvalidRangeError',
    'generate_cards',
    'calculate_result',
    'responses_for',
]
