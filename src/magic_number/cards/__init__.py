"""
Card logic for the magic number trick.

This module provides:
- Card generation and result calculation (generator.py)
- Display ordering of card numbers (layout.py)
"""

from .generator import (
    InvalidRangeError,
    generate_cards,
    calculate_result,
    responses_for,
)

from .layout import (
    arrange_numbers,
    format_card,
)

__all__ = [
    # Generator
    'InvalidRangeError',
    'generate_cards',
    'calculate_result',
    'responses_for',
    # Layout
    'arrange_numbers',
    'format_card',
]
