"""Display ordering for card numbers."""

import random
from typing import List, Optional

from ..types import Card, NumberLayout


def arrange_numbers(card: Card, layout: NumberLayout,
                    rng: Optional[random.Random] = None) -> List[int]:
    """Order a card's numbers for display.

    The card itself is never modified; layout has no effect on the result
    of the trick.

    Args:
        card: Card to display
        layout: ASCENDING or SCATTERED
        rng: Random source for SCATTERED (fresh one if None)

    Returns:
        New list containing the card's numbers in display order
    """
    numbers = list(card.numbers)
    if layout is NumberLayout.SCATTERED:
        if rng is None:
            rng = random.Random()
        rng.shuffle(numbers)
    else:
        numbers.sort()
    return numbers


def format_card(card: Card, layout: NumberLayout = NumberLayout.ASCENDING,
                columns: int = 8, rng: Optional[random.Random] = None) -> str:
    """Render a card as a fixed-width grid of numbers."""
    if columns < 1:
        raise ValueError(f"columns must be at least 1, got {columns}")

    numbers = arrange_numbers(card, layout, rng)
    width = len(str(max(card.numbers))) if card.numbers else 1

    rows = []
    for start in range(0, len(numbers), columns):
        row = numbers[start:start + columns]
        rows.append(" ".join(f"{n:>{width}}" for n in row))
    return "\n".join(rows)


__all__ = ['arrange_numbers', 'format_card']
