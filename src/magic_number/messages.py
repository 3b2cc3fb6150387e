"""Player-facing text for the reveal screen."""

from typing import Optional


def reveal_headline(number: int) -> str:
    """Line shown above the revealed number."""
    # 0 means every answer was "no"; it is a normal outcome, not an error
    if number == 0:
        return "You said NO to all cards!"
    return "Your number is"


def reveal_subtitle(number: int) -> Optional[str]:
    """Optional second line, only used for the all-"no" result."""
    if number == 0:
        return "That means your number was..."
    return None


__all__ = ['reveal_headline', 'reveal_subtitle']
