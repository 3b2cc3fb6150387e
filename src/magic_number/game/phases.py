"""
Game phases and the immutable game state snapshot.

Phases form a closed set of variants. Those that carry the revealed number
(Calculating, Revealing, Complete) expose it as `.number`:

    NotStarted -> InProgress -> Calculating(n) -> Revealing(n) -> Complete(n)

Calculating is the "reading your mind" pause before the player asks for the
reveal; sessions created with reveal_gate=False skip it.
"""

from dataclasses import dataclass, field, replace
from typing import Any, ClassVar, Dict, Optional, Tuple

from ..types import Card, NumberLayout


@dataclass(frozen=True)
class GamePhase:
    """Base class for all game phases."""
    name: ClassVar[str] = "GamePhase"

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name}


@dataclass(frozen=True)
class NotStarted(GamePhase):
    """Game has not started yet."""
    name: ClassVar[str] = "NotStarted"


@dataclass(frozen=True)
class InProgress(GamePhase):
    """Player is answering cards."""
    name: ClassVar[str] = "InProgress"


@dataclass(frozen=True)
class _NumberPhase(GamePhase):
    number: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "number": self.number}


@dataclass(frozen=True)
class Calculating(_NumberPhase):
    """All cards answered; waiting for the player to ask for the reveal."""
    name: ClassVar[str] = "Calculating"


@dataclass(frozen=True)
class Revealing(_NumberPhase):
    """Reveal is being shown."""
    name: ClassVar[str] = "Revealing"


@dataclass(frozen=True)
class Complete(_NumberPhase):
    """Game is over, the number has been revealed."""
    name: ClassVar[str] = "Complete"


@dataclass(frozen=True)
class GameState:
    """Complete state of a game session.

    Frozen; the session replaces the snapshot on every transition.

    Attributes:
        cards: Cards to show, generated from the max number at start
        current_card_index: Which card the player is currently answering
        responses: Answers so far (True = number was on card), in card order
        phase: Current phase of the game
        number_layout: How numbers should be displayed on cards
    """
    cards: Tuple[Card, ...] = ()
    current_card_index: int = 0
    responses: Tuple[bool, ...] = ()
    phase: GamePhase = field(default_factory=NotStarted)
    number_layout: NumberLayout = NumberLayout.ASCENDING

    @property
    def current_card(self) -> Optional[Card]:
        """Card awaiting an answer, or None outside InProgress."""
        if not isinstance(self.phase, InProgress):
            return None
        if 0 <= self.current_card_index < len(self.cards):
            return self.cards[self.current_card_index]
        return None

    @property
    def progress(self) -> Tuple[int, int]:
        """(cards answered, total cards)."""
        return len(self.responses), len(self.cards)

    @property
    def is_finished(self) -> bool:
        """True once every card has been answered."""
        return isinstance(self.phase, _NumberPhase)

    @property
    def revealed_number(self) -> Optional[int]:
        """The number shown to the player, available only in Complete."""
        if isinstance(self.phase, Complete):
            return self.phase.number
        return None

    def evolve(self, **changes) -> "GameState":
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "cards": [c.to_dict() for c in self.cards],
            "current_card_index": self.current_card_index,
            "responses": list(self.responses),
            "phase": self.phase.to_dict(),
            "number_layout": self.number_layout.name,
        }


__all__ = [
    'GamePhase',
    'NotStarted',
    'InProgress',
    'Calculating',
    'Revealing',
    'Complete',
    'GameState',
]
