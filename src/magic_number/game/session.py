"""
Game progression state machine.

Drives a single playthrough of the trick: generates the cards at start,
records one answer per card, and walks the phases

    NotStarted -> InProgress -> [Calculating(n) ->] Revealing(n) -> Complete(n)

Usage:
    from magic_number.game import GameSession

    session = GameSession(settings_provider=repository)
    session.start()
    while session.state.current_card is not None:
        session.record_response(ask_player(session.state.current_card))
    session.reveal()
    session.complete_reveal()
    print(session.state.revealed_number)

Transitions that are not valid for the current phase are ignored rather than
raised: duplicate taps and late voice commands arrive routinely from the UI.
All transitions are serialized through a re-entrant lock, so a host may call
in from several threads (for example a speech callback thread and the UI
thread) and observers may call back into the session. Observers always see
states in transition order; an observer that raises is logged and skipped,
the transition itself still stands.
"""

import logging
import threading
from collections import deque
from typing import Callable, Deque, List, Optional

from ..cards.generator import calculate_result, generate_cards
from ..types import Settings
from ..voice import VoiceCommand
from .phases import (
    Calculating,
    Complete,
    GameState,
    InProgress,
    Revealing,
)

logger = logging.getLogger(__name__)

SettingsProvider = Callable[[], Settings]
StateObserver = Callable[[GameState], None]


class GameSession:
    """Owns the GameState for one player and applies transitions to it.

    Attributes:
        reveal_gate: If True, finishing the cards stops in Calculating until
                     reveal() is called. If False, goes straight to Revealing.
    """

    def __init__(self, settings_provider: Optional[SettingsProvider] = None,
                 reveal_gate: bool = True):
        """Initialize the session in the NotStarted phase.

        Args:
            settings_provider: Zero-argument callable returning the current
                               Settings. Defaults to Settings() (max 63).
            reveal_gate: See class docstring.
        """
        self._settings_provider = settings_provider or Settings
        self.reveal_gate = reveal_gate
        self._state = GameState()
        self._observers: List[StateObserver] = []
        self._lock = threading.RLock()
        self._pending: Deque[GameState] = deque()
        self._notifying = False

    # =========================================================================
    # OBSERVATION
    # =========================================================================

    @property
    def state(self) -> GameState:
        """Current immutable state snapshot."""
        return self._state

    def subscribe(self, observer: StateObserver) -> Callable[[], None]:
        """Register a callback invoked with the new state after each change.

        Returns:
            Function that removes the observer again
        """
        with self._lock:
            self._observers.append(observer)

        def unsubscribe():
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def _set_state(self, new_state: GameState):
        self._state = new_state
        self._pending.append(new_state)

        # Transitions made by observers are queued; the outermost call delivers
        # every state to every observer in the order the transitions happened.
        if self._notifying:
            return
        self._notifying = True
        try:
            while self._pending:
                state = self._pending.popleft()
                for observer in list(self._observers):
                    try:
                        observer(state)
                    except Exception:
                        logger.exception(f"Observer {observer!r} failed on phase {state.phase.name}")
        finally:
            self._notifying = False

    def _ignore(self, operation: str) -> bool:
        logger.debug(f"Ignoring {operation}() in phase {self._state.phase.name}")
        return False

    # =========================================================================
    # TRANSITIONS
    # =========================================================================

    def start(self, settings: Optional[Settings] = None) -> GameState:
        """Start a new game with freshly generated cards. Valid from any phase.

        Args:
            settings: Settings to use; read from the provider if None

        Raises:
            InvalidRangeError: If the settings carry an unsupported max number
        """
        with self._lock:
            if settings is None:
                settings = self._settings_provider()
            cards = generate_cards(settings.max_number)

            logger.info(f"Starting game: range 1..{settings.max_number}, {len(cards)} cards")
            self._set_state(GameState(
                cards=tuple(cards),
                current_card_index=0,
                responses=(),
                phase=InProgress(),
                number_layout=settings.number_layout,
            ))
            return self._state

    def record_response(self, is_yes: bool) -> bool:
        """Record the answer for the current card and advance.

        Args:
            is_yes: True if the player's number is on the current card

        Returns:
            True if the answer was applied, False if ignored (not InProgress)
        """
        with self._lock:
            current = self._state
            if not isinstance(current.phase, InProgress):
                return self._ignore("record_response")

            responses = current.responses + (bool(is_yes),)
            next_index = current.current_card_index + 1

            if next_index >= len(current.cards):
                result = calculate_result(responses, current.cards)
                phase = Calculating(result) if self.reveal_gate else Revealing(result)
                logger.info(f"All {len(current.cards)} cards answered, result {result}")
            else:
                phase = current.phase

            self._set_state(current.evolve(
                responses=responses,
                current_card_index=next_index,
                phase=phase,
            ))
            return True

    def answer_yes(self) -> bool:
        return self.record_response(True)

    def answer_no(self) -> bool:
        return self.record_response(False)

    def apply_command(self, command: Optional[VoiceCommand]) -> bool:
        """Apply a recognized voice command as an answer. None is ignored."""
        if command is None:
            return False
        return self.record_response(command is VoiceCommand.YES)

    def reveal(self) -> bool:
        """Player asked for the reveal: Calculating(n) -> Revealing(n)."""
        with self._lock:
            phase = self._state.phase
            if not isinstance(phase, Calculating):
                return self._ignore("reveal")
            self._set_state(self._state.evolve(phase=Revealing(phase.number)))
            return True

    def complete_reveal(self) -> bool:
        """Reveal finished showing: Revealing(n) -> Complete(n)."""
        with self._lock:
            phase = self._state.phase
            if not isinstance(phase, Revealing):
                return self._ignore("complete_reveal")
            self._set_state(self._state.evolve(phase=Complete(phase.number)))
            return True

    def reset(self) -> GameState:
        """Discard the current game. Valid from any phase."""
        with self._lock:
            self._set_state(GameState())
            return self._state


__all__ = ['GameSession', 'SettingsProvider', 'StateObserver']
