"""
Magic Number: the binary mind-reading card trick.

The player thinks of a number, says whether it appears on each card, and the
sum of the "yes" cards' key numbers is their number.

Submodules:
    cards    - Card generation, result calculation and display layout
    game     - Game phases and the GameSession state machine
    settings - JSON settings persistence
    voice    - Yes/no command parsing from speech transcripts
    cli      - Terminal front end

Usage:
    from magic_number import GameSession, Settings

    session = GameSession()
    session.start(Settings(max_number=31))
"""

__version__ = "0.1.0"

# Shared types
from .types import (
    SUPPORTED_MAX_NUMBERS,
    InvalidRangeError,
    NumberLayout,
    Card,
    Settings,
)

# Cards
from .cards import generate_cards, calculate_result, responses_for, arrange_numbers

# Game
from .game import (
    GamePhase,
    NotStarted,
    InProgress,
    Calculating,
    Revealing,
    Complete,
    GameState,
    GameSession,
)

# Settings and input
from .settings import SettingsRepository
from .voice import VoiceCommand, parse_command

__all__ = [
    "__version__",
    # Shared types
    "SUPPORTED_MAX_NUMBERS",
    "InvalidRangeError",
    "NumberLayout",
    "Card",
    "Settings",
    # Cards
    "generate_cards",
    "calculate_result",
    "responses_for",
    "arrange_numbers",
    # Game
    "GamePhase",
    "NotStarted",
    "InProgress",
    "Calculating",
    "Revealing",
    "Complete",
    "GameState",
    "GameSession",
    # Settings and input
    "SettingsRepository",
    "VoiceCommand",
    "parse_command",
]
