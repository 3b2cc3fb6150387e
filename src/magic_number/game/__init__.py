"""
Game progression for the magic number trick.

This module provides:
- Phase variants and the immutable GameState snapshot (phases.py)
- The GameSession state machine (session.py)
"""

from .phases import (
    GamePhase,
    NotStarted,
    InProgress,
    Calculating,
    Revealing,
    Complete,
    GameState,
)

from .session import (
    GameSession,
    SettingsProvider,
    StateObserver,
)

__all__ = [
    # Phases
    'GamePhase',
    'NotStarted',
    'InProgress',
    'Calculating',
    'Revealing',
    'Complete',
    'GameState',
    # Session
    'GameSession',
    'SettingsProvider',
    'StateObserver',
]
