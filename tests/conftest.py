"""Shared pytest fixtures for magic-number tests."""

import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parents[1] / "src"))

from magic_number.cards.generator import generate_cards
from magic_number.game.session import GameSession
from magic_number.settings import SettingsRepository
from magic_number.types import SUPPORTED_MAX_NUMBERS, NumberLayout, Settings


@pytest.fixture(params=SUPPORTED_MAX_NUMBERS)
def max_number(request):
    """Each supported range ceiling in turn."""
    return request.param


@pytest.fixture
def cards_63():
    """Card set for the default 1..63 range."""
    return generate_cards(63)


@pytest.fixture
def settings_31():
    return Settings(max_number=31)


@pytest.fixture
def session():
    """Session with default settings (1..63), not yet started."""
    return GameSession()


@pytest.fixture
def started_session(settings_31):
    """Session already started on the 1..31 range (5 cards)."""
    s = GameSession()
    s.start(settings_31)
    return s


@pytest.fixture
def settings_path(tmp_path):
    """Settings file path inside a temporary directory (file not created)."""
    return tmp_path / "config" / "settings.json"


@pytest.fixture
def repository(settings_path):
    return SettingsRepository(settings_path)


@pytest.fixture
def scattered_settings():
    return Settings(max_number=127, number_layout=NumberLayout.SCATTERED)
