"""
Tests for settings persistence.

Tests save/load round-trip, fallbacks on bad files, and schema compatibility.
"""

import json

import pytest

from magic_number.game.session import GameSession
from magic_number.settings import (
    DEFAULT_SETTINGS_PATH,
    SETTINGS_PATH_ENV,
    SETTINGS_SCHEMA_VERSION,
    SettingsRepository,
    get_settings_path,
)
from magic_number.types import InvalidRangeError, NumberLayout, Settings


class TestSettingsPath:

    def test_env_var(self, monkeypatch, tmp_path):
        monkeypatch.setenv(SETTINGS_PATH_ENV, str(tmp_path / "s.json"))
        assert get_settings_path() == tmp_path / "s.json"

    def test_default(self, monkeypatch):
        monkeypatch.delenv(SETTINGS_PATH_ENV, raising=False)
        assert get_settings_path() == DEFAULT_SETTINGS_PATH

    def test_explicit_path_wins(self, monkeypatch, tmp_path):
        monkeypatch.setenv(SETTINGS_PATH_ENV, str(tmp_path / "env.json"))
        assert SettingsRepository(tmp_path / "arg.json").path == tmp_path / "arg.json"


class TestLoad:

    def test_missing_file_gives_defaults(self, repository):
        assert repository.load() == Settings()

    def test_corrupt_json_gives_defaults(self, repository, settings_path, caplog):
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text("{not json")
        assert repository.load() == Settings()
        assert "Could not read settings" in caplog.text

    def test_invalid_value_gives_defaults(self, repository, settings_path, caplog):
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text(json.dumps({"schema_version": 1, "settings": {"max_number": 50}}))
        assert repository.load() == Settings()
        assert "Invalid settings" in caplog.text

    def test_non_object_gives_defaults(self, repository, settings_path):
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text("[1, 2, 3]")
        assert repository.load() == Settings()

    def test_newer_schema_rejected(self, repository, settings_path):
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text(json.dumps({
            "schema_version": SETTINGS_SCHEMA_VERSION + 1,
            "settings": {"max_number": 31},
        }))
        with pytest.raises(ValueError, match="newer than supported"):
            repository.load()

    def test_missing_schema_version_accepted(self, repository, settings_path):
        settings_path.parent.mkdir(parents=True)
        settings_path.write_text(json.dumps({"settings": {"max_number": 127}}))
        assert repository.load().max_number == 127


class TestSave:

    def test_round_trip(self, repository):
        settings = Settings(max_number=127, number_layout=NumberLayout.SCATTERED)
        repository.save(settings)
        assert repository.load() == settings

    def test_creates_parent_directory(self, repository, settings_path):
        assert not settings_path.parent.exists()
        assert repository.save(Settings()) == settings_path
        assert settings_path.exists()

    def test_file_format(self, repository, settings_path):
        repository.save(Settings(max_number=31))
        data = json.loads(settings_path.read_text())
        assert data == {
            "schema_version": SETTINGS_SCHEMA_VERSION,
            "settings": {"max_number": 31, "number_layout": "ASCENDING"},
        }


class TestUpdates:

    def test_update_max_number_persists(self, repository, settings_path):
        assert repository.update_max_number(31).max_number == 31
        assert SettingsRepository(settings_path).load().max_number == 31

    def test_update_keeps_other_field(self, repository):
        repository.update_number_layout(NumberLayout.SCATTERED)
        settings = repository.update_max_number(127)
        assert settings == Settings(max_number=127, number_layout=NumberLayout.SCATTERED)

    def test_update_layout_by_name(self, repository):
        assert repository.update_number_layout("scattered").number_layout is NumberLayout.SCATTERED

    def test_update_rejects_unsupported(self, repository, settings_path):
        with pytest.raises(InvalidRangeError):
            repository.update_max_number(100)
        assert not settings_path.exists()

    def test_update_rejects_unknown_layout(self, repository):
        with pytest.raises(ValueError):
            repository.update_number_layout("diagonal")


class TestAsProvider:

    def test_session_reads_repository(self, repository):
        repository.update_max_number(127)
        session = GameSession(settings_provider=repository)
        assert len(session.start().cards) == 7

    def test_changes_apply_to_next_game(self, repository):
        session = GameSession(settings_provider=repository)
        assert len(session.start().cards) == 6
        repository.update_max_number(31)
        assert len(session.start().cards) == 5
