"""
Configuration tests - settings store factory and config validation.
"""

from remotetasks.core import config
from remotetasks.core.settings_store import InMemorySettingsStore, SQLiteSettingsStore


class TestSettingsStoreFactory:
    """Test backend selection."""

    def test_memory_backend(self, monkeypatch):
        monkeypatch.setenv("SETTINGS_BACKEND", "memory")
        assert isinstance(config.get_settings_store(), InMemorySettingsStore)

    def test_sqlite_backend_uses_configured_path(self, monkeypatch, tmp_path):
        db_path = tmp_path / "data" / "settings.db"
        monkeypatch.setenv("SETTINGS_BACKEND", "sqlite")
        monkeypatch.setenv("SETTINGS_DB_PATH", str(db_path))

        store = config.get_settings_store()

        assert isinstance(store, SQLiteSettingsStore)
        assert db_path.exists()

    def test_unknown_backend_falls_back_to_sqlite(self, monkeypatch, tmp_path):
        monkeypatch.setenv("SETTINGS_BACKEND", "redis")
        monkeypatch.setenv("SETTINGS_DB_PATH", str(tmp_path / "settings.db"))
        assert isinstance(config.get_settings_store(), SQLiteSettingsStore)


class TestValidateConfig:
    """Test configuration validation."""

    def test_defaults_are_valid(self, monkeypatch):
        monkeypatch.setattr(config, "SETTINGS_BACKEND", "sqlite")
        monkeypatch.setattr(config, "FAVORITES_KEY", "locations")
        monkeypatch.setattr(config, "HOURLY_SLOTS", 8)
        monkeypatch.setattr(config, "DAILY_SLOTS", 5)
        monkeypatch.setattr(config, "LOG_LEVEL", "INFO")
        assert config.validate_config() == []

    def test_invalid_values_reported(self, monkeypatch):
        monkeypatch.setattr(config, "SETTINGS_BACKEND", "redis")
        monkeypatch.setattr(config, "FAVORITES_KEY", "  ")
        monkeypatch.setattr(config, "HOURLY_SLOTS", 0)
        monkeypatch.setattr(config, "DAILY_SLOTS", 0)
        monkeypatch.setattr(config, "LOG_LEVEL", "LOUD")

        issues = config.validate_config()

        assert "Invalid SETTINGS_BACKEND: redis" in issues
        assert "FAVORITES_KEY must not be empty" in issues
        assert "HOURLY_SLOTS must be >= 1" in issues
        assert "DAILY_SLOTS must be >= 1" in issues
        assert "Invalid LOG_LEVEL: LOUD" in issues


def test_debug_enabled_reads_environment(monkeypatch):
    monkeypatch.setenv("DEBUG", "TRUE")
    assert config.debug_enabled() == True
    monkeypatch.setenv("DEBUG", "no")
    assert config.debug_enabled() == False


def test_ensure_db_directory(tmp_path):
    target = tmp_path / "a" / "b" / "settings.db"
    config.ensure_db_directory(str(target))
    assert target.parent.is_dir()
