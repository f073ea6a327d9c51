"""Tests for the tilegrid.config module."""

from unittest.mock import patch, MagicMock

from tilegrid import config


class TestGet:
    """Tests for the get function."""

    @patch.object(config, "settings")
    def test_falls_back_to_defaults(self, mock_settings):
        """get should return the package default for unset keys."""
        mock_settings.get = MagicMock(side_effect=lambda key, default=None: default)

        assert config.get("default_zoom") == 14
        assert config.get("log_level") == "WARNING"

    @patch.object(config, "settings")
    def test_prefers_configured_value(self, mock_settings):
        """get should return the configured value when present."""
        mock_settings.get = MagicMock(return_value=9)

        assert config.get("default_zoom") == 9

    @patch.object(config, "settings")
    def test_unknown_key(self, mock_settings):
        """get should return None for keys without a default."""
        mock_settings.get = MagicMock(side_effect=lambda key, default=None: default)

        assert config.get("no_such_key") is None


class TestChangeEnv:
    """Tests for the change_env function."""

    @patch.object(config, "settings")
    def test_switches_and_reloads(self, mock_settings):
        """change_env should switch the environment and reload."""
        config.change_env("production")

        mock_settings.setenv.assert_called_once_with("production")
        mock_settings.reload.assert_called_once()


class TestSettingsFiles:
    """Tests for the settings file search path."""

    def test_search_order(self):
        """Global, user and current directory files should be searched in order."""
        assert config.settings_files[:3] == [
            config.GLOB_DIR / "settings.toml",
            config.USER_DIR / "settings.toml",
            config.CURR_DIR / "settings.toml",
        ]
