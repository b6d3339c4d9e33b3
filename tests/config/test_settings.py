"""Tests for settings models and the settings loader."""

import pytest
from pydantic import ValidationError

from radixvault.config.loader import SettingsLoader, load_settings
from radixvault.config.models.app_settings import LoggingSettings
from radixvault.config.models.github_settings import GitHubSettings
from radixvault.config.models.settings import Settings
from radixvault.shared.constants import LibrarySelection
from radixvault.shared.errors import ApplicationError, ErrorCode


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Run in an empty directory with no RadixVault variables set."""
    monkeypatch.chdir(tmp_path)
    for name in (
        "RADIXVAULT_CACHE__TTL",
        "RADIXVAULT_GITHUB__TOKEN",
        "RADIXVAULT_LOGGING__LEVEL",
        "GITHUB_PERSONAL_ACCESS_TOKEN",
    ):
        # setenv first so values written by load_dotenv are undone too
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestSettingsModels:
    def test_defaults(self):
        settings = Settings()

        assert settings.cache.ttl == 24 * 60 * 60
        assert settings.cache.coalesce is False
        assert settings.github.retry_attempts == 2
        assert settings.github.token == ""
        assert settings.app.default_library is LibrarySelection.ALL

    def test_nested_environment_override(self, monkeypatch):
        monkeypatch.setenv("RADIXVAULT_CACHE__TTL", "60")

        assert Settings().cache.ttl == 60

    def test_log_level_is_normalized(self):
        assert LoggingSettings(level="debug").level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            LoggingSettings(level="verbose")

    def test_token_is_masked_in_repr(self):
        settings = GitHubSettings(token="ghp_secret")

        assert "ghp_secret" not in repr(settings)
        assert "****" in repr(settings)

    def test_toml_round_trip_leaves_token_out(self, tmp_path):
        # Given
        path = tmp_path / "config" / "radixvault.toml"
        settings = Settings(github=GitHubSettings(token="ghp_secret", retry_attempts=4))

        # When
        settings.to_toml_file(path)
        loaded = Settings.from_toml_file(path)

        # Then
        assert "ghp_secret" not in path.read_text(encoding="utf-8")
        assert loaded.github.retry_attempts == 4
        assert loaded.github.token == ""


class TestLoadSettings:
    def test_token_from_standard_variable(self, monkeypatch):
        monkeypatch.setenv("GITHUB_PERSONAL_ACCESS_TOKEN", "  ghp_env  ")

        assert load_settings().github.token == "ghp_env"

    def test_dotenv_file(self, tmp_path):
        (tmp_path / ".env").write_text("RADIXVAULT_CACHE__TTL=120\n", encoding="utf-8")

        assert load_settings().cache.ttl == 120

    def test_default_config_file(self, tmp_path):
        (tmp_path / "radixvault.toml").write_text("[cache]\nttl = 30\n", encoding="utf-8")

        assert load_settings().cache.ttl == 30

    def test_missing_config_file(self):
        with pytest.raises(ApplicationError) as exc_info:
            load_settings("does-not-exist.toml")

        assert exc_info.value.code == ErrorCode.CONFIG_ERROR

    def test_invalid_configuration(self, monkeypatch):
        monkeypatch.setenv("RADIXVAULT_LOGGING__LEVEL", "verbose")

        with pytest.raises(ApplicationError) as exc_info:
            load_settings()

        assert isinstance(exc_info.value.original_error, ValidationError)


class TestSettingsLoader:
    def test_instance_is_cached_until_reset(self):
        loader = SettingsLoader()

        first = loader.get_config()

        assert loader.get_config() is first
        loader.reset()
        assert loader.get_config() is not first

    def test_reload_picks_up_environment(self, monkeypatch):
        loader = SettingsLoader()
        loader.get_config()

        monkeypatch.setenv("RADIXVAULT_CACHE__TTL", "5")

        assert loader.reload_config().cache.ttl == 5
