from pathlib import Path
import logging

import pytest
from pydantic import ValidationError

from mojitracker.config.constants import DEFAULT_LIST_KEYS_LIMIT, DEFAULT_PATH_COUNT
from mojitracker.config.logging_config import configure_logging
from mojitracker.config.settings import TrackerSettings, load_settings


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove MOJI_* variables so tests see only what they set"""
    for name in (
        "MOJI_PATH_COUNT",
        "MOJI_LIST_KEYS_LIMIT",
        "MOJI_MULTI_DEST",
        "MOJI_NO_VERIFY",
        "MOJI_LOG_LEVEL",
    ):
        # setenv first so teardown restores the original state even after
        # load_dotenv writes the variable
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestTrackerSettings:
    def test_defaults(self) -> None:
        settings = load_settings()

        assert settings == TrackerSettings()
        assert settings.default_path_count == DEFAULT_PATH_COUNT
        assert settings.list_keys_limit == DEFAULT_LIST_KEYS_LIMIT
        assert settings.multi_destination is True
        assert settings.no_verify is False

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MOJI_PATH_COUNT", "5")
        monkeypatch.setenv("MOJI_MULTI_DEST", "0")
        monkeypatch.setenv("MOJI_LOG_LEVEL", "debug")

        settings = load_settings()

        assert settings.default_path_count == 5
        assert settings.multi_destination is False
        assert settings.log_level == "debug"

    def test_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("MOJI_LIST_KEYS_LIMIT=25\nMOJI_NO_VERIFY=true\n")

        settings = load_settings(str(env_file))

        assert settings.list_keys_limit == 25
        assert settings.no_verify is True

    def test_missing_env_file_is_ignored(self, tmp_path: Path) -> None:
        assert load_settings(str(tmp_path / "absent.env")) == TrackerSettings()

    def test_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MOJI_PATH_COUNT", "0")

        with pytest.raises(ValidationError):
            load_settings()


class TestConfigureLogging:
    def test_sets_package_level(self) -> None:
        configure_logging("debug")

        assert logging.getLogger("mojitracker").level == logging.DEBUG
        configure_logging("WARNING")
        assert logging.getLogger("mojitracker").level == logging.WARNING
