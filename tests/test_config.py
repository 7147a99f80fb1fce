"""Tests for configuration loading."""

from pathlib import Path

import pytest

from floatchat.core.config import AppConfig

ENV_VARS = ["FLOATCHAT_TITLE", "FLOATCHAT_REPLY_DELAY", "FLOATCHAT_LOG_LEVEL", "FLOATCHAT_LOG_FILE"]


@pytest.fixture
def clean_env(monkeypatch):
    # setenv first so monkeypatch restores "unset" afterwards, even if a .env sets them.
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


def test_config_defaults(clean_env) -> None:
    config = AppConfig.from_env()
    assert config.title == "ChatGPT"
    assert config.reply_delay == 1.0
    assert config.log_level == "WARNING"
    assert config.log_file is None


def test_config_overrides(clean_env) -> None:
    clean_env.setenv("FLOATCHAT_TITLE", "Helper")
    clean_env.setenv("FLOATCHAT_REPLY_DELAY", "0.25")
    clean_env.setenv("FLOATCHAT_LOG_LEVEL", "debug")
    clean_env.setenv("FLOATCHAT_LOG_FILE", "/tmp/floatchat.log")

    config = AppConfig.from_env()
    assert config.title == "Helper"
    assert config.reply_delay == 0.25
    assert config.log_level == "DEBUG"
    assert config.log_file == Path("/tmp/floatchat.log")


@pytest.mark.parametrize("raw", ["soon", "-1", "   "])
def test_invalid_delay_falls_back(clean_env, raw) -> None:
    clean_env.setenv("FLOATCHAT_REPLY_DELAY", raw)
    assert AppConfig.from_env().reply_delay == 1.0


def test_config_reads_dotenv_file(clean_env, tmp_path) -> None:
    dotenv = tmp_path / ".env"
    dotenv.write_text("FLOATCHAT_TITLE=From File\nFLOATCHAT_REPLY_DELAY=3\n", encoding="utf-8")
    config = AppConfig.from_env(dotenv)
    assert config.title == "From File"
    assert config.reply_delay == 3.0


def test_missing_dotenv_file_is_ignored(clean_env, tmp_path) -> None:
    assert AppConfig.from_env(tmp_path / "absent.env").title == "ChatGPT"
