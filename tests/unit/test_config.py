"""Unit tests for settings loading."""

from pathlib import Path

import dotenv
import pytest

from dcp_importer.config import Settings
from dcp_importer.domain.exceptions import ConfigurationError

REQUIRED = {"MONGO_URI": "mongodb://localhost:27017", "MONGO_DB": "dcp"}


def test_defaults_when_only_required_values_set():
    settings = Settings.from_env(REQUIRED, load_env_file=False)

    assert settings.mongo_uri == "mongodb://localhost:27017"
    assert settings.mongo_db == "dcp"
    assert settings.mbox_path == Path("DCP.mbox")
    assert settings.mongo_collection == "problem_descriptions"
    assert settings.mongo_timeout_ms == 5000
    assert settings.log_level == "INFO"


def test_optional_values_are_read():
    env = {
        **REQUIRED,
        "MBOX_PATH": "/data/archive.mbox",
        "MONGO_COLLECTION": "problems",
        "MONGO_TIMEOUT_MS": "250",
        "LOG_LEVEL": "debug",
    }

    settings = Settings.from_env(env, load_env_file=False)

    assert settings.mbox_path == Path("/data/archive.mbox")
    assert settings.mongo_collection == "problems"
    assert settings.mongo_timeout_ms == 250
    assert settings.log_level == "DEBUG"


@pytest.mark.parametrize("missing", ["MONGO_URI", "MONGO_DB"])
def test_missing_required_value_is_fatal(missing):
    env = {key: value for key, value in REQUIRED.items() if key != missing}

    with pytest.raises(ConfigurationError, match=missing):
        Settings.from_env(env, load_env_file=False)


def test_blank_required_value_is_fatal():
    with pytest.raises(ConfigurationError, match="MONGO_DB"):
        Settings.from_env({**REQUIRED, "MONGO_DB": "  "}, load_env_file=False)


@pytest.mark.parametrize("timeout", ["soon", "0", "-5"])
def test_invalid_timeout_is_fatal(timeout):
    with pytest.raises(ConfigurationError, match="MONGO_TIMEOUT_MS"):
        Settings.from_env({**REQUIRED, "MONGO_TIMEOUT_MS": timeout}, load_env_file=False)


def test_unknown_log_level_is_fatal():
    with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
        Settings.from_env({**REQUIRED, "LOG_LEVEL": "chatty"}, load_env_file=False)


def test_reads_process_environment_and_env_file(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("MONGO_DB=from_file\n")
    monkeypatch.setenv("MONGO_URI", "mongodb://db:27017")
    # setenv first so the value written by load_dotenv is removed on teardown
    monkeypatch.setenv("MONGO_DB", "placeholder")
    monkeypatch.delenv("MONGO_DB")
    monkeypatch.setattr("dcp_importer.config.load_dotenv", lambda: dotenv.load_dotenv(env_file))

    settings = Settings.from_env()

    assert settings.mongo_uri == "mongodb://db:27017"
    assert settings.mongo_db == "from_file"
