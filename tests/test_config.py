from __future__ import annotations

import os
from pathlib import Path

import pytest

from lib_syslog_async import config
from lib_syslog_async.domain import Facility, Option, Severity, log_upto
from tests.os_markers import OS_AGNOSTIC

pytestmark = [OS_AGNOSTIC]


def test_load_settings_uses_arguments_without_environment() -> None:
    settings = config.load_settings(ident="svc", options=Option.PID, facility=Facility.DAEMON, environ={})

    assert settings == config.SessionSettings(ident="svc", options=Option.PID, facility=Facility.DAEMON, log_mask=None)


def test_load_settings_environment_wins_over_arguments() -> None:
    environ = {
        config.ENV_IDENT: "env-ident",
        config.ENV_OPTIONS: "pid, ndelay",
        config.ENV_FACILITY: "log_local5",
        config.ENV_MASK_UPTO: "warning",
    }

    settings = config.load_settings(ident="ignored", options=0, facility=Facility.USER, environ=environ)

    assert settings.ident == "env-ident"
    assert settings.options == Option.PID | Option.NDELAY
    assert settings.facility is Facility.LOCAL5
    assert settings.log_mask == log_upto(Severity.WARNING)


def test_load_settings_defaults_ident_to_program_name(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr("sys.argv", ["/usr/local/bin/worker"])

    assert config.load_settings(environ={}).ident == "worker"


def test_load_settings_reads_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(config.ENV_IDENT, "from-os")
    monkeypatch.delenv(config.ENV_FACILITY, raising=False)

    assert config.load_settings(ident="arg").ident == "from-os"


@pytest.mark.parametrize(
    "key, value, match",
    [
        (config.ENV_FACILITY, "LOCAL9", "Unknown syslog facility"),
        (config.ENV_OPTIONS, "PID,TURBO", "Unknown syslog option"),
        (config.ENV_MASK_UPTO, "chatty", "Unknown syslog severity"),
    ],
)
def test_load_settings_rejects_invalid_environment(key: str, value: str, match: str) -> None:
    with pytest.raises(ValueError, match=match):
        config.load_settings(ident="svc", environ={key: value})


def test_load_settings_rejects_blank_ident() -> None:
    with pytest.raises(ValueError, match=config.ENV_IDENT):
        config.load_settings(environ={config.ENV_IDENT: "  "})


def test_should_use_dotenv_precedence() -> None:
    assert config.should_use_dotenv(explicit=True, env_value=None) is True
    assert config.should_use_dotenv(explicit=False, env_value="1") is False
    assert config.should_use_dotenv(env_value="on") is True
    assert config.should_use_dotenv(env_value="0") is False
    assert config.should_use_dotenv() is False


def test_enable_dotenv_populates_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    nested = tmp_path / "nested"
    nested.mkdir()
    env_file = tmp_path / ".env"
    env_file.write_text("SYSLOG_IDENT=dotenv-ident\n")
    monkeypatch.chdir(nested)
    monkeypatch.delenv(config.ENV_IDENT, raising=False)

    loaded = config.enable_dotenv()

    assert loaded == env_file.resolve()
    assert os.environ[config.ENV_IDENT] == "dotenv-ident"
    assert config.load_settings().ident == "dotenv-ident"

    os.environ.pop(config.ENV_IDENT, None)


def test_enable_dotenv_respects_existing_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    env_file = tmp_path / "custom.env"
    env_file.write_text("SYSLOG_IDENT=dotenv-ident\n")
    monkeypatch.setenv(config.ENV_IDENT, "real-ident")

    assert config.enable_dotenv(env_file) == env_file.resolve()
    assert os.environ[config.ENV_IDENT] == "real-ident"


def test_enable_dotenv_missing_file_returns_none(tmp_path: Path) -> None:
    assert config.enable_dotenv(tmp_path / "absent.env") is None
