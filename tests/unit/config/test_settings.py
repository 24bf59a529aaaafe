"""Unit tests for settings loaders and PasswordPolicySettings."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import ClassVar

import pytest

from pw_commons.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
)
from pw_commons.security.hashing import HashAlgorithm
from pw_commons.security.settings import PasswordPolicySettings


@dataclasses.dataclass
class _ServiceSettings(Settings):
    _prefix: ClassVar[str] = "SVC"

    name: str
    workers: int = 1
    debug: bool = False
    hosts: list[str] = dataclasses.field(default_factory=list)


@dataclasses.dataclass
class _ExplodingSettings(Settings):
    def _validate(self) -> None:
        raise RuntimeError("boom")


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_and_coerces(self) -> None:
        environ = {"SVC_NAME": "auth", "SVC_WORKERS": "4", "SVC_DEBUG": "yes", "SVC_HOSTS": "a, b,,c"}
        settings = EnvSettingsLoader(environ).load(_ServiceSettings)
        assert settings == _ServiceSettings(name="auth", workers=4, debug=True, hosts=["a", "b", "c"])

    def test_defaults_when_absent(self) -> None:
        settings = EnvSettingsLoader({"SVC_NAME": "auth"}).load(_ServiceSettings)
        assert settings.workers == 1
        assert settings.debug is False
        assert settings.hosts == []

    def test_missing_required(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(_ServiceSettings)
        assert exc_info.value.setting_name == "SVC_NAME"

    @pytest.mark.parametrize(("key", "value"), [("SVC_WORKERS", "many"), ("SVC_DEBUG", "maybe")])
    def test_bad_values(self, key: str, value: str) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"SVC_NAME": "auth", key: value}).load(_ServiceSettings)
        assert exc_info.value.setting_name == key
        assert exc_info.value.code == "invalid_setting_value"

    def test_reads_process_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SVC_NAME", "from-env")
        assert EnvSettingsLoader().load(_ServiceSettings).name == "from-env"

    def test_unexpected_failure_is_wrapped(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            EnvSettingsLoader({}).load(_ExplodingSettings)
        assert exc_info.value.cause is not None


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_reads_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SVC_NAME", raising=False)
        env_file = tmp_path / ".env"
        env_file.write_text("SVC_NAME=dotenv\nSVC_WORKERS=3\n")
        settings = DotenvSettingsLoader(str(env_file)).load(_ServiceSettings)
        assert settings.name == "dotenv"
        assert settings.workers == 3

    def test_environment_wins_by_default(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SVC_NAME", "env")
        env_file = tmp_path / ".env"
        env_file.write_text("SVC_NAME=dotenv\n")
        assert DotenvSettingsLoader(str(env_file)).load(_ServiceSettings).name == "env"
        assert DotenvSettingsLoader(str(env_file), override=True).load(_ServiceSettings).name == "dotenv"


# ---------------------------------------------------------------------------
# PasswordPolicySettings
# ---------------------------------------------------------------------------


class TestPasswordPolicySettings:
    def test_defaults(self) -> None:
        settings = PasswordPolicySettings()
        assert (settings.minimum_size, settings.maximum_size) == (6, 20)
        assert (settings.min_iterations, settings.max_iterations) == (500, 1024)
        assert settings.algorithm is HashAlgorithm.SHA256

    def test_loads_from_pw_prefix(self) -> None:
        environ = {
            "PW_MINIMUM_SIZE": "10",
            "PW_MAXIMUM_SIZE": "14",
            "PW_ALLOW_REPEAT_CHARACTERS": "true",
            "PW_HASH_ALGORITHM": "sha-512",
        }
        settings = EnvSettingsLoader(environ).load(PasswordPolicySettings)
        assert settings.minimum_size == 10
        assert settings.maximum_size == 14
        assert settings.allow_repeat_characters is True
        assert settings.allow_consecutive_characters is False
        assert settings.algorithm is HashAlgorithm.SHA512

    @pytest.mark.parametrize(
        "overrides",
        [
            {"minimum_size": 1},
            {"minimum_size": 10, "maximum_size": 9},
            {"min_iterations": 0},
            {"min_iterations": 10, "max_iterations": 10},
            {"hash_algorithm": "whirlpool"},
        ],
    )
    def test_rejects_inconsistent_values(self, overrides: dict) -> None:
        with pytest.raises(InvalidSettingValueError):
            PasswordPolicySettings(**overrides)

    def test_loader_propagates_validation_error(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"PW_HASH_ALGORITHM": "crc32"}).load(PasswordPolicySettings)
        assert exc_info.value.setting_name == "hash_algorithm"
