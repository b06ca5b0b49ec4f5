"""Tests for environment lookups and logging setup."""

from orbiter.utils import OrbiterEnvKey, ProcessEnv, StaticEnv
from orbiter.utils.logger import configure_logging, resolve_level


def test_process_env_checks_presence_only(monkeypatch) -> None:
    env = ProcessEnv()
    monkeypatch.delenv("ORBITER_CONFIG_HOME", raising=False)
    assert not env.is_set(OrbiterEnvKey.CONFIG_HOME)
    monkeypatch.setenv("ORBITER_CONFIG_HOME", "")
    assert env.is_set(OrbiterEnvKey.CONFIG_HOME)
    assert env.get("ORBITER_CONFIG_HOME") == ""


def test_static_env_accepts_enum_and_string_keys() -> None:
    env = StaticEnv({OrbiterEnvKey.LOG: "debug"})
    assert env.is_set("ORBITER_LOG")
    assert env.get(OrbiterEnvKey.LOG) == "debug"
    assert not env.is_set(OrbiterEnvKey.CONFIG_HOME)


def test_resolve_level_precedence() -> None:
    assert resolve_level("debug", StaticEnv({"ORBITER_LOG": "info"})) == "DEBUG"
    assert resolve_level(None, StaticEnv({"ORBITER_LOG": "info"})) == "INFO"
    assert resolve_level(None, StaticEnv()) == "WARNING"


def test_configure_logging_returns_level() -> None:
    assert configure_logging("error") == "ERROR"
