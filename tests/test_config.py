"""Environment-backed configuration and logging setup."""
import logging
import sys
from pathlib import Path

import pytest

from contactor.core.logging import configure_logging
from contactor.core.utils import default_source_path, get_config_value, load_env_file, parse_env_line


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Unset keys in a way monkeypatch restores, even when a test sets them directly."""

    def _clean(*keys: str) -> None:
        for key in keys:
            monkeypatch.setenv(key, "placeholder")
            monkeypatch.delenv(key)

    return _clean


def test_load_env_file_sets_missing_values_only(tmp_path: Path, monkeypatch, clean_env):
    clean_env("CONTACTOR_TEST_NEW")
    monkeypatch.setenv("CONTACTOR_TEST_EXISTING", "kept")
    env_file = tmp_path / "settings.env"
    env_file.write_text(
        "# comment\n"
        "CONTACTOR_TEST_NEW='from file'\n"
        "CONTACTOR_TEST_EXISTING=overwritten\n"
        "not a setting\n",
        encoding="utf-8",
    )

    applied = load_env_file(env_file)

    assert applied == {"CONTACTOR_TEST_NEW": "from file"}
    assert get_config_value("CONTACTOR_TEST_NEW") == "from file"
    assert get_config_value("CONTACTOR_TEST_EXISTING") == "kept"


def test_load_env_file_ignores_missing_file(tmp_path: Path):
    assert load_env_file(tmp_path / "absent.env") == {}


@pytest.mark.parametrize(
    "line, expected",
    [
        ("export CONTACTOR_SOURCE=\"exports/all.json\"", ("CONTACTOR_SOURCE", "exports/all.json")),
        ("  LOG_LEVEL = debug  ", ("LOG_LEVEL", "debug")),
        ("# LOG_LEVEL=debug", None),
        ("=orphan", None),
        ("", None),
    ],
)
def test_parse_env_line(line, expected):
    assert parse_env_line(line) == expected


def test_get_config_value_falls_back_to_default(clean_env):
    clean_env("CONTACTOR_TEST_UNSET")

    assert get_config_value("CONTACTOR_TEST_UNSET", "fallback") == "fallback"


def test_default_source_path(monkeypatch, tmp_path: Path, clean_env):
    clean_env("CONTACTOR_SOURCE")
    assert default_source_path() == Path("contacts.json")

    env_file = tmp_path / "custom.env"
    env_file.write_text("CONTACTOR_SOURCE=exports/all.json\n", encoding="utf-8")
    monkeypatch.setenv("CONTACTOR_ENV_FILE", str(env_file))

    assert default_source_path() == Path("exports/all.json")


def test_configure_logging_reads_level_from_environment(monkeypatch):
    captured = {}
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    configure_logging()

    assert captured["level"] == "DEBUG"
    assert "%(name)s" in captured["format"]


def test_configure_logging_prefers_explicit_level(monkeypatch):
    captured = {}
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    configure_logging("warning")

    assert captured["level"] == "WARNING"


def test_configure_logging_writes_to_stderr(monkeypatch):
    captured = {}
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    configure_logging()

    assert captured["stream"] is sys.stderr
    assert captured["level"] == "INFO"


def test_configure_logging_accepts_a_custom_stream(monkeypatch, tmp_path: Path):
    captured = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: captured.update(kwargs))

    with (tmp_path / "contactor.log").open("w", encoding="utf-8") as handle:
        configure_logging("error", stream=handle)

    assert captured["stream"] is handle
    assert captured["level"] == "ERROR"
