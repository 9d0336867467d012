"""Tests for environment-driven settings."""

from pathlib import Path

import pytest

from deltaphon.config import load_settings
from deltaphon.types import ConfigurationError


def test_defaults():
    settings = load_settings({})
    assert settings.language == "EN DELTA"
    assert settings.transition_ms == 100.0
    assert settings.data_dir == Path("~/.local/share/deltaphon").expanduser()
    assert settings.cache_dir == Path("~/.cache/deltaphon").expanduser()


def test_env_overrides(tmp_path):
    settings = load_settings({
        "DELTAPHON_DATA_DIR": str(tmp_path / "data"),
        "DELTAPHON_CACHE_DIR": str(tmp_path / "cache"),
        "DELTAPHON_LANGUAGE": "en delta",
        "DELTAPHON_TRANSITION_MS": "80",
    })
    assert settings.data_dir == tmp_path / "data"
    assert settings.plugins_dir == tmp_path / "data" / "plugins"
    assert settings.cache_dir == tmp_path / "cache"
    assert settings.language == "en delta"
    assert settings.transition_ms == 80.0


def test_reads_process_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("DELTAPHON_DATA_DIR", str(tmp_path))
    assert load_settings().data_dir == tmp_path


@pytest.mark.parametrize("value", ["fast", "0", "-20"])
def test_bad_transition_ms(value):
    with pytest.raises(ConfigurationError):
        load_settings({"DELTAPHON_TRANSITION_MS": value})
