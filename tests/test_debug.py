"""Tests for debug settings loading."""

import pytest

from protoheight.debug import DebugSettings, _from_environment, load_debug_settings


def test_defaults():
    settings = DebugSettings()
    assert settings.paint_overflow_indicators
    assert settings.log_overflow


def test_load_from_yaml(tmp_path):
    path = tmp_path / "debug.yaml"
    path.write_text("paint_overflow_indicators: false\nstripe_width: 3\n")

    settings = load_debug_settings(path)

    assert not settings.paint_overflow_indicators
    assert settings.stripe_width == 3
    assert settings.log_overflow


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "debug.yaml"
    path.write_text("")
    assert load_debug_settings(path) == DebugSettings()


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "debug.yaml"
    path.write_text("paint_everything: true\n")
    with pytest.raises(ValueError, match="Unknown debug settings"):
        load_debug_settings(path)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_debug_settings(tmp_path / "missing.yaml")


@pytest.mark.parametrize("kwargs", [{"stripe_width": 0}, {"indicator_fraction": 0.0}, {"indicator_fraction": 2.0}])
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        DebugSettings(**kwargs)


@pytest.mark.parametrize("value,expected", [("0", False), ("off", False), ("1", True), ("yes", True)])
def test_environment_override(monkeypatch, value, expected):
    monkeypatch.setenv("PROTOHEIGHT_DEBUG_OVERFLOW", value)
    assert _from_environment().paint_overflow_indicators is expected


def test_update_copies_fields():
    target = DebugSettings()
    target.update(DebugSettings(log_overflow=False, stripe_width=9))
    assert not target.log_overflow
    assert target.stripe_width == 9
