"""
Tests for persistent settings

Usage:
    pytest tests/test_settings.py
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from arrow_puzzle.settings import DEFAULT_SETTINGS, load_settings, save_settings


def test_missing_file_gives_defaults(tmp_path):
    settings = load_settings(tmp_path / "config.json")
    assert settings == DEFAULT_SETTINGS
    # callers get their own copy
    settings["max_workers"] = 99
    assert DEFAULT_SETTINGS["max_workers"] != 99


def test_roundtrip(tmp_path):
    path = tmp_path / "config.json"
    settings = dict(DEFAULT_SETTINGS, strategy_name="layered", debug_enabled=True)

    save_settings(settings, path)

    assert json.loads(path.read_text(encoding="utf-8"))["strategy_name"] == "layered"
    assert load_settings(path) == settings


def test_missing_keys_are_filled(tmp_path):
    path = tmp_path / "config.json"
    path.write_text('{"max_workers": 2}', encoding="utf-8")

    settings = load_settings(path)

    assert settings["max_workers"] == 2
    assert settings["strategy_name"] == DEFAULT_SETTINGS["strategy_name"]
    assert settings["debug_enabled"] is False


@pytest.mark.parametrize("content", [
    "{not json",
    "[1, 2, 3]",
    '"layered"',
    '{"max_workers": "2"}',
    '{"max_workers": true}',
    '{"debug_enabled": "yes"}',
    '{"strategy_name": null}',
])
def test_bad_file_gives_defaults(tmp_path, content):
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")

    assert load_settings(path) == DEFAULT_SETTINGS


def test_bad_values_do_not_spoil_good_ones(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text('{"max_workers": 2.5, "strategy_name": "layered", "colour": "red"}', encoding="utf-8")

    settings = load_settings(path)

    assert settings == dict(DEFAULT_SETTINGS, strategy_name="layered")
    assert "max_workers" in caplog.text


def test_save_failure_is_logged(tmp_path, caplog):
    """Unwritable locations are reported, not raised."""
    save_settings(DEFAULT_SETTINGS, tmp_path / "missing" / "config.json")
    assert "Failed to save settings" in caplog.text


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
