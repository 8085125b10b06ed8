"""Tests for config module."""

import json
from pathlib import Path

import pytest

from alias_it import config
from alias_it.config import (
    DEFAULTS,
    default_shell,
    detection_enabled,
    init_config_if_missing,
    load_config,
    save_config,
)
from alias_it.shell_alias import ShellKind


@pytest.fixture(autouse=True)
def config_path(monkeypatch, tmp_path: Path) -> Path:
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path / ".config" / "alias-it" / "config.json"


class TestLoadConfig:
    def test_defaults_without_file(self):
        cfg = load_config()
        for key in DEFAULTS:
            assert key in cfg
        assert cfg["detect_shell"] is True
        assert cfg["default_shell"] == "zsh"

    def test_reads_value_entries_and_plain_values(self, config_path: Path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text(
            json.dumps({
                "_description": "ignored",
                "detect_shell": {"value": False, "description": "x"},
                "default_shell": "bash",
            }),
            encoding="utf-8",
        )
        cfg = load_config()
        assert cfg["detect_shell"] is False
        assert cfg["default_shell"] == "bash"
        assert "_description" not in cfg

    def test_broken_json_falls_back_to_defaults(self, config_path: Path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("{not json", encoding="utf-8")
        assert load_config()["detect_shell"] is True


class TestSaveConfig:
    def test_init_creates_once(self, config_path: Path):
        assert init_config_if_missing() is True
        assert config_path.exists()
        assert init_config_if_missing() is False

    def test_save_keeps_descriptions(self, config_path: Path):
        save_config({"detect_shell": False})
        data = json.loads(config_path.read_text(encoding="utf-8"))
        assert data["detect_shell"]["value"] is False
        assert data["default_shell"]["value"] == "zsh"
        assert data["default_shell"]["description"]
        assert load_config()["detect_shell"] is False


class TestDefaultShell:
    @pytest.mark.parametrize(
        "name, expected",
        [("zsh", ShellKind.ZSH), ("BASH", ShellKind.BASH), ("fish", ShellKind.ZSH), ("unknown", ShellKind.ZSH)],
    )
    def test_names(self, name, expected):
        assert default_shell({"default_shell": name}) is expected


class TestDetectionEnabled:
    @pytest.mark.parametrize("value", [True, False])
    def test_booleans(self, value):
        assert detection_enabled({"detect_shell": value}) is value

    @pytest.mark.parametrize("value", ["false", "no", 0, None])
    def test_non_boolean_keeps_detection_on(self, value):
        assert detection_enabled({"detect_shell": value}) is True


def test_paths_follow_home_at_call_time(monkeypatch, tmp_path: Path):
    other = tmp_path / "other-home"
    monkeypatch.setenv("HOME", str(other))
    assert config.config_path() == other / ".config" / "alias-it" / "config.json"


def test_unresolvable_home_gives_defaults(monkeypatch):
    def no_home():
        raise RuntimeError("Could not determine home directory.")

    monkeypatch.setattr(config, "config_path", no_home)
    assert load_config() == {k: v["value"] for k, v in DEFAULTS.items()}
