from __future__ import annotations

import json
from pathlib import Path

import pytest

from interphase.settings import SETTINGS_ENV_VAR, InterphaseSettings, load_settings, save_settings


def test_defaults_when_no_path_and_no_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(SETTINGS_ENV_VAR, raising=False)

    assert load_settings() == InterphaseSettings.defaults()


def test_missing_file_yields_defaults(tmp_path: Path) -> None:
    assert load_settings(tmp_path / "absent.json") == InterphaseSettings.defaults()


def test_unreadable_file_yields_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("not json\n", encoding="utf-8")

    assert load_settings(path) == InterphaseSettings.defaults()


def test_invalid_values_fall_back_individually(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"application_name": "", "style": "Fusion", "log_level": "chatty"}),
        encoding="utf-8",
    )

    settings = load_settings(path)

    assert settings.application_name == "interphase"
    assert settings.style == "Fusion"
    assert settings.log_level == "INFO"


def test_save_then_load_via_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "nested" / "settings.json"
    settings = InterphaseSettings(application_name="demo", style=None, log_level="DEBUG")
    save_settings(path, settings)
    monkeypatch.setenv(SETTINGS_ENV_VAR, str(path))

    assert load_settings() == settings
