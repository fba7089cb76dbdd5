from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path

SETTINGS_ENV_VAR = "INTERPHASE_SETTINGS"

_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class InterphaseSettings:
    """
    Process-wide settings applied when the Qt application is created.

    Notes
    -----
    These settings only control defaults. Anything a host script sets on a
    widget directly wins over them.
    """

    application_name: str
    style: str | None  # Qt style key, e.g. "Fusion"; None keeps the platform default
    log_level: str  # "CRITICAL" | "ERROR" | "WARNING" | "INFO" | "DEBUG"

    @staticmethod
    def defaults() -> "InterphaseSettings":
        return InterphaseSettings(
            application_name="interphase",
            style=None,
            log_level="INFO",
        )


def _resolve_path(path: Path | None) -> Path | None:
    if path is not None:
        return path
    env_value = os.environ.get(SETTINGS_ENV_VAR, "").strip()
    return Path(env_value) if env_value else None


def load_settings(path: Path | None = None) -> InterphaseSettings:
    """
    Load settings from disk.

    Parameters
    ----------
    path:
        Settings file. If None, the path named by the `INTERPHASE_SETTINGS`
        environment variable is used; if that is unset too, defaults are returned.

    Returns
    -------
    InterphaseSettings
        Loaded settings, or defaults if missing/unreadable.
    """
    resolved = _resolve_path(path)
    if resolved is None:
        return InterphaseSettings.defaults()

    defaults = InterphaseSettings.defaults()
    try:
        payload = json.loads(resolved.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return defaults
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", resolved, exc)
        return defaults

    if not isinstance(payload, dict):
        return defaults

    application_name = payload.get("application_name", defaults.application_name)
    if not isinstance(application_name, str) or not application_name.strip():
        application_name = defaults.application_name

    style = payload.get("style")
    if not isinstance(style, str) or not style.strip():
        style = None

    log_level = str(payload.get("log_level", defaults.log_level)).upper()
    if log_level not in _LOG_LEVELS:
        log_level = defaults.log_level

    return InterphaseSettings(
        application_name=application_name,
        style=style,
        log_level=log_level,
    )


def save_settings(path: Path, settings: InterphaseSettings) -> None:
    """
    Save settings to disk.

    Parameters
    ----------
    path:
        Destination file. Parent directories are created as needed.
    settings:
        Settings to persist.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    payload = {
        "application_name": settings.application_name,
        "style": settings.style,
        "log_level": settings.log_level,
    }
    path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
