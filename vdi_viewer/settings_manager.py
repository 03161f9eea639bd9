from __future__ import annotations

import json
import os
from typing import Any

from .logger import get_logger
from .models import ThemePreference
from .path_utils import abs_path_str, app_data_dir

_logger = get_logger("settings")


def default_settings_path() -> str:
    return abs_path_str(app_data_dir() / "settings.json")


class SettingsManager:
    def __init__(self, settings_path: str | None = None):
        self.settings_path = abs_path_str(settings_path) if settings_path else default_settings_path()
        self._settings: dict[str, Any] = {}
        self.load()

    DEFAULTS: dict[str, Any] = {
        "theme_preference": ThemePreference.AUTO.value,
        "folder_navigation_enabled": True,
    }

    def load(self) -> None:
        try:
            if os.path.exists(self.settings_path):
                with open(self.settings_path, encoding="utf-8") as f:
                    data = json.load(f)
                    if isinstance(data, dict):
                        self._settings = data
                        _logger.debug("settings loaded: %s", self.settings_path)
                        return
        except (OSError, ValueError) as e:
            _logger.warning("settings load failed: %s", e)
        self._settings = {}

    def save(self) -> None:
        try:
            os.makedirs(os.path.dirname(self.settings_path), exist_ok=True)
            with open(self.settings_path, "w", encoding="utf-8") as f:
                json.dump(self._settings, f, ensure_ascii=False, indent=2)
            _logger.debug("settings saved: %s", self.settings_path)
        except OSError as e:
            _logger.error("settings save failed: %s", e)

    def get(self, key: str, default: Any = None) -> Any:
        if key in self._settings:
            return self._settings[key]
        if default is not None:
            return default
        return self.DEFAULTS.get(key)

    def has(self, key: str) -> bool:
        return key in self._settings

    def set(self, key: str, value: Any) -> None:
        self._settings[key] = value
        self.save()

    @property
    def data(self) -> dict[str, Any]:
        return self._settings

    @property
    def theme_preference(self) -> ThemePreference:
        val = self.get("theme_preference")
        try:
            return ThemePreference(val)
        except ValueError:
            _logger.warning("saved theme_preference invalid: %s", val)
            return ThemePreference.AUTO

    @property
    def folder_navigation_enabled(self) -> bool:
        val = self.get("folder_navigation_enabled")
        if isinstance(val, bool):
            return val
        _logger.warning("saved folder_navigation_enabled invalid: %r", val)
        return bool(self.DEFAULTS["folder_navigation_enabled"])
