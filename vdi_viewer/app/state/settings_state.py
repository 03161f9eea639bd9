from __future__ import annotations

from PySide6.QtCore import Property, QObject, Signal


class SettingsState(QObject):
    """User/UX settings that QML binds to."""

    themePreferenceChanged = Signal(str)
    appliedThemeChanged = Signal(str)

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme_preference = "auto"
        self._applied_theme = "light"

    def _get_theme_preference(self) -> str:
        return str(self._theme_preference)

    themePreference = Property(str, _get_theme_preference, notify=themePreferenceChanged)  # type: ignore[arg-type]

    def _get_applied_theme(self) -> str:
        return str(self._applied_theme)

    appliedTheme = Property(str, _get_applied_theme, notify=appliedThemeChanged)  # type: ignore[arg-type]

    # ---- internal mutation helpers (called by backend) ----
    def _set_theme_preference(self, preference: str) -> None:
        p = str(preference).strip()
        if not p or p == self._theme_preference:
            return
        self._theme_preference = p
        self.themePreferenceChanged.emit(p)

    def _set_applied_theme(self, theme: str) -> None:
        t = str(theme).strip()
        if not t or t == self._applied_theme:
            return
        self._applied_theme = t
        self.appliedThemeChanged.emit(t)
