from __future__ import annotations

import contextlib
import os
from typing import Any

from PySide6.QtCore import Property, QDir, QObject, QUrl, Signal, Slot

from vdi_viewer.app.state.settings_state import SettingsState
from vdi_viewer.app.state.viewer_state import ViewerState
from vdi_viewer.appearance import AppearanceDetector, create_detector, next_theme_preference, resolve_theme
from vdi_viewer.image_engine.folder_index import list_folder_images
from vdi_viewer.image_engine.navigator import FolderNavigator
from vdi_viewer.logger import get_logger
from vdi_viewer.models import LaunchConfig, ThemePreference
from vdi_viewer.settings_manager import SettingsManager

_logger = get_logger("backend")


def _to_local_path(path_or_url: object) -> str:
    """QML hands over file:// URLs; convert those to OS-native paths.

    toLocalFile() always uses forward slashes, while folder listings join with
    the native separator.
    """
    p = str(path_or_url or "")
    if p.startswith("file:"):
        url = QUrl(p)
        if url.isLocalFile():
            p = QDir.toNativeSeparators(url.toLocalFile())
    return p


class ShellBackend(QObject):
    """Single backend object exposed to QML.

    QML → Python (queries): backend.launchConfig(), backend.listFolderImages(folder),
        backend.nextImage(path, enabled), backend.previousImage(path, enabled),
        backend.getAppearance()
    QML → Python (commands): backend.dispatch(cmd, payload)
    Python → QML: backend.event(dict)
    QML bindings: backend.viewer / backend.settings

    Query slots return None (QML null) for "nothing to do".
    """

    # QObject already has an .event() handler method, so we must not shadow it.
    event_ = Signal(object, name="event")

    def __init__(
        self,
        launch_config: LaunchConfig | None = None,
        navigator: FolderNavigator | None = None,
        detector: AppearanceDetector | None = None,
        settings: SettingsManager | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)

        self._launch_config = launch_config or LaunchConfig()
        self._navigator = navigator or FolderNavigator()
        self._detector = detector or create_detector()
        self._settings_mgr = settings or SettingsManager()

        self._viewer = ViewerState(self)
        self._settings = SettingsState(self)

        self._viewer._set_display_mode(self._launch_config.display_mode or "")
        self._viewer._set_navigation_enabled(self._settings_mgr.folder_navigation_enabled)
        self._settings._set_theme_preference(self._settings_mgr.theme_preference.value)
        self._apply_theme()
        self._show_path(self._launch_config.image_path or "")

    # ---- expose state objects to QML ----
    def _get_viewer(self) -> QObject:
        return self._viewer

    viewer = Property(QObject, _get_viewer, constant=True)  # type: ignore[arg-type]

    def _get_settings(self) -> QObject:
        return self._settings

    settings = Property(QObject, _get_settings, constant=True)  # type: ignore[arg-type]

    # ---- queries ----
    @Slot(result="QVariant")  # type: ignore[call-overload]
    def launchConfig(self) -> dict[str, Any]:
        return {
            "imagePath": self._launch_config.image_path,
            "displayMode": self._launch_config.display_mode,
        }

    @Slot(str, result="QVariant")  # type: ignore[call-overload]
    def listFolderImages(self, folder: str) -> list[str] | None:
        return list_folder_images(_to_local_path(folder))

    @Slot(str, bool, result="QVariant")  # type: ignore[call-overload]
    def nextImage(self, current_path: str, enabled: bool) -> str | None:
        return self._navigator.next(_to_local_path(current_path), bool(enabled))

    @Slot(str, bool, result="QVariant")  # type: ignore[call-overload]
    def previousImage(self, current_path: str, enabled: bool) -> str | None:
        return self._navigator.previous(_to_local_path(current_path), bool(enabled))

    @Slot(result=str)
    def getAppearance(self) -> str:
        return self._detector.current_appearance().value

    # ---- QML command entry ----
    # NOTE: The second argument must be a Qt-friendly variant type.
    @Slot(str, "QVariant")  # type: ignore[call-overload]
    def dispatch(self, cmd: str, payload: object | None = None) -> None:  # noqa: PLR0911
        command = str(cmd or "").strip()
        if not command:
            self.event_.emit({"type": "event", "name": "error", "level": "error", "message": "Empty cmd"})
            return

        if command == "log":
            self._handle_log_cmd(payload)
            return

        if command == "next":
            self._cmd_step(forward=True)
            return

        if command == "prev":
            self._cmd_step(forward=False)
            return

        if command == "openImage":
            self._cmd_open_image(payload)
            return

        if command == "setNavigationEnabled":
            value = _get_payload_value(payload, "value", default=payload)
            self._cmd_set_navigation_enabled(True if value is None else bool(value))
            return

        if command == "setThemePreference":
            self._cmd_set_theme_preference(_get_payload_value(payload, "value", default=payload))
            return

        if command == "toggleTheme":
            pref = ThemePreference(self._settings._get_theme_preference())
            self._cmd_set_theme_preference(next_theme_preference(pref).value)
            return

        if command == "refreshAppearance":
            self._apply_theme()
            return

        self.event_.emit(
            {
                "type": "event",
                "name": "error",
                "level": "warning",
                "message": f"Unknown cmd: {command}",
            }
        )

    # ---- cmd handlers ----
    def _handle_log_cmd(self, payload: object | None) -> None:
        level = str(_get_payload_value(payload, "level", default="debug")).lower()
        msg = str(_get_payload_value(payload, "message", default=""))
        if not msg:
            return

        # integrate into Python logging pipeline
        if level == "info":
            _logger.info("[QML] %s", msg)
        elif level in {"warn", "warning"}:
            _logger.warning("[QML] %s", msg)
        elif level == "error":
            _logger.error("[QML] %s", msg)
        else:
            _logger.debug("[QML] %s", msg)

    def _cmd_step(self, *, forward: bool) -> None:
        current = self._viewer._get_current_path()
        if not current:
            return
        enabled = self._viewer._get_navigation_enabled()
        if forward:
            target = self._navigator.next(current, enabled)
        else:
            target = self._navigator.previous(current, enabled)
        if target is None:
            _logger.debug("no %s image for %s", "next" if forward else "previous", current)
            return
        self._show_path(target)
        self.event_.emit({"type": "event", "name": "imageChanged", "path": target})

    def _cmd_open_image(self, payload: object | None) -> None:
        p = _to_local_path(_get_payload_value(payload, "path", default=payload))
        if not p or not os.path.isfile(p):
            self.event_.emit({"type": "event", "name": "toast", "level": "error", "message": "Invalid image"})
            return
        self._show_path(p)
        self.event_.emit({"type": "event", "name": "imageChanged", "path": p})

    def _cmd_set_navigation_enabled(self, enabled: bool) -> None:
        self._viewer._set_navigation_enabled(enabled)
        self._settings_mgr.set("folder_navigation_enabled", enabled)
        self._update_status()

    def _cmd_set_theme_preference(self, value: object) -> None:
        try:
            pref = ThemePreference(str(value))
        except ValueError:
            self.event_.emit(
                {"type": "event", "name": "error", "level": "warning", "message": f"Unknown theme: {value}"}
            )
            return
        self._settings._set_theme_preference(pref.value)
        self._settings_mgr.set("theme_preference", pref.value)
        self._apply_theme()

    # ---- state helpers ----
    def _apply_theme(self) -> None:
        applied = resolve_theme(self._settings._get_theme_preference(), self._detector)
        self._settings._set_applied_theme(applied.value)

    def _show_path(self, path: str) -> None:
        self._viewer._set_current_path(path)
        self._update_status()

    def _update_status(self) -> None:
        path = self._viewer._get_current_path()
        if not path:
            self._viewer._set_position(0, 0)
            self._viewer._set_status_text("No image to display.")
            return

        pos = self._navigator.position(path) if self._viewer._get_navigation_enabled() else None
        if pos is None:
            self._viewer._set_position(0, 0)
            self._viewer._set_status_text(f"Showing: {path}")
            return
        self._viewer._set_position(*pos)
        self._viewer._set_status_text(f"Showing: {path} ({pos[0]} / {pos[1]})")


def _get_payload_value(payload: object | None, key: str, *, default: Any) -> Any:
    """Extract a value from a QML payload.

    Supports:
    - dict-like payloads (Python dict)
    - None
    - otherwise returns default
    """

    if payload is None:
        return default

    # QML often passes a JS object which arrives as QJSValue/QVariant.
    # Convert to a Python mapping when possible.
    if payload.__class__.__name__ == "QJSValue" and hasattr(payload, "toVariant"):
        with contextlib.suppress(Exception):
            payload = payload.toVariant()  # type: ignore[assignment, attr-defined]

    if isinstance(payload, dict):
        return payload.get(key, default)

    return default
