from __future__ import annotations

from PySide6.QtCore import Property, QObject, Signal


class ViewerState(QObject):
    """State bound by the image view."""

    currentPathChanged = Signal(str)
    displayModeChanged = Signal(str)
    navigationEnabledChanged = Signal(bool)
    statusTextChanged = Signal(str)
    positionChanged = Signal()

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._current_path = ""
        self._display_mode = ""
        self._navigation_enabled = True
        self._status_text = ""
        self._position = 0
        self._total = 0

    # ---- read-only properties (mutate via backend) ----
    def _get_current_path(self) -> str:
        return str(self._current_path)

    currentPath = Property(str, _get_current_path, notify=currentPathChanged)  # type: ignore[arg-type]

    def _get_display_mode(self) -> str:
        return str(self._display_mode)

    displayMode = Property(str, _get_display_mode, notify=displayModeChanged)  # type: ignore[arg-type]

    def _get_navigation_enabled(self) -> bool:
        return bool(self._navigation_enabled)

    navigationEnabled = Property(bool, _get_navigation_enabled, notify=navigationEnabledChanged)  # type: ignore[arg-type]

    def _get_status_text(self) -> str:
        return str(self._status_text)

    statusText = Property(str, _get_status_text, notify=statusTextChanged)  # type: ignore[arg-type]

    def _get_position(self) -> int:
        return int(self._position)

    position = Property(int, _get_position, notify=positionChanged)  # type: ignore[arg-type]

    def _get_total(self) -> int:
        return int(self._total)

    total = Property(int, _get_total, notify=positionChanged)  # type: ignore[arg-type]

    # ---- internal mutation helpers (called by backend) ----
    def _set_current_path(self, path: str) -> None:
        p = str(path)
        if p == self._current_path:
            return
        self._current_path = p
        self.currentPathChanged.emit(p)

    def _set_display_mode(self, mode: str) -> None:
        m = str(mode)
        if m == self._display_mode:
            return
        self._display_mode = m
        self.displayModeChanged.emit(m)

    def _set_navigation_enabled(self, value: bool) -> None:
        v = bool(value)
        if v == self._navigation_enabled:
            return
        self._navigation_enabled = v
        self.navigationEnabledChanged.emit(v)

    def _set_status_text(self, text: str) -> None:
        t = str(text)
        if t == self._status_text:
            return
        self._status_text = t
        self.statusTextChanged.emit(t)

    def _set_position(self, position: int, total: int) -> None:
        pos, tot = int(position), int(total)
        if (pos, tot) == (self._position, self._total):
            return
        self._position = pos
        self._total = tot
        self.positionChanged.emit()
