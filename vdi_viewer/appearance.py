"""Host light/dark appearance detection.

One detector per host family, picked once at startup. Detectors query the OS
through a `CommandRunner` so tests can substitute canned output for the real
utilities. Every failure resolves to the light appearance.
"""

from __future__ import annotations

import subprocess
import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Protocol

from .logger import get_logger
from .models import AppearanceMode, ThemePreference

_logger = get_logger("appearance")

WINDOWS = "windows"
MACOS = "macos"
LINUX = "linux"
UNSUPPORTED = "unsupported"

_PERSONALIZE_KEY = r"HKCU\Software\Microsoft\Windows\CurrentVersion\Themes\Personalize"
_LIGHT_THEME_VALUE = "AppsUseLightTheme"


class AppearanceQueryError(Exception):
    """The OS preference query could not be run or exited with an error."""


class CommandRunner(Protocol):
    def run(self, command: str, args: Sequence[str]) -> str: ...


class SubprocessRunner:
    """Runs a short-lived OS utility and returns its stdout."""

    def run(self, command: str, args: Sequence[str]) -> str:
        try:
            completed = subprocess.run(
                [command, *args],
                check=True,
                capture_output=True,
                text=True,
            )
        except (OSError, ValueError, subprocess.CalledProcessError) as exc:
            raise AppearanceQueryError(f"{command} failed: {exc}") from exc
        return completed.stdout


class AppearanceDetector(ABC):
    """Point-in-time query of the host appearance preference."""

    @abstractmethod
    def current_appearance(self) -> AppearanceMode:
        """Return the current appearance; LIGHT when it cannot be determined."""


class _CommandAppearance(AppearanceDetector):
    command: str = ""
    args: tuple[str, ...] = ()

    def __init__(self, runner: CommandRunner | None = None) -> None:
        self._runner = runner or SubprocessRunner()

    def current_appearance(self) -> AppearanceMode:
        try:
            output = self._runner.run(self.command, self.args)
        except AppearanceQueryError as exc:
            _logger.debug("%s: query unavailable, using light: %s", type(self).__name__, exc)
            return AppearanceMode.LIGHT
        return self._parse(output)

    @abstractmethod
    def _parse(self, output: str) -> AppearanceMode:
        pass


class WindowsAppearance(_CommandAppearance):
    """Reads the AppsUseLightTheme DWORD: 0 is dark, 1 is light."""

    command = "reg"
    args = ("query", _PERSONALIZE_KEY, "/v", _LIGHT_THEME_VALUE)

    def _parse(self, output: str) -> AppearanceMode:
        for line in output.splitlines():
            parts = line.split()
            if len(parts) < 3 or parts[0] != _LIGHT_THEME_VALUE:  # noqa: PLR2004
                continue
            try:
                value = int(parts[-1], 0)
            except ValueError:
                break
            if value == 0:
                return AppearanceMode.DARK
            break
        return AppearanceMode.LIGHT


class MacAppearance(_CommandAppearance):
    """AppleInterfaceStyle is "Dark" in dark mode and unset in light mode."""

    command = "defaults"
    args = ("read", "-g", "AppleInterfaceStyle")

    def _parse(self, output: str) -> AppearanceMode:
        return AppearanceMode.DARK if output.strip() == "Dark" else AppearanceMode.LIGHT


class LinuxAppearance(_CommandAppearance):
    """GTK theme name, e.g. 'Adwaita-dark'."""

    command = "gsettings"
    args = ("get", "org.gnome.desktop.interface", "gtk-theme")

    def _parse(self, output: str) -> AppearanceMode:
        return AppearanceMode.DARK if "dark" in output.lower() else AppearanceMode.LIGHT


class FixedAppearance(AppearanceDetector):
    """Hosts with no known preference store."""

    def __init__(self, mode: AppearanceMode = AppearanceMode.LIGHT) -> None:
        self._mode = mode

    def current_appearance(self) -> AppearanceMode:
        return self._mode


def host_family(platform: str | None = None) -> str:
    plat = sys.platform if platform is None else platform
    if plat.startswith("win"):
        return WINDOWS
    if plat == "darwin":
        return MACOS
    if plat.startswith("linux"):
        return LINUX
    return UNSUPPORTED


def create_detector(family: str | None = None, runner: CommandRunner | None = None) -> AppearanceDetector:
    fam = host_family() if family is None else family
    if fam == WINDOWS:
        return WindowsAppearance(runner)
    if fam == MACOS:
        return MacAppearance(runner)
    if fam == LINUX:
        return LinuxAppearance(runner)
    _logger.debug("no appearance query for host family %r", fam)
    return FixedAppearance()


def get_appearance(detector: AppearanceDetector | None = None) -> str:
    """Return "light" or "dark" for the current host."""
    det = detector or create_detector()
    return det.current_appearance().value


def resolve_theme(preference: ThemePreference | str, detector: AppearanceDetector) -> AppearanceMode:
    """Theme to apply for a user preference; AUTO asks the host."""
    try:
        pref = ThemePreference(preference)
    except ValueError:
        _logger.warning("unknown theme preference %r, following the OS", preference)
        pref = ThemePreference.AUTO
    if pref is ThemePreference.AUTO:
        return detector.current_appearance()
    return AppearanceMode(pref.value)


def next_theme_preference(preference: ThemePreference) -> ThemePreference:
    # auto -> light -> dark -> light
    if preference is ThemePreference.LIGHT:
        return ThemePreference.DARK
    return ThemePreference.LIGHT
