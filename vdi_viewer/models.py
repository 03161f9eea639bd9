"""Value types shared by the launch resolver, the folder index and the appearance detector.

Keep this module free of Qt dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

# Matched against the case-folded file suffix.
IMAGE_EXTENSIONS: frozenset[str] = frozenset(
    {
        ".jpg",
        ".jpeg",
        ".png",
        ".gif",
        ".bmp",
        ".webp",
        ".tiff",
        ".tif",
    }
)


@dataclass(frozen=True)
class LaunchConfig:
    """What the process was started with: an image to show and how to size the window."""

    image_path: str | None = None
    display_mode: str | None = None


@dataclass(frozen=True)
class ImageEntry:
    """One qualifying file seen during a folder scan, before sorting."""

    path: str
    created_at: float


@dataclass(frozen=True)
class NavigationRequest:
    current_path: str
    enabled: bool


@dataclass(frozen=True)
class DisplayDirective:
    """Parsed display mode: "fullscreen", "maximized" or an explicit "size"."""

    kind: str
    width: int | None = None
    height: int | None = None


class AppearanceMode(str, Enum):
    LIGHT = "light"
    DARK = "dark"


class ThemePreference(str, Enum):
    """User choice; AUTO follows the OS appearance."""

    AUTO = "auto"
    LIGHT = "light"
    DARK = "dark"
