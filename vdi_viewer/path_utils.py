"""Path normalization utilities.

- Use absolute paths when persisting preferences.
- Keep user-supplied image paths untouched where they are compared by exact
  string match (folder navigation).

Keep this module free of Qt dependencies.
"""

from __future__ import annotations

import os
from pathlib import Path

_DRIVE_PREFIX_LEN = 2


def _normalize_drive_letter(path_str: str) -> str:
    # Normalize drive letter casing on Windows ("c:\\" -> "C:\\").
    if len(path_str) >= _DRIVE_PREFIX_LEN and path_str[1] == ":":
        return path_str[0].upper() + path_str[1:]
    return path_str


def abs_path(path: str | Path) -> Path:
    """Return an absolute path without requiring that it exists."""
    p = Path(path).expanduser()
    try:
        # strict=False avoids exceptions for non-existent paths.
        return p.resolve(strict=False)
    except OSError:
        return p.absolute()


def abs_path_str(path: str | Path) -> str:
    """Absolute, OS-native path string (Windows uses backslashes)."""
    return _normalize_drive_letter(str(abs_path(path)))


def parent_dir(path: str) -> str:
    """Parent directory of `path`, spelled the way the caller spelled `path`."""
    return os.path.dirname(path)


def app_data_dir() -> Path:
    """Per-user directory for the settings file."""
    app_data = os.getenv("APPDATA")
    if app_data:
        return Path(app_data) / "vdi_viewer"
    return Path.home() / ".vdi_viewer"
