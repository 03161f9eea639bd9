"""Produce the chronologically ordered list of image files in a folder.

The listing is single-level and rebuilt on every call. Absence (`None`) covers
every "nothing to navigate" outcome: a missing directory, an unreadable one and
a directory without qualifying files. An empty list is never returned.
"""

from __future__ import annotations

import os
import time
from collections.abc import Callable

from vdi_viewer.logger import get_logger
from vdi_viewer.models import IMAGE_EXTENSIONS, ImageEntry

_logger = get_logger("folder_index")

TimestampReader = Callable[[str], float]


def is_image_file(name: str) -> bool:
    return os.path.splitext(name)[1].lower() in IMAGE_EXTENSIONS


def read_created_at(path: str) -> float:
    """Creation time of `path` in seconds since the epoch.

    Uses `st_birthtime` where the platform reports it (Windows, macOS, BSD).
    Filesystems without a birth time expose only modification and change
    times; `st_mtime` is used there since `st_ctime` moves on every metadata
    update. Raises OSError when the file cannot be stat'ed.
    """
    st = os.stat(path)
    birth = getattr(st, "st_birthtime", None)
    if birth is not None:
        return float(birth)
    return float(st.st_mtime)


def list_folder_images(
    folder_path: str,
    *,
    timestamp: TimestampReader = read_created_at,
) -> list[str] | None:
    """Return image paths in `folder_path`, oldest first, or None if there are none.

    Returned paths are `os.path.join(folder_path, name)` so a caller can match
    them against a path built from the same folder string. Ties on the
    creation time keep the order in which the directory was enumerated.

    Where the filesystem reports no birth time (most Linux setups) the
    modification time is used instead, so an edited file moves to the end.
    """
    t_start = time.perf_counter()
    # An empty folder string means "relative to the working directory".
    scan_dir = folder_path or os.curdir
    if not os.path.isdir(scan_dir):
        _logger.debug("list_folder_images: not a directory: %s", folder_path)
        return None

    entries: list[ImageEntry] = []
    try:
        with os.scandir(scan_dir) as it:
            for child in it:
                if not is_image_file(child.name):
                    continue
                try:
                    if not child.is_file():
                        continue
                except OSError:
                    continue
                path = os.path.join(folder_path, child.name)
                try:
                    created_at = timestamp(path)
                except OSError as exc:
                    _logger.debug("skipping %s: creation time unavailable (%s)", path, exc)
                    continue
                entries.append(ImageEntry(path=path, created_at=created_at))
    except OSError as exc:
        _logger.warning("failed to scan %s: %s", folder_path, exc)
        return None

    # list.sort is stable, so equal timestamps keep enumeration order.
    entries.sort(key=lambda e: e.created_at)

    elapsed = time.perf_counter() - t_start
    _logger.debug("scanned %s: %d images in %.3fs", scan_dir, len(entries), elapsed)

    if not entries:
        return None
    return [e.path for e in entries]
