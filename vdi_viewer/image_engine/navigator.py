"""Circular next/previous navigation through the images of the current folder."""

from __future__ import annotations

from collections.abc import Callable

from vdi_viewer.image_engine.folder_index import list_folder_images
from vdi_viewer.logger import get_logger
from vdi_viewer.models import NavigationRequest
from vdi_viewer.path_utils import parent_dir

_logger = get_logger("navigator")

FolderIndexer = Callable[[str], list[str] | None]


class FolderNavigator:
    """Steps through the folder of the current image, wrapping at both ends.

    The folder is re-indexed on every call, so files added or removed between
    steps are picked up. Nothing is cached.
    """

    def __init__(self, indexer: FolderIndexer = list_folder_images) -> None:
        self._indexer = indexer

    def next(self, current_path: str, enabled: bool) -> str | None:
        return self._step(NavigationRequest(current_path, enabled), 1)

    def previous(self, current_path: str, enabled: bool) -> str | None:
        return self._step(NavigationRequest(current_path, enabled), -1)

    def position(self, current_path: str) -> tuple[int, int] | None:
        """1-based position of `current_path` in its folder and the folder's image count."""
        located = self._locate(current_path)
        if located is None:
            return None
        files, idx = located
        return idx + 1, len(files)

    def _locate(self, current_path: str) -> tuple[list[str], int] | None:
        files = self._indexer(parent_dir(current_path))
        if not files:
            return None
        try:
            return files, files.index(current_path)
        except ValueError:
            _logger.debug("current image not in folder index: %s", current_path)
            return None

    def _step(self, request: NavigationRequest, offset: int) -> str | None:
        if not request.enabled:
            return None
        located = self._locate(request.current_path)
        if located is None:
            return None
        files, idx = located
        n = len(files)
        return files[(idx + offset + n) % n]


_default_navigator = FolderNavigator()


def next_image(current_path: str, enabled: bool) -> str | None:
    return _default_navigator.next(current_path, enabled)


def previous_image(current_path: str, enabled: bool) -> str | None:
    return _default_navigator.previous(current_path, enabled)
