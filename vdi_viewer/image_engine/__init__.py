"""Image Engine - folder indexing and navigation.

This package is Qt-free:
- Chronological listing of the images in one folder (folder_index)
- Circular next/previous stepping through that listing (navigator)

Usage:
    from vdi_viewer.image_engine import FolderNavigator, list_folder_images

    files = list_folder_images("/path/to/images")
    nav = FolderNavigator()
    nav.next("/path/to/images/a.png", enabled=True)
"""

from .folder_index import is_image_file, list_folder_images, read_created_at
from .navigator import FolderNavigator, next_image, previous_image

__all__ = [
    "FolderNavigator",
    "is_image_file",
    "list_folder_images",
    "next_image",
    "previous_image",
    "read_created_at",
]
