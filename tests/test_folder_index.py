from __future__ import annotations

import os
from pathlib import Path
from types import SimpleNamespace

from vdi_viewer.image_engine.folder_index import is_image_file, list_folder_images, read_created_at


def _touch(folder: Path, *names: str) -> None:
    for name in names:
        (folder / name).write_bytes(b"x")


def _times(mapping: dict[str, float]):
    def reader(path: str) -> float:
        return mapping[os.path.basename(path)]

    return reader


def test_lists_images_oldest_first_and_skips_other_files(tmp_path: Path) -> None:
    _touch(tmp_path, "b.jpg", "a.png", "notes.txt")
    folder = str(tmp_path)

    files = list_folder_images(folder, timestamp=_times({"a.png": 1.0, "b.jpg": 2.0}))

    assert files == [os.path.join(folder, "a.png"), os.path.join(folder, "b.jpg")]


def test_extension_match_is_case_insensitive(tmp_path: Path) -> None:
    _touch(tmp_path, "A.JPG", "b.TiF", "c.WebP", "d.jpeg.bak")

    files = list_folder_images(str(tmp_path), timestamp=_times({"A.JPG": 3.0, "b.TiF": 1.0, "c.WebP": 2.0}))

    assert files is not None
    assert [os.path.basename(p) for p in files] == ["b.TiF", "c.WebP", "A.JPG"]


def test_subdirectories_are_not_listed_or_recursed(tmp_path: Path) -> None:
    _touch(tmp_path, "top.png")
    sub = tmp_path / "album.png"
    sub.mkdir()
    _touch(sub, "inner.png")

    files = list_folder_images(str(tmp_path), timestamp=_times({"top.png": 1.0}))

    assert files == [os.path.join(str(tmp_path), "top.png")]


def test_folder_without_images_is_absent(tmp_path: Path) -> None:
    _touch(tmp_path, "readme.md", "data.csv")

    assert list_folder_images(str(tmp_path)) is None


def test_empty_folder_is_absent(tmp_path: Path) -> None:
    assert list_folder_images(str(tmp_path)) is None


def test_missing_folder_is_absent(tmp_path: Path) -> None:
    assert list_folder_images(str(tmp_path / "nope")) is None


def test_file_path_is_not_a_folder(tmp_path: Path) -> None:
    _touch(tmp_path, "a.png")

    assert list_folder_images(str(tmp_path / "a.png")) is None


def test_unreadable_timestamp_skips_only_that_file(tmp_path: Path) -> None:
    _touch(tmp_path, "a.png", "broken.png", "c.gif")

    def reader(path: str) -> float:
        name = os.path.basename(path)
        if name == "broken.png":
            raise PermissionError(13, "denied", path)
        return {"a.png": 2.0, "c.gif": 1.0}[name]

    files = list_folder_images(str(tmp_path), timestamp=reader)

    assert files is not None
    assert [os.path.basename(p) for p in files] == ["c.gif", "a.png"]


def test_all_timestamps_unreadable_is_absent(tmp_path: Path) -> None:
    _touch(tmp_path, "a.png")

    def reader(path: str) -> float:
        raise OSError("no creation time")

    assert list_folder_images(str(tmp_path), timestamp=reader) is None


def test_equal_timestamps_keep_enumeration_order(tmp_path: Path) -> None:
    _touch(tmp_path, "x.png", "y.png", "z.png", "w.png")
    enumerated = [e.name for e in os.scandir(tmp_path)]

    files = list_folder_images(
        str(tmp_path), timestamp=_times({"x.png": 5.0, "y.png": 5.0, "z.png": 5.0, "w.png": 1.0})
    )

    assert files is not None
    names = [os.path.basename(p) for p in files]
    assert names[0] == "w.png"
    assert names[1:] == [n for n in enumerated if n != "w.png"]


def test_real_timestamps_sorted_and_stable(tmp_path: Path) -> None:
    _touch(tmp_path, "one.png", "two.jpg", "three.bmp", "skip.txt")

    first = list_folder_images(str(tmp_path))
    second = list_folder_images(str(tmp_path))

    assert first is not None
    assert first == second
    stamps = [read_created_at(p) for p in first]
    assert stamps == sorted(stamps)
    assert {os.path.basename(p) for p in first} == {"one.png", "two.jpg", "three.bmp"}


def test_is_image_file() -> None:
    assert is_image_file("photo.JPEG")
    assert is_image_file("scan.tif")
    assert not is_image_file("archive.zip")
    assert not is_image_file("png")


def test_created_at_falls_back_to_mtime_without_birth_time(tmp_path: Path, monkeypatch) -> None:
    target = str(tmp_path / "edited.png")
    real_stat = os.stat

    def fake_stat(path, *args, **kwargs):
        if path == target:
            return SimpleNamespace(st_mtime=42.0, st_ctime=99.0)
        return real_stat(path, *args, **kwargs)

    monkeypatch.setattr(os, "stat", fake_stat)

    assert read_created_at(target) == 42.0
