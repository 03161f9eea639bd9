from __future__ import annotations

import functools
import os
from pathlib import Path

import pytest

from vdi_viewer.image_engine.folder_index import list_folder_images
from vdi_viewer.image_engine.navigator import FolderNavigator, next_image, previous_image


@pytest.fixture
def photos(tmp_path: Path) -> tuple[FolderNavigator, list[str]]:
    names = ["a.png", "b.jpg", "c.gif", "d.webp"]
    for name in names:
        (tmp_path / name).write_bytes(b"x")
    (tmp_path / "notes.txt").write_text("n", encoding="utf-8")
    order = {name: float(i) for i, name in enumerate(names)}
    indexer = functools.partial(list_folder_images, timestamp=lambda p: order[os.path.basename(p)])
    paths = [os.path.join(str(tmp_path), n) for n in names]
    return FolderNavigator(indexer=indexer), paths


def test_next_and_previous_step_through_folder(photos) -> None:
    nav, paths = photos

    assert nav.next(paths[0], True) == paths[1]
    assert nav.next(paths[2], True) == paths[3]
    assert nav.previous(paths[2], True) == paths[1]


def test_wraps_around_both_ends(photos) -> None:
    nav, paths = photos

    assert nav.next(paths[-1], True) == paths[0]
    assert nav.previous(paths[0], True) == paths[-1]


def test_full_cycle_returns_to_start(photos) -> None:
    nav, paths = photos

    for start in paths:
        cur = start
        for _ in range(len(paths)):
            cur = nav.next(cur, True)
        assert cur == start

        cur = start
        for _ in range(len(paths)):
            cur = nav.previous(cur, True)
        assert cur == start


def test_next_undoes_previous(photos) -> None:
    nav, paths = photos

    for p in paths:
        assert nav.next(nav.previous(p, True), True) == p


def test_disabled_returns_none_without_scanning() -> None:
    calls: list[str] = []

    def indexer(folder: str) -> list[str] | None:
        calls.append(folder)
        return ["/photos/a.png", "/photos/b.jpg"]

    nav = FolderNavigator(indexer=indexer)

    assert nav.next("/photos/a.png", False) is None
    assert nav.previous("/photos/a.png", False) is None
    assert calls == []


def test_current_path_not_in_index(photos, tmp_path: Path) -> None:
    nav, _ = photos

    assert nav.next(str(tmp_path / "deleted.png"), True) is None
    assert nav.previous(str(tmp_path / "notes.txt"), True) is None


def test_folder_without_images(tmp_path: Path) -> None:
    (tmp_path / "notes.txt").write_text("n", encoding="utf-8")
    nav = FolderNavigator()

    assert nav.next(str(tmp_path / "notes.txt"), True) is None


def test_single_image_navigates_to_itself(tmp_path: Path) -> None:
    only = tmp_path / "only.png"
    only.write_bytes(b"x")

    assert next_image(str(only), True) == str(only)
    assert previous_image(str(only), True) == str(only)


def test_reindexes_on_every_call() -> None:
    listings = [
        ["/photos/a.png", "/photos/b.jpg"],
        ["/photos/a.png", "/photos/new.png", "/photos/b.jpg"],
    ]
    seen: list[str] = []

    def indexer(folder: str) -> list[str] | None:
        seen.append(folder)
        return listings[len(seen) - 1]

    nav = FolderNavigator(indexer=indexer)

    assert nav.next("/photos/a.png", True) == "/photos/b.jpg"
    assert nav.next("/photos/a.png", True) == "/photos/new.png"
    assert seen == ["/photos", "/photos"]


def test_position_reports_one_based_index(photos) -> None:
    nav, paths = photos

    assert nav.position(paths[0]) == (1, 4)
    assert nav.position(paths[3]) == (4, 4)
    assert nav.position(paths[0] + ".missing") is None
