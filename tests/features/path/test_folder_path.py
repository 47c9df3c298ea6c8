"""
Summary: Tests for strict and assumptive folder path resolution.
Why: Asset creation relies on these rules to pick the folder for new files.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pytest_mock import MockerFixture

from assetdb.config.layout import ProjectLayout
from assetdb.features.path import (
    AssetPath,
    AssetStore,
    InvalidOperationError,
    exists,
    file_exists,
    folder_exists,
    folder_path,
    folder_path_assumptive,
)


def _store(mocker: MockerFixture, *, directory: bool, file: bool) -> AssetStore:
    store = mocker.Mock(spec=AssetStore)
    store.directory_exists.return_value = directory
    store.file_exists.return_value = file
    return store


@pytest.mark.parametrize("resolve", [folder_path, folder_path_assumptive])
def test_existing_folder_returns_itself(mocker: MockerFixture, resolve) -> None:
    """An existing folder is its own folder path."""
    path = AssetPath("Assets/folder.v2")
    store = _store(mocker, directory=True, file=False)

    assert resolve(path, store) is path
    store.directory_exists.assert_called_once_with(path)
    store.file_exists.assert_not_called()


@pytest.mark.parametrize("resolve", [folder_path, folder_path_assumptive])
def test_existing_file_returns_parent(mocker: MockerFixture, resolve) -> None:
    """An existing file resolves to its parent even without an extension."""
    store = _store(mocker, directory=False, file=True)

    assert resolve(AssetPath("Assets/sub/README"), store) == "Assets/sub"


def test_strict_missing_path_raises(mocker: MockerFixture, caplog: pytest.LogCaptureFixture) -> None:
    """Strict resolution refuses to guess."""
    store = _store(mocker, directory=False, file=False)

    with caplog.at_level(logging.WARNING, logger="assetdb"):
        with pytest.raises(InvalidOperationError) as exc_info:
            _ = folder_path(AssetPath("Assets/missing.txt"), store)

    assert exc_info.value.path == "Assets/missing.txt"
    assert any(
        getattr(record, "path_event", None) == "path.folder.missing" for record in caplog.records
    )


@pytest.mark.parametrize(
    "path,expected",
    [
        ("Assets/new/file.asset", "Assets/new"),
        ("Assets/new/folder", "Assets/new/folder"),
        ("Assets", "Assets"),
        # a folder name with a dot is taken for a file
        ("Assets/new/folder.v2", "Assets/new"),
    ],
)
def test_assumptive_missing_path_uses_extension(
    mocker: MockerFixture, path: str, expected: str
) -> None:
    store = _store(mocker, directory=False, file=False)

    assert folder_path_assumptive(AssetPath(path), store) == expected


@pytest.mark.parametrize(
    "directory,file,expected",
    [(True, False, True), (False, True, True), (False, False, False)],
)
def test_existence_queries(mocker: MockerFixture, directory: bool, file: bool, expected: bool) -> None:
    store = _store(mocker, directory=directory, file=file)
    path = AssetPath("Assets/x")

    assert folder_exists(path, store) is directory
    assert file_exists(path, store) is file
    assert exists(path, store) is expected


def test_default_store_uses_local_disk(project_root: Path, layout: ProjectLayout) -> None:
    """Without a store the path's layout is checked on disk."""
    (project_root / "Assets" / "Textures").mkdir()
    _ = (project_root / "Assets" / "Textures" / "wall.png").write_bytes(b"png")

    texture = AssetPath("Assets/Textures/wall.png", layout=layout)
    assert folder_path(texture) == "Assets/Textures"
    assert folder_path(AssetPath("Assets", layout=layout)) == "Assets"
    assert file_exists(texture)
    assert not folder_exists(texture)

    with pytest.raises(InvalidOperationError):
        _ = folder_path(AssetPath("Assets/Textures/missing.png", layout=layout))
