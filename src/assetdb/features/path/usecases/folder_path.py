"""
Summary: Resolve the folder a path refers to, strictly or by extension heuristic.
Why: Callers placing new files need a folder even when only a file path is known.
"""

from __future__ import annotations

from assetdb.platform.logging import logger

from ..adapters.filesystem_adapter import LocalAssetStore
from ..domain.asset_path import AssetPath
from ..domain.errors import InvalidOperationError
from .ports import AssetStore


def _store_for(path: AssetPath, store: AssetStore | None) -> AssetStore:
    return store if store is not None else LocalAssetStore(path.layout)


def folder_exists(path: AssetPath, store: AssetStore | None = None) -> bool:
    """Return True if ``path`` names an existing folder."""
    return _store_for(path, store).directory_exists(path)


def file_exists(path: AssetPath, store: AssetStore | None = None) -> bool:
    """Return True if ``path`` names an existing file."""
    return _store_for(path, store).file_exists(path)


def exists(path: AssetPath, store: AssetStore | None = None) -> bool:
    """Return True if ``path`` names an existing file or folder."""
    backing = _store_for(path, store)
    return backing.directory_exists(path) or backing.file_exists(path)


def folder_path(path: AssetPath, store: AssetStore | None = None) -> AssetPath:
    """Return ``path`` if it is a folder, or the folder containing it if it is a file.

    The path must exist in the backing store.

    Args:
        path: Path to classify.
        store: Backing store to query. Defaults to the local disk.

    Returns:
        AssetPath: The folder path.

    Raises:
        InvalidOperationError: If ``path`` is neither an existing folder nor
            an existing file.
    """
    backing = _store_for(path, store)
    if backing.directory_exists(path):
        return path
    if backing.file_exists(path):
        return path.to_folder_path()

    logger.warning(
        "Path %s does not exist",
        path,
        extra={"path_event": "path.folder.missing", "source_path": str(path)},
    )
    raise InvalidOperationError(str(path))


def folder_path_assumptive(path: AssetPath, store: AssetStore | None = None) -> AssetPath:
    """Return the folder for ``path``, guessing from its extension if it does not exist.

    A missing path whose last segment has an extension is assumed to be a
    file, otherwise a folder. This guesses wrong for folders whose name
    contains a dot: the folder's parent is returned instead.

    Args:
        path: Path to classify.
        store: Backing store to query. Defaults to the local disk.

    Returns:
        AssetPath: The existing or assumed folder path.
    """
    backing = _store_for(path, store)
    if backing.directory_exists(path):
        return path
    if backing.file_exists(path):
        return path.to_folder_path()

    assumed = path.to_folder_path() if path.has_extension else path
    logger.debug(
        "Assuming %s is the folder of missing path %s",
        assumed,
        path,
        extra={
            "path_event": "path.folder.assumed",
            "source_path": str(path),
            "target_path": str(assumed),
        },
    )
    return assumed


__all__ = [
    "exists",
    "file_exists",
    "folder_exists",
    "folder_path",
    "folder_path_assumptive",
]
