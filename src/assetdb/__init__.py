"""assetdb: canonical paths for files under a project's Assets and Packages folders."""

from assetdb.config.layout import (
    ProjectLayout,
    ProjectLayoutError,
    get_project_layout,
    initialize_project_layout,
)
from assetdb.features.path import (
    AssetPath,
    AssetPathError,
    AssetStore,
    InvalidArgumentError,
    InvalidOperationError,
    LocalAssetStore,
    NullArgumentError,
    exists,
    file_exists,
    folder_exists,
    folder_path,
    folder_path_assumptive,
    parse_path,
)

__all__ = [
    "AssetPath",
    "AssetPathError",
    "AssetStore",
    "InvalidArgumentError",
    "InvalidOperationError",
    "LocalAssetStore",
    "NullArgumentError",
    "ProjectLayout",
    "ProjectLayoutError",
    "exists",
    "file_exists",
    "folder_exists",
    "folder_path",
    "folder_path_assumptive",
    "get_project_layout",
    "initialize_project_layout",
    "parse_path",
]
