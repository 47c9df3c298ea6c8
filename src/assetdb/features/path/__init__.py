"""
Summary: Export path feature domain, use case and adapter symbols.
Why: Provide a stable import surface for asset wrappers and tests.
"""

from .adapters.filesystem_adapter import LocalAssetStore
from .domain.asset_path import AssetPath, parse_path
from .domain.errors import (
    AssetPathError,
    InvalidArgumentError,
    InvalidOperationError,
    NullArgumentError,
)
from .usecases.folder_path import (
    exists,
    file_exists,
    folder_exists,
    folder_path,
    folder_path_assumptive,
)
from .usecases.ports import AssetStore

__all__ = [
    "AssetPath",
    "AssetPathError",
    "AssetStore",
    "InvalidArgumentError",
    "InvalidOperationError",
    "LocalAssetStore",
    "NullArgumentError",
    "exists",
    "file_exists",
    "folder_exists",
    "folder_path",
    "folder_path_assumptive",
    "parse_path",
]
