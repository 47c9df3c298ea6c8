"""Use cases of the path feature."""

from .folder_path import exists, file_exists, folder_exists, folder_path, folder_path_assumptive
from .ports import AssetStore

__all__ = [
    "AssetStore",
    "exists",
    "file_exists",
    "folder_exists",
    "folder_path",
    "folder_path_assumptive",
]
