"""Domain model of the path feature."""

from .asset_path import AssetPath, parse_path
from .errors import AssetPathError, InvalidArgumentError, InvalidOperationError, NullArgumentError

__all__ = [
    "AssetPath",
    "AssetPathError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "NullArgumentError",
    "parse_path",
]
