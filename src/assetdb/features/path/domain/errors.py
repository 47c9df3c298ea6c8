"""
Summary: Exception taxonomy raised while building and resolving asset paths.
Why: Let callers tell bad input shape apart from unknown existence on disk.
"""

from __future__ import annotations


class AssetPathError(Exception):
    """Base class for all asset path failures."""


class NullArgumentError(AssetPathError, TypeError):
    """Raised when a required argument is ``None``."""

    def __init__(self, argument: str) -> None:
        super().__init__(f"Argument '{argument}' must not be None")
        self.argument: str = argument


class InvalidArgumentError(AssetPathError, ValueError):
    """Raised when an argument violates a structural path rule."""

    def __init__(self, argument: str, value: str, reason: str) -> None:
        super().__init__(f"Invalid {argument} '{value}': {reason}")
        self.argument: str = argument
        self.value: str = value
        self.reason: str = reason


class InvalidOperationError(AssetPathError, RuntimeError):
    """Raised when a path cannot be classified as file or folder."""

    def __init__(self, path: str) -> None:
        super().__init__(
            f"Unable to determine if file or folder because path '{path}' does not exist"
        )
        self.path: str = path


__all__ = [
    "AssetPathError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "NullArgumentError",
]
