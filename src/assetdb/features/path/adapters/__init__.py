"""Adapters for the path feature."""

from .filesystem_adapter import LocalAssetStore

__all__ = ["LocalAssetStore"]
