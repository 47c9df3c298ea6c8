"""
Summary: Local disk implementation of the asset store port.
Why: Answer existence queries for paths resolved against a project layout.
"""

from __future__ import annotations

from pathlib import Path

from assetdb.config.layout import ProjectLayout

from ..domain.asset_path import AssetPath


class LocalAssetStore:
    """Thin wrapper around the local filesystem rooted at a project layout."""

    def __init__(self, layout: ProjectLayout) -> None:
        self.layout: ProjectLayout = layout

    @property
    def project_root_path(self) -> str:
        """Full path of the primary asset area (the Assets folder), not the project root."""
        return self.layout.assets_path

    @property
    def packages_root_path(self) -> str:
        return self.layout.packages_path

    def _resolve(self, path: AssetPath) -> Path:
        return Path(self.layout.project_path, path.relative_path)

    def directory_exists(self, path: AssetPath) -> bool:
        return self._resolve(path).is_dir()

    def file_exists(self, path: AssetPath) -> bool:
        return self._resolve(path).is_file()


__all__ = ["LocalAssetStore"]
