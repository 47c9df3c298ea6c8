"""
Summary: Project layout value and its process-wide, initialise-once holder.
Why: Give path normalization an explicit project root instead of ambient global lookups.
"""

from __future__ import annotations

import os
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import Final

from assetdb.config.config import Config
from assetdb.config.paths import ASSETS_DIR_NAME, default_project_path
from assetdb.platform.logging import logger

PACKAGES_DIR_NAME: Final[str] = "Packages"


class ProjectLayoutError(RuntimeError):
    """Raised when the process-wide project layout is configured twice."""


def _normalize_root(path: str | os.PathLike[str]) -> str:
    normalized = os.fspath(path).replace("\\", "/")
    stripped = normalized.rstrip("/")
    return stripped or normalized[:1]


@dataclass(slots=True, frozen=True)
class ProjectLayout:
    """Locations of a project tree, stored with forward slashes and no trailing slash."""

    project_path: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "project_path", _normalize_root(self.project_path))

    @classmethod
    def from_project_path(cls, project_path: str | os.PathLike[str]) -> "ProjectLayout":
        """Create a layout rooted at ``project_path``."""

        return cls(os.fspath(project_path))

    @classmethod
    def from_assets_path(cls, assets_path: str | os.PathLike[str]) -> "ProjectLayout":
        """Create a layout from the location of the project's ``Assets`` folder.

        Raises:
            ValueError: If the last segment of ``assets_path`` is not ``Assets``.
        """
        normalized = _normalize_root(assets_path)
        parent, _, last = normalized.rpartition("/")
        if last.lower() != ASSETS_DIR_NAME.lower():
            raise ValueError(f"Not an {ASSETS_DIR_NAME} folder: {assets_path}")
        return cls(parent or "/")

    @property
    def assets_path(self) -> str:
        """Full path of the primary asset area."""
        return f"{self.project_path}/{ASSETS_DIR_NAME}"

    @property
    def packages_path(self) -> str:
        """Full path of the packages area."""
        return f"{self.project_path}/{PACKAGES_DIR_NAME}"


_active_layout: ProjectLayout | None = None
_layout_lock = threading.Lock()


def initialize_project_layout(layout: ProjectLayout) -> ProjectLayout:
    """Install ``layout`` as the process-wide layout.

    Repeating the call with an equal layout is a no-op.

    Raises:
        ProjectLayoutError: If a different layout is already installed.
    """
    global _active_layout
    with _layout_lock:
        if _active_layout is not None and _active_layout != layout:
            raise ProjectLayoutError(
                f"Project layout already initialized at '{_active_layout.project_path}'"
            )
        _active_layout = layout
        return layout


def get_project_layout() -> ProjectLayout:
    """Return the process-wide layout, resolving it on first use.

    Resolution order: ``project_path`` from the config file, the
    ``ASSETDB_PROJECT_PATH`` environment variable, then the nearest ancestor
    of the working directory containing an ``Assets`` folder.
    """
    global _active_layout
    with _layout_lock:
        if _active_layout is None:
            project_path: Path = default_project_path(Config.load().project_path)
            _active_layout = ProjectLayout.from_project_path(project_path)
            logger.debug("Project layout initialized at %s", _active_layout.project_path)
        return _active_layout


__all__ = [
    "PACKAGES_DIR_NAME",
    "ProjectLayout",
    "ProjectLayoutError",
    "get_project_layout",
    "initialize_project_layout",
]
