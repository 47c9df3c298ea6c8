"""
Summary: Ports describing the backing store consulted by path use cases.
Why: Keep existence checks swappable between local disk, asset databases and test doubles.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.asset_path import AssetPath


@runtime_checkable
class AssetStore(Protocol):
    """Read-only existence queries against the project's backing store."""

    def directory_exists(self, path: AssetPath) -> bool:
        """Return True if ``path`` names an existing folder."""
        ...

    def file_exists(self, path: AssetPath) -> bool:
        """Return True if ``path`` names an existing file."""
        ...
