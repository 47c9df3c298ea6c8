"""Shared pytest fixtures for assetdb tests."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from assetdb.config.layout import ProjectLayout


@pytest.fixture(autouse=True)
def isolated_runtime(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> Iterator[None]:
    """Reset the layout and configuration singletons around every test."""

    import assetdb.config.layout as layout_module
    from assetdb.config.config import Config

    config_dir = tmp_path_factory.mktemp("config")
    monkeypatch.setattr(layout_module, "_active_layout", None)
    monkeypatch.setattr(Config, "_instance", None)
    monkeypatch.setenv("ASSETDB_CONFIG_PATH", str(config_dir / "assetdb.toml"))
    monkeypatch.delenv("ASSETDB_PROJECT_PATH", raising=False)
    yield None


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Create a project tree with Assets and Packages folders."""

    root = (tmp_path / "My Project").resolve()
    (root / "Assets").mkdir(parents=True)
    (root / "Packages").mkdir()
    return root


@pytest.fixture
def layout(project_root: Path) -> ProjectLayout:
    """Provide a layout rooted at the temporary project."""

    return ProjectLayout.from_project_path(project_root)
