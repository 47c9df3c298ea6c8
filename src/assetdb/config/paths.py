"""Shared path utilities for configuration, log and project locations.

This module centralizes how the library discovers locations for its config
file, its optional log file and the project tree it manages.

Policy (portable by default):
- Config: repository-root ``<repo_root>/config/assetdb.toml`` unless
  overridden by ``ASSETDB_CONFIG_PATH``.
- Log file: disabled unless ``ASSETDB_LOG_FILE`` is set.
- Project: ``ASSETDB_PROJECT_PATH``, else the nearest ancestor of the working
  directory that holds an ``Assets`` folder.
"""

from __future__ import annotations

import os
from pathlib import Path
from collections.abc import Mapping
from typing import Callable, Final


ENV_CONFIG_PATH: Final[str] = "ASSETDB_CONFIG_PATH"
ENV_LOG_FILE: Final[str] = "ASSETDB_LOG_FILE"
ENV_PROJECT_PATH: Final[str] = "ASSETDB_PROJECT_PATH"

ASSETS_DIR_NAME: Final[str] = "Assets"


def resolve_overridable_path(
    *,
    explicit_path: Path | str | None,
    env: Mapping[str, str] | None,
    env_var: str | None,
    default_factory: Callable[[], Path],
) -> Path:
    """Resolve a configuration path honoring explicit and environment overrides."""

    if explicit_path is not None:
        return Path(explicit_path).expanduser().resolve()

    candidate = _env_value(env, env_var)
    if candidate:
        return Path(candidate).expanduser().resolve()

    default_path = default_factory()
    return default_path.expanduser().resolve()


def _env_value(env: Mapping[str, str] | None, env_var: str | None) -> str:
    if not env_var:
        return ""
    mapping = env if env is not None else os.environ
    return (mapping.get(env_var) or "").strip()


def _detect_repo_root(start: Path | None = None) -> Path:
    """Detect the repository root by walking up parents.

    Looks for markers like ``pyproject.toml`` or ``.git``.

    Args:
        start: Starting path. Defaults to this file's directory.

    Returns:
        Path: Detected repository root, or the current working directory if no
        marker is found.
    """
    here = (start or Path(__file__).resolve()).parent
    for p in [here, *here.parents]:
        if (p / "pyproject.toml").exists() or (p / ".git").exists():
            return p
    return Path.cwd()


def detect_project_root(start: Path | None = None) -> Path:
    """Return the nearest directory at or above ``start`` holding an ``Assets`` folder.

    Falls back to ``start`` (the working directory by default) when no
    ancestor qualifies.
    """
    here = (start or Path.cwd()).resolve()
    for p in [here, *here.parents]:
        if (p / ASSETS_DIR_NAME).is_dir():
            return p
    return here


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """Get the path to the TOML config file.

    Portable layout: ``<repo_root>/config/assetdb.toml``.
    """
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_CONFIG_PATH,
        default_factory=lambda: _detect_repo_root() / "config" / "assetdb.toml",
    )


def default_log_file(env: Mapping[str, str] | None = None) -> Path | None:
    """Get the log file path, or ``None`` when file logging is not requested."""

    if not _env_value(env, ENV_LOG_FILE):
        return None
    return resolve_overridable_path(
        explicit_path=None,
        env=env,
        env_var=ENV_LOG_FILE,
        default_factory=Path.cwd,
    )


def default_project_path(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> Path:
    """Resolve the project root honoring explicit and environment overrides."""

    return resolve_overridable_path(
        explicit_path=explicit_path,
        env=env,
        env_var=ENV_PROJECT_PATH,
        default_factory=detect_project_root,
    )


__all__ = [
    "ASSETS_DIR_NAME",
    "ENV_CONFIG_PATH",
    "ENV_LOG_FILE",
    "ENV_PROJECT_PATH",
    "default_config_path",
    "default_log_file",
    "default_project_path",
    "detect_project_root",
    "resolve_overridable_path",
]
