"""Configuration management for assetdb."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from assetdb.config.file_ops import write_text_file
from assetdb.config.paths import default_config_path
from assetdb.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Library configuration."""

    # Root of the project tree (parent of its Assets folder)
    project_path: Path | None = _path_field()

    _instance: ClassVar["Config | None"] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to file and return the written path."""

        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = value.as_posix()

        target = target or default_config_path()
        try:
            write_text_file(target, self._render_toml(config_dict))
            logger.info("Configuration saved to %s", target)
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# assetdb Configuration File")
        lines.append("")

        lines.append("# Project root (optional)")
        lines.append("# The folder that contains the project's Assets and Packages folders")
        lines.append('# Example: project_path = "/path/to/MyProject"')
        if config["project_path"] is not None:
            lines.append(f"project_path = {self._format_toml_value(config['project_path'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        return str(value)

    @classmethod
    def load(cls, config_file: Path | None = None) -> "Config":
        """Load configuration from file.

        A missing file yields the defaults. The first successful load is
        cached and returned by later calls without ``config_file``.

        Args:
            config_file: Explicit file to read instead of the default location.

        Returns:
            Config: Loaded configuration object.
        """
        if config_file is None and cls._instance is not None:
            return cls._instance

        config_file = config_file or default_config_path()

        if not config_file.exists():
            logger.debug("No configuration at %s, using defaults", config_file)
            instance = cls()
        else:
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration: %s", e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            logger.info("Configuration loaded from %s", config_file)

        cls._instance = instance
        return instance


__all__ = ["Config"]
