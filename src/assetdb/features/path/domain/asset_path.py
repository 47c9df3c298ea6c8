"""
Summary: Canonical relative path value for files under a project's Assets or Packages areas.
Why: Sanitize loosely formed path strings once so every consumer compares identical values.
"""

from __future__ import annotations

from typing import ClassVar, Final, final, override

from assetdb.config.layout import ProjectLayout, get_project_layout
from assetdb.platform.logging import logger

from .errors import InvalidArgumentError, NullArgumentError

_SEPARATOR: Final[str] = "/"
_BACKSLASH: Final[str] = "\\"
_ASSETS_ROOT: Final[str] = "assets"
_PACKAGES_PREFIX: Final[str] = "packages/"
_PARENT_SEGMENT: Final[str] = ".."


def _require_text(argument: str, value: str | None) -> str:
    """Return ``value`` if it is a non-blank string.

    Raises:
        NullArgumentError: If ``value`` is ``None``.
        InvalidArgumentError: If ``value`` is empty or whitespace only.
    """
    if value is None:
        raise NullArgumentError(argument)
    if not value.strip():
        raise InvalidArgumentError(argument, value, "must not be empty or whitespace")
    return value


def _to_forward_slashes(path: str) -> str:
    return path.replace(_BACKSLASH, _SEPARATOR)


def _is_relative(path: str) -> bool:
    """Return True if ``path`` starts at ``Assets`` or ``Packages/`` (any case).

    ``Assets`` must be the whole path or be followed by a separator, so that
    ``AssetsData`` is not mistaken for the asset root.
    """
    lowered = path.lstrip(_SEPARATOR).lower()
    if lowered.startswith(_ASSETS_ROOT):
        return len(lowered) == len(_ASSETS_ROOT) or lowered[len(_ASSETS_ROOT)] == _SEPARATOR
    return lowered.startswith(_PACKAGES_PREFIX)


def _make_relative(full_path: str, layout: ProjectLayout) -> str:
    """Strip the project root from ``full_path``.

    Raises:
        InvalidArgumentError: If ``full_path`` is not below the project root or
            does not land in a recognized area.
    """
    candidate = full_path.strip(_SEPARATOR)
    root = layout.project_path.strip(_SEPARATOR)
    if not candidate.startswith(root + _SEPARATOR):
        raise InvalidArgumentError(
            "path", full_path, f"not a project path (project root is '{layout.project_path}')"
        )

    relative = candidate[len(root) + 1 :].strip(_SEPARATOR)
    if not _is_relative(relative):
        raise InvalidArgumentError(
            "path", full_path, "must be located under the project's Assets or Packages folder"
        )
    return relative


def _reject_parent_segments(raw: str, relative: str) -> str:
    """Return ``relative`` unless a ``..`` segment could lead outside the project.

    Raises:
        InvalidArgumentError: If ``relative`` contains a ``..`` segment.
    """
    if _PARENT_SEGMENT in relative.split(_SEPARATOR):
        raise InvalidArgumentError("path", raw, "must not contain '..' segments")
    return relative


@final
class AssetPath:
    """Relative path to an asset file or folder under either ``Assets`` or ``Packages``.

    Instances can be created from a relative or a full (absolute) path;
    internally the path is always stored relative to the project root.
    Separators are converted to forward slashes and leading or trailing
    separators are trimmed: ``"\\Assets\\folder\\"`` becomes ``"Assets/folder"``.
    Letter case is preserved as given.

    Instances never change after construction. They compare equal to other
    instances and to plain strings by ordinal comparison of the relative path.
    """

    DEFAULT_EXTENSION: ClassVar[str] = "asset"
    ROOT: ClassVar[str] = "Assets"

    __slots__ = ("_relative_path", "_layout")

    def __init__(self, path: str | None = ROOT, *, layout: ProjectLayout | None = None) -> None:
        """Create a path from a relative or full path string.

        Args:
            path: Relative path starting at ``Assets`` or ``Packages/``, or a
                full path below the project root. Defaults to ``Assets``.
            layout: Project layout used to resolve full paths. Defaults to the
                process-wide layout.

        Raises:
            NullArgumentError: If ``path`` is ``None``.
            InvalidArgumentError: If ``path`` is blank, or neither a
                recognized relative path nor a full path inside the project,
                or contains a ``..`` segment.
        """
        raw = _require_text("path", path)
        object.__setattr__(self, "_layout", layout)

        normalized = _to_forward_slashes(raw)
        if _is_relative(normalized):
            relative = _reject_parent_segments(raw, normalized.strip(_SEPARATOR))
            object.__setattr__(self, "_relative_path", relative)
            return

        relative = _reject_parent_segments(raw, _make_relative(normalized, self.layout))
        object.__setattr__(self, "_relative_path", relative)
        logger.debug(
            "Resolved full path %s to %s",
            raw,
            self._relative_path,
            extra={
                "path_event": "path.absolute.resolved",
                "source_path": raw,
                "target_path": self._relative_path,
            },
        )

    @classmethod
    def from_parts(
        cls,
        folder: str | None,
        file_name: str | None,
        extension: str | None = DEFAULT_EXTENSION,
        *,
        layout: ProjectLayout | None = None,
    ) -> "AssetPath":
        """Combine a folder, a file name and an extension into a path.

        Args:
            folder: Relative or full folder path, normalized like the constructor.
            file_name: File name without separators.
            extension: Extension with or without a leading dot.
            layout: Project layout used to resolve a full ``folder``.

        Returns:
            AssetPath: ``folder/file_name.extension`` in canonical form.

        Raises:
            NullArgumentError: If any part is ``None``.
            InvalidArgumentError: If any part is blank, or ``file_name`` or
                ``extension`` contains a path separator.
        """
        folder = _require_text("folder", folder)
        file_name = _require_text("file_name", file_name)
        extension = _require_text("extension", extension)

        if _SEPARATOR in file_name or _BACKSLASH in file_name:
            raise InvalidArgumentError("file_name", file_name, "must not contain path separators")

        bare_extension = extension.lstrip(".")
        if not bare_extension.strip():
            raise InvalidArgumentError("extension", extension, "must not be empty")
        if _SEPARATOR in bare_extension or _BACKSLASH in bare_extension:
            raise InvalidArgumentError("extension", extension, "must not contain path separators")

        folder = _to_forward_slashes(folder).rstrip(_SEPARATOR)
        return cls(f"{folder}/{file_name}.{bare_extension}", layout=layout)

    @override
    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"AssetPath is immutable, cannot set '{name}'")

    @override
    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"AssetPath is immutable, cannot delete '{name}'")

    @property
    def layout(self) -> ProjectLayout:
        """Project layout this path resolves against."""
        return self._layout if self._layout is not None else get_project_layout()

    @property
    def relative_path(self) -> str:
        """The canonical relative path."""
        return self._relative_path

    @property
    def full_path(self) -> str:
        """Full path with forward slashes, independent of the host OS."""
        return f"{self.layout.project_path}/{self._relative_path}"

    @property
    def file_name(self) -> str:
        """Last path segment including its extension."""
        return self._relative_path.rpartition(_SEPARATOR)[2]

    @property
    def extension(self) -> str:
        """Extension with a leading dot (eg ``.txt``) or an empty string."""
        name = self.file_name
        dot = name.rfind(".")
        if dot < 0 or dot == len(name) - 1:
            return ""
        return name[dot:]

    @property
    def file_name_without_extension(self) -> str:
        name = self.file_name
        dot = name.rfind(".")
        return name[:dot] if dot >= 0 else name

    @property
    def directory_name(self) -> str:
        """All segments but the last; empty for a single-segment path."""
        return self._relative_path.rpartition(_SEPARATOR)[0]

    @property
    def has_extension(self) -> bool:
        return bool(self.extension)

    @property
    def is_assets_path(self) -> bool:
        lowered = self._relative_path.lower()
        return lowered == _ASSETS_ROOT or lowered.startswith(_ASSETS_ROOT + _SEPARATOR)

    @property
    def is_packages_path(self) -> bool:
        return self._relative_path.lower().startswith(_PACKAGES_PREFIX)

    def to_folder_path(self) -> "AssetPath":
        """Return the parent folder as a path on the same layout.

        Raises:
            InvalidArgumentError: If the parent is not itself a valid path,
                eg for ``Assets`` or a top-level package folder.
        """
        return AssetPath(self.directory_name, layout=self._layout)

    def equals_ignore_case(self, other: "AssetPath | str") -> bool:
        """Compare relative paths without regard to letter case."""
        return self._relative_path.lower() == str(other).lower()

    @override
    def __eq__(self, other: object) -> bool:
        if isinstance(other, AssetPath):
            return self._relative_path == other._relative_path
        if isinstance(other, str):
            return self._relative_path == other
        return NotImplemented

    @override
    def __hash__(self) -> int:
        return hash(self._relative_path)

    @override
    def __str__(self) -> str:
        return self._relative_path

    @override
    def __repr__(self) -> str:
        return f"AssetPath({self._relative_path!r})"


def parse_path(value: "AssetPath | str | None", *, layout: ProjectLayout | None = None) -> AssetPath:
    """Convert a string to an ``AssetPath``; existing instances are returned as-is.

    Raises:
        NullArgumentError: If ``value`` is ``None``.
        InvalidArgumentError: If ``value`` is a string the constructor rejects.
    """
    if value is None:
        raise NullArgumentError("path")
    if isinstance(value, AssetPath):
        return value
    return AssetPath(value, layout=layout)


__all__ = ["AssetPath", "parse_path"]
