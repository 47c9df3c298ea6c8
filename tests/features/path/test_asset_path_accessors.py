"""
Summary: Tests for AssetPath derived accessors, equality and hashing.
Why: Keep file name and folder derivations stable for asset wrappers.
"""

from __future__ import annotations

import pytest

from assetdb.config.layout import ProjectLayout
from assetdb.features.path import AssetPath, InvalidArgumentError


@pytest.mark.parametrize(
    "path,extension,file_name,stem,directory",
    [
        ("Assets", "", "Assets", "Assets", ""),
        ("Assets/folder", "", "folder", "folder", "Assets"),
        ("Assets/folder/file.txt", ".txt", "file.txt", "file", "Assets/folder"),
        ("Assets/a.b/c.tar.gz", ".gz", "c.tar.gz", "c.tar", "Assets/a.b"),
        ("Assets/dir/.hidden", ".hidden", ".hidden", "", "Assets/dir"),
        ("Assets/dir/trailing.", "", "trailing.", "trailing", "Assets/dir"),
        ("Packages/com.pkg/package.json", ".json", "package.json", "package", "Packages/com.pkg"),
    ],
)
def test_derived_accessors(
    path: str, extension: str, file_name: str, stem: str, directory: str
) -> None:
    """Accessors are pure functions of the relative path."""
    asset_path = AssetPath(path)
    assert asset_path.extension == extension
    assert asset_path.file_name == file_name
    assert asset_path.file_name_without_extension == stem
    assert asset_path.directory_name == directory
    assert asset_path.has_extension is bool(extension)


def test_directory_name_uses_forward_slashes() -> None:
    assert AssetPath("\\Assets\\a\\b\\c.txt").directory_name == "Assets/a/b"


def test_area_flags() -> None:
    """Paths know which top-level area they belong to."""
    assert AssetPath("assets/x").is_assets_path
    assert not AssetPath("assets/x").is_packages_path
    assert AssetPath("Packages/p/x").is_packages_path
    assert not AssetPath("Packages/p/x").is_assets_path


def test_to_folder_path_keeps_layout(layout: ProjectLayout) -> None:
    """The parent folder resolves against the same layout."""
    folder = AssetPath("Assets/sub/file.txt", layout=layout).to_folder_path()
    assert folder == "Assets/sub"
    assert folder.layout is layout


def test_to_folder_path_of_top_level_package_raises() -> None:
    """``Packages`` on its own is not a recognized path."""
    with pytest.raises(InvalidArgumentError):
        _ = AssetPath("Packages/com.pkg").to_folder_path()


def test_equality_is_ordinal() -> None:
    """Instances and strings compare by exact relative path."""
    assert AssetPath("Assets/File.txt") == AssetPath("/Assets/File.txt/")
    assert AssetPath("Assets/File.txt") == "Assets/File.txt"
    assert AssetPath("Assets/File.txt") != "assets/file.txt"
    assert AssetPath("Assets/File.txt") != AssetPath("assets/file.txt")
    assert AssetPath("Assets") != 42


def test_equals_ignore_case() -> None:
    assert AssetPath("Assets/File.txt").equals_ignore_case("assets/FILE.TXT")
    assert AssetPath("Assets/File.txt").equals_ignore_case(AssetPath("ASSETS/file.txt"))
    assert not AssetPath("Assets/File.txt").equals_ignore_case("Assets/Other.txt")


def test_layout_does_not_affect_equality(layout: ProjectLayout) -> None:
    other = ProjectLayout.from_project_path("/elsewhere/Project")
    assert AssetPath("Assets/x", layout=layout) == AssetPath("Assets/x", layout=other)


def test_hash_matches_equality() -> None:
    """Equal paths share a hash and deduplicate in sets."""
    paths = {AssetPath("Assets/a"), AssetPath("\\Assets\\a\\"), AssetPath("Assets/b")}
    assert len(paths) == 2
    assert hash(AssetPath("Assets/a")) == hash("Assets/a")


def test_asset_path_is_immutable() -> None:
    """Assigning or deleting attributes fails, so hashes stay valid inside sets."""
    path = AssetPath("Assets/a")
    paths = {path}

    with pytest.raises(AttributeError):
        path._relative_path = "Assets/b"  # pyright: ignore[reportAttributeAccessIssue]
    with pytest.raises(AttributeError):
        del path._layout  # pyright: ignore[reportAttributeAccessIssue]
    with pytest.raises(AttributeError):
        path.extra = 1  # pyright: ignore[reportAttributeAccessIssue]

    assert path == "Assets/a"
    assert path in paths


def test_string_conversions() -> None:
    path = AssetPath("\\Assets\\folder/")
    assert str(path) == "Assets/folder"
    assert path.relative_path == "Assets/folder"
    assert repr(path) == "AssetPath('Assets/folder')"
