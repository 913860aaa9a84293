"""Tests for package descriptors, depth ordering and context variants."""

from pathlib import Path

import pytest

from npm_directory_context.models import (
    MultiPackageContext,
    NpmPackage,
    SinglePackageContext,
    sort_packages_by_depth,
)


def make_package(directory: str, name: str | None = None) -> NpmPackage:
    manifest = {"name": name} if name else {}
    return NpmPackage.from_manifest(Path(directory) / "package.json", manifest, "{}")


class TestNpmPackage:
    def test_display_name_from_manifest(self) -> None:
        pkg = make_package("/repo/packages/a", name="@scope/a")
        assert pkg.display_name == "@scope/a"
        assert pkg.name == "@scope/a"
        assert pkg.directory_path == Path("/repo/packages/a")

    def test_display_name_falls_back_to_manifest_path(self) -> None:
        pkg = make_package("/repo/packages/a")
        assert pkg.display_name == str(Path("/repo/packages/a/package.json"))
        assert pkg.name is None

    def test_empty_name_falls_back_to_manifest_path(self) -> None:
        pkg = make_package("/repo", name="")
        assert pkg.display_name == str(Path("/repo/package.json"))

    def test_directory_must_be_manifest_parent(self) -> None:
        with pytest.raises(ValueError):
            NpmPackage(
                display_name="a",
                directory_path=Path("/repo/other"),
                package_json={},
                package_json_path=Path("/repo/packages/a/package.json"),
                package_json_content="{}",
            )

    def test_is_immutable(self) -> None:
        pkg = make_package("/repo", name="root")
        with pytest.raises(AttributeError):
            pkg.display_name = "other"  # type: ignore[misc]


class TestSortPackagesByDepth:
    def test_stable_for_equal_depths(self) -> None:
        a = make_package("/repo/x/a", name="A")
        b = make_package("/repo/b", name="B")
        c = make_package("/repo/y/c", name="C")
        d = make_package("/repo/d", name="D")

        ordered = sort_packages_by_depth([a, b, c, d])

        assert [p.display_name for p in ordered] == ["B", "D", "A", "C"]

    def test_returns_new_list(self) -> None:
        packages = [make_package("/repo/x/a", name="A"), make_package("/repo/b", name="B")]
        ordered = sort_packages_by_depth(packages)
        assert [p.display_name for p in packages] == ["A", "B"]
        assert [p.display_name for p in ordered] == ["B", "A"]


class TestDirectoryContext:
    def test_variant_tags(self) -> None:
        root = make_package("/repo", name="root")
        assert SinglePackageContext(npm_package=root).kind == "single"
        multi = MultiPackageContext(root_package=root, packages=(), source="workspaces")
        assert multi.kind == "multi"

    def test_multi_rejects_root_as_member(self) -> None:
        root = make_package("/repo", name="root")
        with pytest.raises(ValueError):
            MultiPackageContext(root_package=root, packages=(root,), source="workspaces")
