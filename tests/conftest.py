"""Shared pytest fixtures and test helpers for npm-directory-context tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


def write_package(directory: Path, manifest: dict[str, Any] | None = None, **fields: Any) -> Path:
    """Create ``directory`` with a package.json and return the manifest path."""
    directory.mkdir(parents=True, exist_ok=True)
    data = dict(manifest or {})
    data.update(fields)
    package_json_path = directory / "package.json"
    package_json_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return package_json_path


class InMemoryHost:
    """``DirectoryContextHost`` over a dict of files, for tests that avoid the disk."""

    def __init__(self, files: dict[str, str], symlinks: dict[str, str] | None = None) -> None:
        self.files = {Path(path): content for path, content in files.items()}
        self.symlinks = {Path(link): Path(target) for link, target in (symlinks or {}).items()}
        self.directories: set[Path] = set()
        for path in [*self.files, *self.symlinks.values()]:
            self.directories.update(path.parents)
        for target in self.symlinks.values():
            self.directories.add(target)
        for link in self.symlinks:
            self.directories.update(link.parents)

    def realpath(self, path: Path) -> Path:
        for link, target in self.symlinks.items():
            if path == link or link in path.parents:
                return target / path.relative_to(link)
        return path

    def exists(self, path: Path) -> bool:
        return self.is_file(path) or self.is_directory(path)

    def is_file(self, path: Path) -> bool:
        return self.realpath(path) in self.files

    def is_directory(self, path: Path) -> bool:
        return self.realpath(path) in self.directories

    def is_symlink(self, path: Path) -> bool:
        return path in self.symlinks

    def read_text(self, path: Path) -> str:
        try:
            return self.files[self.realpath(path)]
        except KeyError:
            raise FileNotFoundError(str(path)) from None

    def list_directory(self, path: Path) -> list[str]:
        directory = self.realpath(path)
        if directory not in self.directories:
            raise FileNotFoundError(str(path))
        entries = {
            p.name
            for p in [*self.files, *self.directories, *self.symlinks]
            if p.parent == directory and p != directory
        }
        return sorted(entries)


@pytest.fixture
def workspace_root(tmp_path: Path) -> Path:
    """Workspace root with ``packages/a`` and ``packages/b`` member packages."""
    root = tmp_path / "repo"
    write_package(root / "packages" / "a", name="a")
    write_package(root / "packages" / "b", name="b")
    return root


@pytest.fixture(autouse=True)
def _no_settings_file(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep resolution on built-in defaults unless a test names a settings file."""
    monkeypatch.delenv("NPM_DIRECTORY_CONTEXT_CONFIG", raising=False)
