"""Filesystem capability consumed by the resolvers.

Every disk access made while resolving a directory context goes through a
``DirectoryContextHost``. Path arithmetic (parent directory, joining) stays
on ``pathlib`` and never touches the disk, so an in-memory host only needs to
answer the questions below.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Protocol


class DirectoryContextHost(Protocol):
    """Structural protocol for the filesystem operations the resolvers need."""

    def exists(self, path: Path) -> bool: ...

    def is_file(self, path: Path) -> bool: ...

    def is_directory(self, path: Path) -> bool: ...

    def is_symlink(self, path: Path) -> bool: ...

    def read_text(self, path: Path) -> str: ...

    def list_directory(self, path: Path) -> list[str]: ...

    def realpath(self, path: Path) -> Path: ...


class LocalFileSystemHost:
    """``DirectoryContextHost`` backed by the local filesystem."""

    def exists(self, path: Path) -> bool:
        return path.exists()

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def is_directory(self, path: Path) -> bool:
        return path.is_dir()

    def is_symlink(self, path: Path) -> bool:
        return path.is_symlink()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8")

    def list_directory(self, path: Path) -> list[str]:
        """Return entry names sorted so that expansion order is reproducible."""
        return sorted(os.listdir(path))

    def realpath(self, path: Path) -> Path:
        return Path(os.path.realpath(path))
