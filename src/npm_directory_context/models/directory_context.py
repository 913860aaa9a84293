"""Directory context variants: a standalone package or a multi-package root."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Literal, TypeAlias

from .npm_package import NpmPackage


@dataclass(frozen=True)
class SinglePackageContext:
    """The directory belongs to one standalone package."""

    kind: ClassVar[Literal["single"]] = "single"

    npm_package: NpmPackage


@dataclass(frozen=True)
class MultiPackageContext:
    """The directory belongs to a workspace root with member packages.

    ``packages`` never contains ``root_package`` and is ordered by ascending
    directory depth. ``source`` names the convention that produced the members.
    """

    kind: ClassVar[Literal["multi"]] = "multi"

    root_package: NpmPackage
    packages: tuple[NpmPackage, ...]
    source: str

    def __post_init__(self) -> None:
        root_directory = self.root_package.directory_path
        if any(pkg.directory_path == root_directory for pkg in self.packages):
            raise ValueError("Member packages must not include the root package")


DirectoryContext: TypeAlias = SinglePackageContext | MultiPackageContext
