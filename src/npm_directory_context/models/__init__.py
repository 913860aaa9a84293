"""Data models produced by directory context resolution."""

from __future__ import annotations

from .directory_context import DirectoryContext, MultiPackageContext, SinglePackageContext
from .npm_package import NpmPackage, package_depth, sort_packages_by_depth

__all__ = [
    "DirectoryContext",
    "MultiPackageContext",
    "NpmPackage",
    "SinglePackageContext",
    "package_depth",
    "sort_packages_by_depth",
]
